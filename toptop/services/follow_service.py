"""Business logic for follower relationships."""
from __future__ import annotations

import logging
from typing import cast
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Follow, User

logger = logging.getLogger(__name__)


def _get_user_or_404(db: Session, user_id: UUID) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def is_following(db: Session, *, follower_id: UUID, following_id: UUID) -> bool:
    return (
        db.scalar(
            select(Follow.follower_id).where(
                Follow.follower_id == follower_id,
                Follow.following_id == following_id,
            )
        )
        is not None
    )


def set_follow_state(db: Session, *, follower: User, target_id: UUID, should_follow: bool) -> bool:
    """Make the follow row match ``should_follow``.

    Returns ``True`` when a row was added or removed and ``False`` when the
    relationship already had the requested state.
    """

    follower_id = cast(UUID, follower.id)
    if follower_id == target_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot follow yourself")

    _get_user_or_404(db, target_id)

    existing = db.get(Follow, (follower_id, target_id))
    if should_follow and existing is None:
        db.add(Follow(follower_id=follower_id, following_id=target_id))
    elif not should_follow and existing is not None:
        db.delete(existing)
    else:
        return False

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update follow %s -> %s", follower_id, target_id)
        detail = "Unable to follow user" if should_follow else "Unable to unfollow user"
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail) from exc
    return True


__all__ = ["is_following", "set_follow_state"]
