"""Business logic for video likes."""
from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Like, Video

logger = logging.getLogger(__name__)


def get_video_or_404(db: Session, video_id: UUID) -> Video:
    video = db.get(Video, video_id)
    if video is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found")
    return video


def count_likes(db: Session, *, video_id: UUID) -> int:
    count = db.scalar(select(func.count()).select_from(Like).where(Like.video_id == video_id))
    return int(count or 0)


def has_liked(db: Session, *, user_id: UUID, video_id: UUID) -> bool:
    return (
        db.scalar(select(Like.user_id).where(Like.user_id == user_id, Like.video_id == video_id).limit(1))
        is not None
    )


def set_like_state(db: Session, *, video_id: UUID, user_id: UUID, should_like: bool) -> int:
    """Make the like row match ``should_like`` and return the new like count.

    Asking for the state that already holds is a successful no-op.
    """

    get_video_or_404(db, video_id)

    existing = db.get(Like, (user_id, video_id))
    if should_like and existing is None:
        db.add(Like(user_id=user_id, video_id=video_id))
    elif not should_like and existing is not None:
        db.delete(existing)
    else:
        return count_likes(db, video_id=video_id)

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update like for video %s", video_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update like") from exc

    return count_likes(db, video_id=video_id)


__all__ = ["get_video_or_404", "count_likes", "has_liked", "set_like_state"]
