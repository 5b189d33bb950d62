"""Business logic for video comment threads."""
from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from ..models import Comment, User
from ..schemas import COMMENT_MAX_LENGTH, CommentItem
from .like_service import get_video_or_404
from .user_service import summarize_user

logger = logging.getLogger(__name__)


def _to_item(comment: Comment) -> CommentItem:
    return CommentItem(
        id=comment.id,
        content=comment.content,
        created_at=comment.created_at,
        user=summarize_user(comment.user),
    )


def list_video_comments(db: Session, *, video_id: UUID) -> list[CommentItem]:
    """Return every comment on a video, newest first."""

    stmt = (
        select(Comment)
        .options(joinedload(Comment.user))
        .where(Comment.video_id == video_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
    )
    return [_to_item(comment) for comment in db.scalars(stmt)]


def create_comment(db: Session, *, video_id: UUID, author: User, content: str) -> CommentItem:
    video = get_video_or_404(db, video_id)
    text = (content or "").strip()
    if not text:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Comment cannot be empty")
    if len(text) > COMMENT_MAX_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Comment must be at most {COMMENT_MAX_LENGTH} characters",
        )

    comment = Comment(video_id=video.id, user_id=author.id, content=text)
    db.add(comment)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to add comment on video %s", video_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to add comment") from exc

    db.refresh(comment)
    return _to_item(comment)


__all__ = ["list_video_comments", "create_comment"]
