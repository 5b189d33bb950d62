"""Server-side loading for the video detail page and the home feed."""
from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from ..config import get_settings
from ..database import sibling_session
from ..models import Comment, Follow, Like, User, Video
from ..schemas import VideoCard, VideoDetail, VideoPage
from .comment_service import list_video_comments
from .follow_service import is_following
from .like_service import count_likes, has_liked
from .user_service import summarize_user

logger = logging.getLogger(__name__)


def parse_identifier(value: Any) -> UUID | None:
    """Return ``value`` as a UUID, or ``None`` when it cannot be one."""

    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if not stripped:
        return None
    try:
        return UUID(stripped)
    except ValueError:
        return None


def build_share_urls(host: str | None, video_id: UUID) -> tuple[str, str]:
    """Return ``(origin, href)`` for a video's shareable link.

    Hosts containing ``localhost`` are served over plain http. This is only
    used for display and clipboard copy, never for authorization.
    """

    if not host:
        host = urlparse(get_settings().public_base_url).netloc
    scheme = "http" if "localhost" in host else "https"
    origin = f"{scheme}://{host}"
    return origin, f"{origin}/video/{video_id}"


def _viewer_liked(db: Session, user_id: UUID, video_id: UUID) -> bool:
    with sibling_session(db) as session:
        return has_liked(session, user_id=user_id, video_id=video_id)


def _viewer_follows(db: Session, follower_id: UUID, following_id: UUID) -> bool:
    with sibling_session(db) as session:
        return is_following(session, follower_id=follower_id, following_id=following_id)


async def load_video_page(
    db: Session,
    *,
    video_id: str | None,
    viewer: User | None,
    host: str | None,
) -> VideoPage | None:
    """Fetch one video with its author, comments, like count and viewer flags.

    Returns ``None`` when the id is missing, malformed or unknown; callers turn
    that into a not-found response.
    """

    identifier = parse_identifier(video_id)
    if identifier is None:
        return None

    video = db.scalar(select(Video).options(joinedload(Video.user)).where(Video.id == identifier))
    if video is None:
        logger.debug("Video %s not found", identifier)
        return None

    like_count = count_likes(db, video_id=video.id)
    comments = list_video_comments(db, video_id=video.id)

    liked_by_me = False
    followed_by_me = False
    if viewer is not None:
        liked_by_me, followed_by_me = await asyncio.gather(
            asyncio.to_thread(_viewer_liked, db, viewer.id, video.id),
            asyncio.to_thread(_viewer_follows, db, viewer.id, video.user_id),
        )

    origin, href = build_share_urls(host, video.id)
    detail = VideoDetail(
        id=video.id,
        video_url=video.video_url,
        cover_url=video.cover_url,
        caption=video.caption,
        like_count=like_count,
        user=summarize_user(video.user),
        comments=comments,
        liked_by_me=liked_by_me,
        followed_by_me=followed_by_me,
    )
    return VideoPage(video=detail, origin=origin, href=href)


def list_feed_cards(
    db: Session,
    *,
    viewer_id: UUID | None = None,
    following_only: bool = False,
    limit: int = 20,
) -> list[VideoCard]:
    """Return the newest videos, optionally only those by accounts the viewer follows."""

    like_count = select(func.count()).select_from(Like).where(Like.video_id == Video.id).scalar_subquery()
    comment_count = select(func.count()).select_from(Comment).where(Comment.video_id == Video.id).scalar_subquery()

    stmt = (
        select(Video, like_count, comment_count)
        .options(joinedload(Video.user))
        .order_by(Video.created_at.desc(), Video.id)
        .limit(limit)
    )
    if following_only:
        if viewer_id is None:
            return []
        followed = select(Follow.following_id).where(Follow.follower_id == viewer_id)
        stmt = stmt.where(Video.user_id.in_(followed))

    cards: list[VideoCard] = []
    for video, likes, comments in db.execute(stmt).all():
        cards.append(
            VideoCard(
                id=video.id,
                cover_url=video.cover_url,
                caption=video.caption,
                like_count=int(likes or 0),
                comment_count=int(comments or 0),
                created_at=video.created_at,
                user=summarize_user(video.user),
            )
        )
    return cards


__all__ = ["parse_identifier", "build_share_urls", "load_video_page", "list_feed_cards"]
