"""View models handed from the page loaders to the rendered pages."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    """Author data shown next to videos and comments."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    image: str


class CommentItem(BaseModel):
    id: UUID
    content: str
    created_at: datetime
    user: UserSummary


class VideoDetail(BaseModel):
    """A single video with everything the detail page renders.

    ``liked_by_me`` and ``followed_by_me`` are computed per request from the
    viewer's session and are never stored.
    """

    id: UUID
    video_url: str
    cover_url: str
    caption: str
    like_count: int = 0
    user: UserSummary
    comments: list[CommentItem] = Field(default_factory=list)
    liked_by_me: bool = False
    followed_by_me: bool = False


class VideoPage(BaseModel):
    video: VideoDetail
    origin: str
    href: str


class VideoCard(BaseModel):
    """Compact video entry used by the home feed grid."""

    id: UUID
    cover_url: str
    caption: str
    like_count: int = 0
    comment_count: int = 0
    created_at: datetime
    user: UserSummary


__all__ = ["UserSummary", "CommentItem", "VideoDetail", "VideoPage", "VideoCard"]
