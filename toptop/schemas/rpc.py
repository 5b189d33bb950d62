"""Request/response payloads for the RPC procedures consumed by the video page."""
from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

COMMENT_MAX_LENGTH = 500


class _RpcModel(BaseModel):
    # Wire names follow the browser client (camelCase); Python code may use either.
    model_config = ConfigDict(populate_by_name=True)


class LikeCountResponse(_RpcModel):
    count: int


class LikeToggleRequest(_RpcModel):
    video_id: UUID = Field(..., alias="videoId")
    is_liked: bool = Field(..., alias="isLiked")


class LikeToggleResponse(_RpcModel):
    video_id: UUID = Field(..., alias="videoId")
    is_liked: bool = Field(..., alias="isLiked")
    count: int


class FollowToggleRequest(_RpcModel):
    following_id: UUID = Field(..., alias="followingId")
    is_followed: bool = Field(..., alias="isFollowed")


class FollowToggleResponse(_RpcModel):
    following_id: UUID = Field(..., alias="followingId")
    is_followed: bool = Field(..., alias="isFollowed")


class CommentPostRequest(_RpcModel):
    video_id: UUID = Field(..., alias="videoId")
    # Length rules apply to the trimmed text and are enforced by the comment service.
    content: str


__all__ = [
    "COMMENT_MAX_LENGTH",
    "LikeCountResponse",
    "LikeToggleRequest",
    "LikeToggleResponse",
    "FollowToggleRequest",
    "FollowToggleResponse",
    "CommentPostRequest",
]
