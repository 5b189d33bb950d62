"""Convenience exports for schema layer."""
from .rpc import (
    COMMENT_MAX_LENGTH,
    CommentPostRequest,
    FollowToggleRequest,
    FollowToggleResponse,
    LikeCountResponse,
    LikeToggleRequest,
    LikeToggleResponse,
)
from .videos import CommentItem, UserSummary, VideoCard, VideoDetail, VideoPage

__all__ = [
    "COMMENT_MAX_LENGTH",
    "CommentItem",
    "CommentPostRequest",
    "FollowToggleRequest",
    "FollowToggleResponse",
    "LikeCountResponse",
    "LikeToggleRequest",
    "LikeToggleResponse",
    "UserSummary",
    "VideoCard",
    "VideoDetail",
    "VideoPage",
]
