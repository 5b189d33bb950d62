"""Convenience exports for ORM models."""
from .follow import Follow
from .user import User
from .video import Comment, Like, Video

__all__ = [
    "Comment",
    "Follow",
    "Like",
    "User",
    "Video",
]
