"""Convenience exports for service layer."""
from .auth_service import (
    ACCESS_TOKEN_COOKIE,
    create_access_token,
    decode_access_token,
    get_current_user,
    get_optional_user,
)
from .comment_service import create_comment, list_video_comments
from .follow_service import is_following, set_follow_state
from .like_service import count_likes, get_video_or_404, has_liked, set_like_state
from .user_service import list_suggested_accounts, summarize_user
from .video_service import build_share_urls, list_feed_cards, load_video_page, parse_identifier

__all__ = [
    "ACCESS_TOKEN_COOKIE",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_optional_user",
    "create_comment",
    "list_video_comments",
    "is_following",
    "set_follow_state",
    "count_likes",
    "get_video_or_404",
    "has_liked",
    "set_like_state",
    "list_suggested_accounts",
    "summarize_user",
    "build_share_urls",
    "list_feed_cards",
    "load_video_page",
    "parse_identifier",
]
