"""RPC procedures backing the video page interactions.

Procedure names are part of the path (``/api/rpc/like.toggle``) so the browser
script and :class:`toptop.clients.RpcClient` address them the same way.
"""
from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import (
    CommentItem,
    CommentPostRequest,
    FollowToggleRequest,
    FollowToggleResponse,
    LikeCountResponse,
    LikeToggleRequest,
    LikeToggleResponse,
)
from ..services import (
    count_likes,
    create_comment,
    get_current_user,
    get_video_or_404,
    list_video_comments,
    set_follow_state,
    set_like_state,
)

router = APIRouter(prefix="/api/rpc", tags=["rpc"])

logger = logging.getLogger(__name__)


@router.get("/like.count", response_model=LikeCountResponse)
async def like_count_procedure(
    video_id: UUID = Query(..., alias="videoId"),
    db: Session = Depends(get_session),
) -> LikeCountResponse:
    get_video_or_404(db, video_id)
    return LikeCountResponse(count=count_likes(db, video_id=video_id))


@router.post("/like.toggle", response_model=LikeToggleResponse)
async def like_toggle_procedure(
    payload: LikeToggleRequest,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> LikeToggleResponse:
    count = set_like_state(db, video_id=payload.video_id, user_id=current_user.id, should_like=payload.is_liked)
    logger.info("User %s set like=%s on video %s", current_user.id, payload.is_liked, payload.video_id)
    return LikeToggleResponse(video_id=payload.video_id, is_liked=payload.is_liked, count=count)


@router.post("/follow.toggle", response_model=FollowToggleResponse)
async def follow_toggle_procedure(
    payload: FollowToggleRequest,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FollowToggleResponse:
    set_follow_state(db, follower=current_user, target_id=payload.following_id, should_follow=payload.is_followed)
    logger.info("User %s set follow=%s on user %s", current_user.id, payload.is_followed, payload.following_id)
    return FollowToggleResponse(following_id=payload.following_id, is_followed=payload.is_followed)


@router.get("/comment.by-video", response_model=list[CommentItem])
async def comments_by_video_procedure(
    video_id: UUID = Query(..., alias="videoID"),
    db: Session = Depends(get_session),
) -> list[CommentItem]:
    get_video_or_404(db, video_id)
    return list_video_comments(db, video_id=video_id)


@router.post("/comment.post", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def comment_post_procedure(
    payload: CommentPostRequest,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> CommentItem:
    return create_comment(db, video_id=payload.video_id, author=current_user, content=payload.content)


__all__ = ["router"]
