"""JSON surface for the video detail page data."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import VideoPage
from ..services import get_optional_user, load_video_page

router = APIRouter(prefix="/api/videos", tags=["videos"])


@router.get("/{video_id}", response_model=VideoPage)
async def get_video_page(
    video_id: str,
    request: Request,
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> VideoPage:
    """Return the same view model the detail page renders."""

    page = await load_video_page(db, video_id=video_id, viewer=viewer, host=request.headers.get("host"))
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found")
    return page


__all__ = ["router"]
