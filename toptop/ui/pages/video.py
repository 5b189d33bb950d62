"""Video detail page surface."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from toptop.database import get_session
from toptop.models import User
from toptop.services import get_optional_user, load_video_page
from ..template_helpers import render_template

router = APIRouter()


@router.get("/video/{video_id}", response_class=HTMLResponse)
async def video_detail(
    request: Request,
    video_id: str,
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> HTMLResponse:
    page = await load_video_page(db, video_id=video_id, viewer=viewer, host=request.headers.get("host"))
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found")

    return render_template(
        request,
        "video.html",
        {
            "page_title": page.video.caption or page.video.user.name,
            "page": page,
            "video": page.video,
            "follow_visible": viewer is None or viewer.id != page.video.user.id,
        },
        viewer=viewer,
    )
