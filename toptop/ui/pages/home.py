"""Home/feed page surface."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from toptop.config import get_settings
from toptop.database import get_session
from toptop.models import User
from toptop.services import get_optional_user, list_feed_cards, list_suggested_accounts
from ..components.sidebar import is_following_feed
from ..template_helpers import render_template

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def feed(
    request: Request,
    following: str | None = Query(None),
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> HTMLResponse:
    """Render the "For You" feed, or the following feed when ``?following`` is set."""

    settings = get_settings()
    viewer_id = viewer.id if viewer is not None else None
    following_feed = is_following_feed(following)

    return render_template(
        request,
        "home.html",
        {
            "page_title": "Following" if following_feed else "For You",
            "following": following_feed,
            "videos": list_feed_cards(
                db,
                viewer_id=viewer_id,
                following_only=following_feed,
                limit=settings.feed_page_size,
            ),
            "suggested_accounts": list_suggested_accounts(
                db,
                limit=settings.suggested_accounts_limit,
                exclude_id=viewer_id,
            ),
        },
        viewer=viewer,
    )
