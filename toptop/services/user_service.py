"""Helpers for presenting users and picking suggested accounts."""
from __future__ import annotations

from urllib.parse import quote
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import User
from ..schemas import UserSummary

_AVATAR_FALLBACK = "https://ui-avatars.com/api/?background=fe2c55&color=fff&name="


def summarize_user(user: User) -> UserSummary:
    """Collapse optional profile columns into a render-ready summary."""

    name = (user.name or "").strip()
    image = (user.image or "").strip()
    if not image:
        image = _AVATAR_FALLBACK + quote(name or "?")
    return UserSummary(id=user.id, name=name, image=image)


def list_suggested_accounts(db: Session, *, limit: int, exclude_id: UUID | None = None) -> list[UserSummary]:
    """Return the newest accounts, leaving out the viewer."""

    stmt = select(User).order_by(User.created_at.desc(), User.id).limit(limit)
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    return [summarize_user(user) for user in db.scalars(stmt)]


__all__ = ["summarize_user", "list_suggested_accounts"]
