"""Utilities for rendering UI templates with shared context."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

from toptop.config import get_settings
from toptop.models import User
from toptop.services import summarize_user
from . import components

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_BASE_COMPONENTS = {
    "cards": components.cards,
    "feedback": components.feedback,
    "layout": components.layout,
    "sidebar": components.sidebar,
    "video": components.video,
}


def render_template(
    request: Request,
    template_name: str,
    context: dict[str, Any] | None = None,
    *,
    viewer: User | None = None,
    status_code: int = 200,
):
    """Return a TemplateResponse with the shared UI context."""

    base_context: dict[str, Any] = {
        "app_name": get_settings().app_name,
        "components": _BASE_COMPONENTS,
        "page_title": "",
        "viewer": summarize_user(viewer) if viewer is not None else None,
        "signed_in": viewer is not None,
    }
    if context:
        base_context.update(context)

    return templates.TemplateResponse(request, template_name, base_context, status_code=status_code)


__all__ = ["render_template", "templates"]
