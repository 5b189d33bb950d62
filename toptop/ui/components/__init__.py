"""Expose reusable UI components."""
from __future__ import annotations

from . import cards, feedback, icons, layout, sidebar, video

__all__ = [
    "cards",
    "feedback",
    "icons",
    "layout",
    "sidebar",
    "video",
]
