"""Export page routers for composition."""
from __future__ import annotations

from . import home, video

__all__ = ["home", "video"]
