"""Feedback elements like the toast container."""
from __future__ import annotations

from markupsafe import Markup


def toast_container() -> Markup:
    # Populated by the page scripts with "Copied to clipboard", "You need to login", etc.
    return Markup(
        """
        <div id="toast-root" class="pointer-events-none fixed inset-x-0 top-5 z-50 flex flex-col items-center gap-3"></div>
        """
    )


__all__ = ["toast_container"]
