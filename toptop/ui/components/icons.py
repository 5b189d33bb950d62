"""Inline SVG icons used across the UI."""
from __future__ import annotations

from markupsafe import Markup


def _svg(path: str, *, classes: str = "h-7 w-7", viewbox: str = "0 0 24 24") -> Markup:
    return Markup(
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}" class="{classes}" '
        f'fill="currentColor" aria-hidden="true">{path}</svg>'
    )


def home(*, filled: bool, classes: str = "h-7 w-7") -> Markup:
    if filled:
        return _svg('<path d="M12 3 2 11.5h3V21h5.5v-6h3v6H19v-9.5h3z"/>', classes=classes)
    return _svg(
        '<path d="M12 3 2 11.5h3V21h5.5v-6h3v6H19v-9.5h3zm5 16h-1.5v-6h-7v6H7v-8.7l5-4.3 5 4.3z"/>',
        classes=classes,
    )


def following(*, filled: bool, classes: str = "h-7 w-7") -> Markup:
    if filled:
        return _svg(
            '<path d="M9 11a4 4 0 1 0 0-8 4 4 0 0 0 0 8zm0 2c-4 0-7 2-7 5v3h14v-3c0-3-3-5-7-5zm8-5 5 4-5 4v-3h-3v-2h3z"/>',
            classes=classes,
        )
    return _svg(
        '<path d="M9 5a2 2 0 1 1 0 4 2 2 0 0 1 0-4zm0-2a4 4 0 1 0 0 8 4 4 0 0 0 0-8zm0 10c-4 0-7 2-7 5v3h14v-3'
        'c0-3-3-5-7-5zm-5 6v-1c0-1.6 2.2-3 5-3s5 1.4 5 3v1zm13-11 5 4-5 4v-3h-3v-2h3z"/>',
        classes=classes,
    )


def verified(*, classes: str = "h-[14px] w-[14px]") -> Markup:
    return _svg(
        '<path d="M8 0a8 8 0 1 0 0 16A8 8 0 0 0 8 0zm3.7 5.7-4.5 4.6a.8.8 0 0 1-1.1 0L4.3 8.5a.8.8 0 1 1 1.1-1.1l1.3 1.3 4-4a.8.8 0 0 1 1 1z"/>',
        classes=classes,
        viewbox="0 0 16 16",
    )


def heart(*, classes: str = "h-5 w-5") -> Markup:
    return _svg(
        '<path d="M12 21s-7.5-4.6-10-9.3C.3 8.4 2.1 4 6.3 4c2.2 0 3.6 1.2 4.5 2.5h2.4C14.1 5.2 15.5 4 17.7 4 21.9 4 23.7 8.4 22 11.7 19.5 16.4 12 21 12 21z"/>',
        classes=classes,
    )


def comment(*, classes: str = "h-5 w-5 -scale-x-100") -> Markup:
    return _svg(
        '<path d="M12 3C6.5 3 2 6.8 2 11.5c0 2.4 1.2 4.6 3.1 6.1L4 21l4.3-2c1.2.4 2.4.5 3.7.5 5.5 0 10-3.8 10-8.5S17.5 3 12 3zM7.5 13a1.5 1.5 0 1 1 0-3 1.5 1.5 0 0 1 0 3zm4.5 0a1.5 1.5 0 1 1 0-3 1.5 1.5 0 0 1 0 3zm4.5 0a1.5 1.5 0 1 1 0-3 1.5 1.5 0 0 1 0 3z"/>',
        classes=classes,
    )


def close(*, classes: str = "h-5 w-5") -> Markup:
    return _svg('<path d="M18.3 5.7 12 12l6.3 6.3-1.4 1.4L10.6 13.4 4.3 19.7l-1.4-1.4L9.2 12 2.9 5.7l1.4-1.4 6.3 6.3 6.3-6.3z"/>', classes=classes)


__all__ = ["home", "following", "verified", "heart", "comment", "close"]
