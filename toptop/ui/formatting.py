"""Display helpers shared by the UI components."""
from __future__ import annotations

import re
import unicodedata
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

_COMPACT_UNITS = ((1_000, "K"), (1_000_000, "M"), (1_000_000_000, "B"), (1_000_000_000_000, "T"))
_WHITESPACE = re.compile(r"\s+")
# Letters NFKD leaves intact but which have a plain ASCII reading.
_TRANSLITERATIONS = str.maketrans({"đ": "d", "Đ": "D", "ø": "o", "Ø": "O", "ł": "l", "Ł": "L"})


def _round_half_up(value: Decimal, places: int) -> Decimal:
    # Halves round away from zero, matching the browser's Intl.NumberFormat.
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_number(value: int | float) -> str:
    """Render a count in compact English notation: 999, 1.2K, 15K, 3.4M."""

    number = abs(Decimal(str(value)))
    sign = "-" if value < 0 else ""
    if number < 1_000:
        return f"{sign}{int(_round_half_up(number, 0))}"

    index = len(_COMPACT_UNITS) - 1
    while number < _COMPACT_UNITS[index][0]:
        index -= 1
    threshold, suffix = _COMPACT_UNITS[index]
    scaled = number / threshold
    rounded = _round_half_up(scaled, 1 if scaled < 10 else 0)
    if rounded >= 1_000 and index + 1 < len(_COMPACT_UNITS):
        threshold, suffix = _COMPACT_UNITS[index + 1]
        rounded = _round_half_up(number / threshold, 1)
    return f"{sign}{rounded.normalize():f}{suffix}"


def format_account_name(name: str) -> str:
    """Turn a display name into a handle: no accents, no spaces, lowercase."""

    decomposed = unicodedata.normalize("NFKD", name.translate(_TRANSLITERATIONS))
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return _WHITESPACE.sub("", stripped).lower()


def format_comment_date(value: datetime) -> str:
    """Day-first short date, e.g. ``5/3/2022``."""

    return f"{value.day}/{value.month}/{value.year}"


__all__ = ["format_number", "format_account_name", "format_comment_date"]
