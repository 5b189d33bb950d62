"""Tests for the UI display helpers."""
from __future__ import annotations

from datetime import datetime

import pytest

from toptop.ui.formatting import format_account_name, format_comment_date, format_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (999, "999"),
        (1_000, "1K"),
        (1_050, "1.1K"),
        (1_250, "1.3K"),
        (1_260, "1.3K"),
        (10_500, "11K"),
        (15_300, "15K"),
        (999_999, "1M"),
        (2_500_000, "2.5M"),
        (3_000_000_000, "3B"),
    ],
)
def test_format_number_is_compact(value: int, expected: str) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Lan Anh", "lananh"),
        ("Nguyễn Văn Đức", "nguyenvanduc"),
        ("  José   María ", "josemaria"),
        ("", ""),
    ],
)
def test_format_account_name_builds_handle(name: str, expected: str) -> None:
    assert format_account_name(name) == expected


def test_format_comment_date_is_day_first() -> None:
    assert format_comment_date(datetime(2022, 3, 5, 23, 59)) == "5/3/2022"
