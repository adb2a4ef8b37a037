"""Tests for prompt text formatting helpers."""

from __future__ import annotations

import pytest

from coaching_engine.context.formatting import (
    format_duration,
    format_number,
    format_pace,
    truncate_text,
)


class TestFormatPace:
    @pytest.mark.parametrize(
        "seconds,expected",
        [(270, "4:30"), (105, "1:45"), (300, "5:00"), (59.6, "1:00"), (3.0, "0:03")],
    )
    def test_pace(self, seconds: float, expected: str) -> None:
        assert format_pace(seconds) == expected


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (5400, "1:30:00"),
            (3600, "1:00:00"),
            (2730, "45:30"),
            (3599.6, "1:00:00"),
            (61, "1:01"),
            (0, "0:00"),
        ],
    )
    def test_duration(self, seconds: float, expected: str) -> None:
        assert format_duration(seconds) == expected


class TestFormatNumber:
    def test_drops_trailing_zero(self) -> None:
        assert format_number(72.0) == "72"

    def test_keeps_fraction(self) -> None:
        assert format_number(7.5) == "7.5"


class TestTruncateText:
    def test_short_text_unchanged(self) -> None:
        assert truncate_text("Half Ironman") == "Half Ironman"

    def test_long_text_cut_with_ellipsis(self) -> None:
        result = truncate_text("x" * 150)
        assert len(result) == 100
        assert result.endswith("...")

    def test_exact_length_not_cut(self) -> None:
        assert truncate_text("y" * 100) == "y" * 100

    def test_collapses_newlines(self) -> None:
        assert truncate_text("line one\n\nline   two") == "line one line two"

    def test_custom_limit(self) -> None:
        assert truncate_text("abcdefghij", max_length=8) == "abcde..."

    def test_none_and_empty(self) -> None:
        assert truncate_text(None) == ""
        assert truncate_text("") == ""
