"""Formatting helpers for the prompt context text."""

from __future__ import annotations

from coaching_engine.models.enums import MAX_TEXT_LENGTH

_ELLIPSIS = "..."


def format_pace(seconds: float) -> str:
    """Format a pace in seconds as 'M:SS', e.g. 270 -> '4:30'."""
    total_secs = int(round(seconds))
    minutes, secs = divmod(total_secs, 60)
    return f"{minutes}:{secs:02d}"


def format_duration(seconds: float) -> str:
    """Format a duration as 'H:MM:SS', or 'M:SS' when under an hour.

    Args:
        seconds: Duration in seconds.

    Returns:
        Formatted string, e.g. '1:05:00' or '45:30'.
    """
    if seconds <= 0:
        return "0:00"
    total_secs = int(round(seconds))
    hours = total_secs // 3600
    minutes = (total_secs % 3600) // 60
    secs = total_secs % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_number(value: float) -> str:
    """Shortest plain rendering: 72.0 -> '72', 7.5 -> '7.5'."""
    return f"{value:g}"


def truncate_text(text: str | None, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Collapse *text* to one line and cap it at *max_length* characters.

    Text that is cut ends in '...' and the result, ellipsis included, is
    never longer than *max_length*.
    """
    if not text:
        return ""
    single_line = " ".join(text.split())
    if len(single_line) <= max_length:
        return single_line
    if max_length <= len(_ELLIPSIS):
        return single_line[:max_length]
    return single_line[: max_length - len(_ELLIPSIS)].rstrip() + _ELLIPSIS
