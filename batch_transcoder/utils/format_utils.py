"""Durations and byte counts as they appear in transcode log lines and the run summary."""

from datetime import timedelta
from typing import Optional

_SIZE_UNITS = ("KB", "MB", "GB", "TB", "PB")


def format_timedelta(elapsed: Optional[timedelta]) -> str:
    """`HH:MM:SS`, hours not wrapped at 24. Anything that is not a timedelta reads as zero."""
    seconds = int(elapsed.total_seconds()) if isinstance(elapsed, timedelta) else 0
    minutes, seconds = divmod(max(seconds, 0), 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def formatted_size(size_bytes: int) -> str:
    """Binary units with two decimals; whole values drop the decimals (`2 MB`)."""
    if size_bytes < 1024:
        return f"{max(size_bytes, 0)} B"

    value = float(size_bytes)
    for unit in _SIZE_UNITS:
        value /= 1024
        if value < 1024 or unit == _SIZE_UNITS[-1]:
            break
    text = f"{value:.2f}"
    if text.endswith(".00"):
        text = text[:-3]
    return f"{text} {unit}"
