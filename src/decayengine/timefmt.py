# src/decayengine/timefmt.py
import re
from datetime import datetime

# Display / storage pattern, i.e. yyyy-MM-dd HH:mm
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
TIMESTAMP_PATTERN = "yyyy-MM-dd HH:mm"

# strptime alone accepts single-digit fields and stray padding
_STRICT = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")


class TimestampFormatError(ValueError):
    """Text does not match the yyyy-MM-dd HH:mm pattern or is not a real date/time."""


def parse_timestamp(text: str) -> datetime:
    """
    Parse "2024-05-01 08:30" into a naive datetime.
    No whitespace trimming, no timezone suffix, 24-hour clock only.
    """
    if not _STRICT.fullmatch(text):
        raise TimestampFormatError(f"{text!r} does not match {TIMESTAMP_PATTERN}")
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        # right shape, impossible value (month 13, Feb 30, hour 24, ...)
        raise TimestampFormatError(f"{text!r} is not a valid date/time: {e}") from e


def format_timestamp(dt: datetime) -> str:
    """Render dt in the pattern; seconds and below are dropped."""
    return dt.strftime(TIMESTAMP_FORMAT)
