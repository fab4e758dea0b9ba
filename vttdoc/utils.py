"""
Shared utility functions for vttdoc.

Timestamp conversion between seconds and the WebVTT "[h:]mm:ss.mmm" form.
"""

import re

# Any number of hour digits, hours optional
TIMESTAMP_PATTERN = r'(?:(\d+):)?(\d{2}):(\d{2}\.\d{3})'
_TIMESTAMP_RE = re.compile(f'^{TIMESTAMP_PATTERN}$')


def timestamp_parts_to_seconds(hours: str, minutes: str, seconds: str) -> float:
    """Combine the captured parts of a timestamp match; hours may be empty or None."""
    return float(seconds) + 60 * int(minutes) + 3600 * int(hours or 0)


def parse_timestamp(timestamp: str) -> float:
    """
    Convert a [h:]mm:ss.mmm timestamp to seconds.

    Args:
        timestamp: Timestamp string, hours optional

    Returns:
        Time in seconds as float

    Raises:
        ValueError: If the string is not a WebVTT timestamp

    Example:
        >>> parse_timestamp("01:30.500")
        90.5
        >>> parse_timestamp("1:01:01.500")
        3661.5
    """
    match = _TIMESTAMP_RE.match(timestamp)
    if not match:
        raise ValueError(f"Invalid timestamp format: {timestamp}")
    return timestamp_parts_to_seconds(*match.groups())


def format_timestamp(seconds: float) -> str:
    """
    Convert seconds to the shortest WebVTT timestamp.

    Minutes and seconds always have 2 digits and milliseconds 3; the
    hours field is left out when it is 0.

    Args:
        seconds: Time in seconds, >= 0

    Returns:
        Timestamp string in mm:ss.mmm or h:mm:ss.mmm format

    Example:
        >>> format_timestamp(0)
        '00:00.000'
        >>> format_timestamp(3661.5)
        '1:01:01.500'
    """
    if seconds < 0:
        raise ValueError(f"Negative time: {seconds}")
    # Round once to whole milliseconds so 59.9996 becomes 01:00.000, not 00:60.000
    total_ms = int(round(seconds * 1000))
    total_seconds, milliseconds = divmod(total_ms, 1000)
    total_minutes, secs = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)

    if hours == 0:
        return f"{minutes:02d}:{secs:02d}.{milliseconds:03d}"
    return f"{hours}:{minutes:02d}:{secs:02d}.{milliseconds:03d}"
