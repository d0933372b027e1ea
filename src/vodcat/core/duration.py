"""Duration codec for entry documents.

Decoding is lenient: a JSON number of seconds or a compact string such as
"1h2m3s" or "2 hours 5min". Encoding is canonical: whole seconds rendered
as hours/minutes/seconds with leading zero components dropped.
"""

from __future__ import annotations

import math
import re
from datetime import timedelta

# Seconds per unit, humantime-style spellings
_UNIT_SECONDS: dict[str, float] = {}
for _names, _seconds in (
    (("nanos", "nsec", "ns"), 1e-9),
    (("micros", "usec", "us", "µs"), 1e-6),
    (("millis", "msec", "ms"), 1e-3),
    (("seconds", "second", "secs", "sec", "s"), 1),
    (("minutes", "minute", "mins", "min", "m"), 60),
    (("hours", "hour", "hrs", "hr", "h"), 3600),
    (("days", "day", "d"), 86400),
    (("weeks", "week", "w"), 604800),
    (("months", "month", "M"), 2_630_016),
    (("years", "year", "y"), 31_557_600),
):
    for _name in _names:
        _UNIT_SECONDS[_name] = _seconds

_TOKEN = re.compile(r"\s*(\d+)\s*([^\d\s]+)")


class DurationError(ValueError):
    """Raised when a value cannot be decoded as a duration."""


def parse_duration_string(text: str) -> timedelta:
    """Parse a compact duration string.

    Args:
        text: String such as "1h2m3s", "90s" or "1 hour 30 min".

    Returns:
        Parsed duration.

    Raises:
        DurationError: On empty input, unknown units or stray characters.
    """
    stripped = text.strip()
    if not stripped:
        raise DurationError("empty duration string")

    total_ns = 0
    pos = 0
    while pos < len(stripped):
        match = _TOKEN.match(stripped, pos)
        if match is None:
            raise DurationError(f"invalid duration string: {text!r}")
        magnitude, unit = match.groups()
        if unit not in _UNIT_SECONDS:
            raise DurationError(f"unknown time unit {unit!r} in {text!r}")
        # Integer nanoseconds keep "1h2m3s" exact; sub-microsecond remainders truncate
        total_ns += int(magnitude) * round(_UNIT_SECONDS[unit] * 1_000_000_000)
        pos = match.end()

    try:
        return timedelta(microseconds=total_ns // 1000)
    except OverflowError as e:
        raise DurationError(f"duration out of range: {text!r}") from e


def from_seconds(seconds: float) -> timedelta:
    """Convert a non-negative seconds count to a duration.

    Raises:
        DurationError: If seconds is negative, not finite, or too large.
    """
    if not math.isfinite(seconds) or seconds < 0:
        raise DurationError(f"invalid seconds value: {seconds}")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise DurationError(f"duration out of range: {seconds}") from e


def decode(value: object) -> timedelta:
    """Decode a duration from its document representation.

    Args:
        value: int/float seconds, a compact string, or an existing timedelta.

    Returns:
        Decoded duration.

    Raises:
        DurationError: If the value has the wrong type or does not parse.
    """
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise DurationError("negative duration")
        return value
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool):
        raise DurationError("duration must be a number or string, got bool")
    if isinstance(value, (int, float)):
        try:
            seconds = float(value)
        except OverflowError as e:
            raise DurationError("duration out of range: integer too large") from e
        return from_seconds(seconds)
    if isinstance(value, str):
        return parse_duration_string(value)
    raise DurationError(f"duration must be a number or string, got {type(value).__name__}")


def encode(duration: timedelta) -> str:
    """Encode a duration in compact form, truncated to whole seconds.

    Examples:
        0 -> "0s", 61 -> "1m1s", 3600 -> "1h0m0s", 7325 -> "2h2m5s"
    """
    if duration < timedelta(0):
        raise ValueError("cannot encode a negative duration")

    secs = duration.days * 86400 + duration.seconds
    h = secs // 3600
    m = (secs % 3600) // 60
    s = secs % 60
    if h > 0:
        return f"{h}h{m}m{s}s"
    if m > 0:
        return f"{m}m{s}s"
    return f"{s}s"
