"""Timecode normalization: TTML time expressions → canonical HH:mm:ss.mmm.

WHY: TTML producers encode times in several ways ("00:01:04.240",
"1.405s", "00:00:05", "1500ms"), and some EBU-TT generators add a
10- or 20-hour block offset per programme segment. SRT needs one fixed
format, so every token is reduced to integer milliseconds and formatted
back out.

HOW: parse_timecode() tries the encodings in priority order:
  1. Clock-style matching the canonical pattern exactly, with the
     10/20-hour offset correction applied.
  2. Seconds-style: a number with a literal "s" suffix.
  3. Fallback: other clock-style shapes (no fraction, 1 or 4+ fraction
     digits, also offset-corrected) and offset times with h/m/ms metrics.
Anything else raises InvalidTimecodeError.

RULES:
- Clock-style times are durations since zero, never wall-clock times
- Offset correction: hours in [10, 20) lose 10 h; hours >= 20 lose 20 h
- The offset correction is a producer-specific heuristic; callers can turn
  it off with hour_offset_correction=False
- Output is fixed width (at least 2 hour digits, 3 millisecond digits)
- Frame ("f") and tick ("t") based times are not supported
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ttml2srt.core.errors import InvalidTimecodeError

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

CANONICAL_RE = re.compile(r"^(\d{2}):(\d{2}):(\d{2})\.(\d{3})$")
SECONDS_RE = re.compile(r"^(\d+(?:\.\d+)?)s$")
CLOCK_RE = re.compile(r"^(\d{2,}):(\d{2}):(\d{2})(?:\.(\d+))?$")
OFFSET_RE = re.compile(r"^(\d+(?:\.\d+)?)(h|m|ms)$")

_METRIC_MS = {
    "h": MS_PER_HOUR,
    "m": MS_PER_MINUTE,
    "ms": 1,
}


def _to_ms(value: str, unit_ms: int) -> int:
    """Convert a decimal string in the given unit to whole milliseconds."""
    try:
        amount = Decimal(value) * unit_ms
    except InvalidOperation as e:
        raise InvalidTimecodeError(value) from e
    return int(amount.to_integral_value(rounding=ROUND_HALF_UP))


def _clock_to_ms(hours: str, minutes: str, seconds: str, fraction: str) -> int:
    ms = int(hours) * MS_PER_HOUR + int(minutes) * MS_PER_MINUTE + int(seconds) * MS_PER_SECOND
    if fraction:
        ms += _to_ms("0." + fraction, MS_PER_SECOND)
    return ms


def correct_hour_offset(ms: int) -> int:
    """Remove a 10- or 20-hour EBU-TT segment offset from a clock time.

    Hours below 10 pass through unchanged.
    """
    hours = ms // MS_PER_HOUR
    if 10 <= hours < 20:
        return ms - 10 * MS_PER_HOUR
    if hours >= 20:
        return ms - 20 * MS_PER_HOUR
    return ms


def parse_timecode(raw: str, hour_offset_correction: bool = True) -> int:
    """Parse a raw TTML time expression into milliseconds.

    Args:
        raw: Timecode token as found in a begin/end attribute.
        hour_offset_correction: Apply the 10/20-hour offset heuristic to
            clock-style times.

    Returns:
        Non-negative duration in milliseconds.

    Raises:
        InvalidTimecodeError: If the token matches no supported encoding.
    """
    token = (raw or "").strip()

    # Clock-style "00:01:04.240"
    match = CANONICAL_RE.match(token)
    if match:
        ms = _clock_to_ms(*match.groups())
        return correct_hour_offset(ms) if hour_offset_correction else ms

    # Seconds-style "1.405s"
    match = SECONDS_RE.match(token)
    if match:
        return _to_ms(match.group(1), MS_PER_SECOND)

    # Other clock shapes: "00:00:05", "00:00:05.5"
    match = CLOCK_RE.match(token)
    if match:
        hours, minutes, seconds, fraction = match.groups()
        ms = _clock_to_ms(hours, minutes, seconds, fraction or "")
        return correct_hour_offset(ms) if hour_offset_correction else ms

    # Offset times "1.5h", "90m", "1500ms"
    match = OFFSET_RE.match(token)
    if match:
        value, metric = match.groups()
        return _to_ms(value, _METRIC_MS[metric])

    raise InvalidTimecodeError(token)


def format_timecode(ms: int) -> str:
    """Format milliseconds as HH:mm:ss.mmm."""
    hours, rest = divmod(ms, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds, millis = divmod(rest, MS_PER_SECOND)
    return "{:02d}:{:02d}:{:02d}.{:03d}".format(hours, minutes, seconds, millis)


def normalize_timecode(raw: str, hour_offset_correction: bool = True) -> str:
    """Normalize a raw timecode token to the canonical HH:mm:ss.mmm form.

    >>> normalize_timecode("10:00:05.000")
    '00:00:05.000'
    >>> normalize_timecode("1.405s")
    '00:00:01.405'
    """
    return format_timecode(parse_timecode(raw, hour_offset_correction))
