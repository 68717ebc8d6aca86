"""Calendar timestamps for 7Timer init times and hour offsets.

7Timer stamps each run with a compact ``YYYYMMDDHH`` init value and gives
every data point a relative ``timepoint`` in hours. ``add_hours`` applies
its own fixed carry rules rather than ``datetime`` arithmetic, and its
output is what weather_forecast.json carries.
"""

from dataclasses import dataclass, replace

COMPACT_LENGTH = 10
THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


class MalformedTimestampError(ValueError):
    """Raised by strict parsing when a compact timestamp is not YYYYMMDDHH."""


@dataclass(frozen=True)
class Timestamp:
    year: int
    month: int
    day: int
    hour: int
    minute: int = 0
    second: int = 0

    def __str__(self) -> str:
        return format_timestamp(self)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _field(text: str, start: int, end: int) -> int:
    # Non-numeric slices come through as zero.
    try:
        return int(text[start:end])
    except ValueError:
        return 0


def parse_compact(value: str | int, strict: bool = False) -> Timestamp:
    """Parse a compact ``YYYYMMDDHH`` init value.

    Fields are sliced at fixed offsets. In the default lenient mode the
    length is not checked, so malformed input yields garbage fields rather
    than an error. With ``strict=True`` anything other than ten ASCII
    digits raises MalformedTimestampError.
    """
    text = str(value)
    if strict and not (len(text) == COMPACT_LENGTH and text.isascii() and text.isdigit()):
        raise MalformedTimestampError(f"Malformed compact timestamp: {text!r}")
    return Timestamp(
        year=_field(text, 0, 4),
        month=_field(text, 4, 6),
        day=_field(text, 6, 8),
        hour=_field(text, 8, 10),
    )


def format_timestamp(ts: Timestamp) -> str:
    """Render as ``MM/DD/YYYY HH:MM:SS``."""
    return (
        f"{ts.month:02d}/{ts.day:02d}/{ts.year:04d} "
        f"{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )


def format_compact(value: str | int) -> str:
    """2022111812 -> 11/18/2022 12:00:00"""
    return format_timestamp(parse_compact(value))


def add_hours(ts: Timestamp, hours: int) -> Timestamp:
    """Advance ``ts`` by ``hours`` and carry into day, month and year.

    Each carry step runs at most once. Day overflow past 31 is folded
    before the month-length corrections, whatever the month. This is
    enough for the 192 hour span the feeds cover.
    """
    year, month, day, hour = ts.year, ts.month, ts.day, ts.hour + hours
    while hour >= 24:
        hour -= 24
        day += 1

    if day > 31:
        day -= 31
        month += 1

    if month in THIRTY_DAY_MONTHS and day > 30:
        day -= 30
        month += 1

    leap = is_leap_year(year)
    if month == 2 and day > 29 and leap:
        day -= 29
        month += 1
    if month == 2 and day > 28 and not leap:
        day -= 28
        month += 1

    if month > 12:
        month -= 12
        year += 1

    return replace(ts, year=year, month=month, day=day, hour=hour)
