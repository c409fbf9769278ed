"""Signed time intervals measured in microsecond ticks."""

from dataclasses import dataclass

TICKS_PER_DAY = 86_400_000_000
TICKS_PER_HOUR = 3_600_000_000
TICKS_PER_MINUTE = 60_000_000
TICKS_PER_SECOND = 1_000_000
TICKS_PER_MILLISECOND = 1_000
TICKS_PER_MICROSECOND = 1

UNIX_EPOCH = 62_135_596_800_000_000
MAX_VALUE_TICKS = 315_537_897_599_999_999
# 1582-Oct-15
GREGORIAN_START = 49_916_304_000_000_000


def _trunc_div(a, b):
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a, b):
    """Remainder matching division that rounds toward zero."""
    return a - b * _trunc_div(a, b)


@dataclass(frozen=True, order=True)
class TimeSpan:
    """A positive or negative interval of whole microseconds."""

    ticks: int = 0

    @classmethod
    def from_parts(cls, days=0, hours=0, minutes=0, seconds=0, microseconds=0):
        """Build an interval from its day, hour, minute, second and microsecond parts."""
        return cls(
            days * TICKS_PER_DAY
            + (hours * 3600 + minutes * 60 + seconds) * TICKS_PER_SECOND
            + microseconds * TICKS_PER_MICROSECOND
        )

    def days(self):
        return _trunc_div(self.ticks, TICKS_PER_DAY)

    def hours(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_DAY), TICKS_PER_HOUR)

    def minutes(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_HOUR), TICKS_PER_MINUTE)

    def seconds(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_MINUTE), TICKS_PER_SECOND)

    def milliseconds(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_SECOND), TICKS_PER_MILLISECOND)

    def microseconds(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_SECOND), TICKS_PER_MICROSECOND)

    def total_days(self):
        return self.ticks / TICKS_PER_DAY

    def total_hours(self):
        return self.ticks / TICKS_PER_HOUR

    def total_minutes(self):
        return self.ticks / TICKS_PER_MINUTE

    def total_seconds(self):
        return self.ticks / TICKS_PER_SECOND

    def total_milliseconds(self):
        return self.ticks / TICKS_PER_MILLISECOND

    def total_microseconds(self):
        return self.ticks / TICKS_PER_MICROSECOND

    def __add__(self, other):
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self.ticks + other.ticks)

    def __sub__(self, other):
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self.ticks - other.ticks)

    def __str__(self):
        parts = []
        if self.ticks < 0:
            parts.append("-")
        if self.days() != 0:
            parts.append(f"{abs(self.days()):02d}.")
        parts.append(
            f"{abs(self.hours()):02d}:{abs(self.minutes()):02d}:{abs(self.seconds()):02d}"
        )
        if self.microseconds() != 0:
            parts.append(f".{abs(self.microseconds()):06d}")
        return "".join(parts)