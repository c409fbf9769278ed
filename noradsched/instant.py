"""Instants in time counted in microsecond ticks since 0001-01-01 00:00:00 UTC."""

import math
import time
from dataclasses import dataclass

from .timespan import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    UNIX_EPOCH,
    TimeSpan,
    _trunc_div,
    _trunc_mod,
)
from .util import degrees_to_radians, wrap_two_pi

_DAYS_IN_MONTH = (
    (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)
_CUMUL_DAYS_IN_MONTH = (
    (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334),
    (0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335),
)


def _days_before_year(year):
    previous = year - 1
    return (
        365 * previous
        + _trunc_div(previous, 4)
        - _trunc_div(previous, 100)
        + _trunc_div(previous, 400)
    )


@dataclass(frozen=True, order=True)
class DateTime:
    """A point in time; the default is 0001-01-01 00:00:00.000000."""

    ticks: int = 0

    @classmethod
    def from_components(cls, year, month, day, hour=0, minute=0, second=0, microsecond=0):
        """Build from calendar and clock fields; raises ValueError when any is out of range."""
        if (
            not cls.is_valid_year_month_day(year, month, day)
            or not 0 <= hour <= 23
            or not 0 <= minute <= 59
            or not 0 <= second <= 59
            or not 0 <= microsecond <= 999_999
        ):
            raise ValueError("Invalid date")
        return cls(
            TimeSpan.from_parts(
                cls.absolute_days(year, month, day), hour, minute, second, microsecond
            ).ticks
        )

    @classmethod
    def from_year_doy(cls, year, doy):
        """Build from a year and a fractional day of the year (1.0 is January 1st, midnight)."""
        days = float(_days_before_year(year)) + doy - 1.0
        return cls(int(days * TICKS_PER_DAY))

    @classmethod
    def now(cls, use_microseconds=False):
        """The current UTC time, truncated to whole seconds unless asked otherwise."""
        micros = time.time_ns() // 1000
        if use_microseconds:
            return cls(UNIX_EPOCH + micros * TICKS_PER_MICROSECOND)
        return cls(UNIX_EPOCH + (micros // 1_000_000) * TICKS_PER_SECOND)

    @staticmethod
    def is_valid_year(year):
        return 1 <= year <= 9999

    @staticmethod
    def is_valid_year_month(year, month):
        return DateTime.is_valid_year(year) and 1 <= month <= 12

    @staticmethod
    def is_valid_year_month_day(year, month, day):
        if not DateTime.is_valid_year_month(year, month):
            return False
        return 1 <= day <= DateTime.days_in_month(year, month)

    @staticmethod
    def is_leap_year(year):
        if not DateTime.is_valid_year(year):
            raise ValueError("Invalid year")
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

    @staticmethod
    def days_in_month(year, month):
        if not DateTime.is_valid_year_month(year, month):
            raise ValueError("Invalid year and month")
        return _DAYS_IN_MONTH[DateTime.is_leap_year(year)][month]

    @staticmethod
    def day_of_year(year, month, day):
        if not DateTime.is_valid_year_month_day(year, month, day):
            raise ValueError("Invalid year, month and day")
        return day + _CUMUL_DAYS_IN_MONTH[DateTime.is_leap_year(year)][month]

    @staticmethod
    def absolute_days(year, month, day):
        """Days elapsed since 0001-01-01 to the given date."""
        return DateTime.day_of_year(year, month, day) - 1 + _days_before_year(year)

    def time_of_day(self):
        return TimeSpan(_trunc_mod(self.ticks, TICKS_PER_DAY))

    def day_of_week(self):
        """Day of the week, 0 being Sunday."""
        return _trunc_mod(_trunc_div(self.ticks, TICKS_PER_DAY) + 1, 7)

    def add_years(self, years):
        return self.add_months(years * 12)

    def add_months(self, months):
        year, month, day = self.ymd()
        month += _trunc_mod(months, 12)
        year += _trunc_div(months, 12)
        if month < 1:
            month += 12
            year -= 1
        elif month > 12:
            month -= 12
            year += 1
        day = min(day, self.days_in_month(year, month))
        return DateTime.from_components(year, month, day) + self.time_of_day()

    def add_days(self, days):
        return self.add_microseconds(days * 86_400_000_000.0)

    def add_hours(self, hours):
        return self.add_microseconds(hours * 3_600_000_000.0)

    def add_minutes(self, minutes):
        return self.add_microseconds(minutes * 60_000_000.0)

    def add_seconds(self, seconds):
        return self.add_microseconds(seconds * 1_000_000.0)

    def add_microseconds(self, microseconds):
        return self.add_ticks(int(microseconds * TICKS_PER_MICROSECOND))

    def add_ticks(self, ticks):
        return DateTime(self.ticks + ticks)

    def ymd(self):
        """The (year, month, day) of this instant."""
        total_days = _trunc_div(self.ticks, TICKS_PER_DAY)

        num400 = _trunc_div(total_days, 146_097)
        total_days -= num400 * 146_097
        num100 = min(_trunc_div(total_days, 36_524), 3)
        total_days -= num100 * 36_524
        num4 = _trunc_div(total_days, 1461)
        total_days -= num4 * 1461
        num1 = min(_trunc_div(total_days, 365), 3)
        total_days -= num1 * 365

        year = num400 * 400 + num100 * 100 + num4 * 4 + num1 + 1
        days = _DAYS_IN_MONTH[self.is_leap_year(year)]
        month = 1
        while month <= 12 and total_days >= days[month]:
            total_days -= days[month]
            month += 1
        return year, month, total_days + 1

    def year(self):
        return self.ymd()[0]

    def month(self):
        return self.ymd()[1]

    def day(self):
        return self.ymd()[2]

    def hour(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_DAY), TICKS_PER_HOUR)

    def minute(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_HOUR), TICKS_PER_MINUTE)

    def second(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_MINUTE), TICKS_PER_SECOND)

    def microsecond(self):
        return _trunc_div(_trunc_mod(self.ticks, TICKS_PER_SECOND), TICKS_PER_MICROSECOND)

    def to_julian(self):
        return TimeSpan(self.ticks).total_days() + 1721425.5

    def to_greenwich_sidereal_time(self):
        """Greenwich mean sidereal time in radians."""
        julian = self.to_julian()
        jd0 = math.floor(julian + 0.5) - 0.5
        t = (jd0 - 2451545.0) / 36525.0
        jdf = julian - jd0
        gt = 24110.54841 + t * (8640184.812866 + t * (0.093104 - t * 6.2e-6))
        gt += jdf * 1.00273790935 * 86400.0
        return wrap_two_pi(degrees_to_radians(gt / 240.0))

    def to_j2000(self):
        return self.to_julian() - 2415020.0

    def to_local_mean_sidereal_time(self, lon):
        """Local mean sidereal time in radians for an east longitude in radians."""
        return wrap_two_pi(self.to_greenwich_sidereal_time() + lon)

    def __add__(self, span):
        if not isinstance(span, TimeSpan):
            return NotImplemented
        return DateTime(self.ticks + span.ticks)

    def __sub__(self, other):
        if isinstance(other, DateTime):
            return TimeSpan(self.ticks - other.ticks)
        if isinstance(other, TimeSpan):
            return DateTime(self.ticks - other.ticks)
        return NotImplemented

    def __str__(self):
        year, month, day = self.ymd()
        return (
            f"{year:04d}-{month:02d}-{day:02d} "
            f"{self.hour():02d}:{self.minute():02d}:{self.second():02d}."
            f"{self.microsecond():06d} UTC"
        )