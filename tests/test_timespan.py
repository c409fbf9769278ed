import pytest

from noradsched.timespan import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_SECOND,
    TimeSpan,
)


def test_components_from_parts():
    ts = TimeSpan.from_parts(1, 2, 3, 4, 5)
    assert ts.days() == 1
    assert ts.hours() == 2
    assert ts.minutes() == 3
    assert ts.seconds() == 4
    assert ts.microseconds() == 5


def test_negative_components_truncate_toward_zero():
    ts = TimeSpan(-TimeSpan.from_parts(1, 2, 3, 4, 5).ticks)
    assert ts.days() == -1
    assert ts.hours() == -2
    assert ts.minutes() == -3
    assert ts.seconds() == -4
    assert ts.microseconds() == -5


def test_milliseconds_component():
    ts = TimeSpan.from_parts(seconds=9, microseconds=7 * 1000 + 42)
    assert ts.milliseconds() == 7
    assert ts.microseconds() == 7 * 1000 + 42


def test_from_parts_matches_tick_constants():
    assert TimeSpan.from_parts(days=1).ticks == TICKS_PER_DAY
    assert TimeSpan.from_parts(hours=1).ticks == TICKS_PER_HOUR
    assert TimeSpan.from_parts(seconds=1).ticks == TICKS_PER_SECOND


def test_totals_are_consistent():
    ts = TimeSpan.from_parts(2, 12, 30, 15, 250)
    assert ts.total_days() * 24 == pytest.approx(ts.total_hours())
    assert ts.total_hours() * 60 == pytest.approx(ts.total_minutes())
    assert ts.total_minutes() * 60 == pytest.approx(ts.total_seconds())
    assert ts.total_seconds() * 1000 == pytest.approx(ts.total_milliseconds())
    assert ts.total_milliseconds() * 1000 == pytest.approx(ts.total_microseconds())
    assert ts.total_microseconds() == ts.ticks


def test_total_hours_of_whole_hours():
    assert TimeSpan.from_parts(hours=3).total_hours() == 3.0


def test_add_and_subtract_round_trip():
    a = TimeSpan.from_parts(1, 5, 6, 7, 8)
    b = TimeSpan.from_parts(0, 23, 59, 59, 999999)
    assert (a + b).ticks == a.ticks + b.ticks
    assert (a + b) - b == a
    assert (a - a).ticks == 0


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        TimeSpan(1) + 1


def test_ordering_and_equality():
    a = TimeSpan.from_parts(minutes=5)
    assert a < a + TimeSpan(1)
    assert a > a - TimeSpan(1)
    assert a == TimeSpan.from_parts(seconds=300)


def test_str_without_days_or_fraction():
    assert str(TimeSpan.from_parts(hours=1, minutes=2, seconds=3)) == "01:02:03"


def test_str_with_days_and_fraction():
    assert str(TimeSpan.from_parts(1, 2, 3, 4, 5)) == "01.02:03:04.000005"


def test_str_negative():
    ts = TimeSpan(-TimeSpan.from_parts(1, 2, 3, 4, 5).ticks)
    assert str(ts) == "-01.02:03:04.000005"