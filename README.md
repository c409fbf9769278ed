# noradsched

Building blocks for a tracking schedule of a satellite seen from a fixed
ground observer: a tick-based UTC `DateTime`, a `TimeSpan`, geodetic and
topocentric coordinate records, angle helpers and SGP4 model constants,
an INI settings reader, and a plain-text schedule file with a reader and
a writer.

The package has no third-party dependencies.

## Time

`noradsched.instant.DateTime` counts microsecond ticks since
0001-01-01 00:00:00 in the proleptic Gregorian calendar. It is a frozen,
ordered dataclass, so instants compare with `<`, `==` and so on.

```python
from noradsched.instant import DateTime
from noradsched.timespan import TimeSpan

start = DateTime.from_components(2024, 3, 1, 12, 0, 0, 0)
later = start.add_hours(6)
print(later)                       # 2024-03-01 18:00:00.000000 UTC
print(later - start)               # a TimeSpan: 06:00:00

step = TimeSpan.from_parts(0, 0, 0, 2, 0)
print(start + step)                # 2024-03-01 12:00:02.000000 UTC

print(start.to_julian())
print(start.to_greenwich_sidereal_time())   # radians
print(DateTime.is_leap_year(2024))          # True
```

`from_components` raises `ValueError` for an out-of-range field, as do
`is_leap_year`, `days_in_month` and `day_of_year` for an invalid date.
`DateTime.from_year_doy(year, doy)` builds an instant from a fractional
day of the year. `DateTime.now(True)` gives the current UTC time with
microseconds, `DateTime.now(False)` truncated to whole seconds.

Other members: `add_years`, `add_months`, `add_days`, `add_minutes`,
`add_seconds`, `add_microseconds`, `add_ticks`, `ymd`, `year` … `microsecond`,
`time_of_day`, `day_of_week` (0 is Sunday), `to_j2000` and
`to_local_mean_sidereal_time(lon)`.

`noradsched.timespan.TimeSpan` offers `days()`, `hours()` … `microseconds()`
and `total_days()` … `total_microseconds()`, addition and subtraction.

## Angles, constants and coordinates

`noradsched.util` holds the SGP4 model constants (`XKE`, `CK2`, `QOMS2T`,
`XKMPER`, `PI`, `TWOPI`, …) and the angle helpers `degrees_to_radians`,
`radians_to_degrees`, `wrap_two_pi`, `wrap_360`, `wrap_neg_pos_180`,
`wrap_neg_pos_pi`, `ac_tan`, and `mod`, whose result takes the sign of
the divisor (and which returns `x` when the divisor is zero).

```python
from noradsched.coords import CoordGeodetic

site = CoordGeodetic.from_degrees(51.5074, -0.1277, 0.05)
print(site)   # Lat:   51.507, Lon:   -0.128, Alt:      0.050
```

Latitude and longitude are kept in radians, altitude in kilometres.
`CoordTopocentric` carries azimuth and elevation (radians), range (km)
and range rate (km/s). `noradsched.vector.Vector` has x, y, z, w
components, `magnitude`, `dot` and subtraction.

`noradsched.errors` defines `TleError`, `SatelliteError` and
`DecayedError` (which carries `decayed`, `position` and `velocity`) for
code that decodes element sets or propagates orbits on top of this
package.

## Schedule files

A schedule is a list of `noradsched.schedule.ScheduleEntry` items:
azimuth and elevation in degrees at a given `DateTime`.
`FileScheduleSaver` implements the abstract `ScheduleSaver` and writes
one entry per line:

```
2024-03-01 12:00:00.000000 UTC,123.456,12.34;
```

```python
from noradsched.schedule import FileScheduleSaver

saver = FileScheduleSaver("NoradSchedule.txt")
saver.save(entries)          # overwrites the file
entries = saver.load()       # lines that do not parse are skipped
saver.save_step(1.0, 1.1, 2.0, 2.1, 0.1, 0.1)   # appends a tracking-error line
saver.clear()                # empties the file, creating it if needed
```

Numbers are written with six significant digits; angles read back are
rounded to single precision. Any method raises `OSError` when the file
cannot be opened. `parse_datetime(text)` returns the seven integer
fields of a `YYYY-MM-DD HH:MM:SS.UUUUUU UTC` string or raises
`ValueError`; `trim(text)` strips spaces and tabs.

## Observer settings

`noradsched.config.load_settings(path)` reads an INI file with an
`[ObserverConfiguration]` section. When the file does not exist it is
first created with these defaults:

```ini
[ObserverConfiguration]
dt_mks=15000000
numKA=44714
Latitude=51.507406923983446
Longitude=-0.12773752212524414
Altitude=0.05
```

The returned `ObserverSettings` has `dt_mks`, `norad_number`,
`latitude`, `longitude` and `altitude`; keys that are missing or cannot
be read come back as zero.

## What it does not do

The package does not decode two-line element sets, does not propagate
orbits and does not compute look angles from an observer, so it cannot
by itself produce a schedule from an element file. It has no command to
run and stores schedules only in text files, not in a database.