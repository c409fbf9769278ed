"""Observer settings kept in an INI file."""

import configparser
import os
from dataclasses import dataclass

TLE_FILE = "TLE.txt"
SETTINGS_FILE = "settings.ini"
RESULT_FILE = "NoradSchedule.txt"

SECTION = "ObserverConfiguration"


@dataclass
class ObserverSettings:
    """Where the observer stands and which satellite to follow."""

    dt_mks: int = 15000000
    norad_number: int = 44714
    latitude: float = 51.507406923983446
    longitude: float = -0.12773752212524414
    altitude: float = 0.05


def _new_parser():
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    return parser


def _write_defaults(path):
    defaults = ObserverSettings()
    parser = _new_parser()
    parser[SECTION] = {
        "dt_mks": str(defaults.dt_mks),
        "numKA": str(defaults.norad_number),
        "Latitude": repr(defaults.latitude),
        "Longitude": repr(defaults.longitude),
        "Altitude": repr(defaults.altitude),
    }
    with open(path, "w", encoding="utf-8") as out:
        parser.write(out, space_around_delimiters=False)


def _as_float(section, key):
    try:
        return float(section.get(key, "").strip())
    except ValueError:
        return 0.0


def _as_unsigned(section, key):
    try:
        value = int(section.get(key, "").strip())
    except ValueError:
        return 0
    return value if value >= 0 else 0


def load_settings(path=SETTINGS_FILE):
    """Read the observer settings, writing a file of defaults first if none exists.

    Keys that are missing or unreadable come back as zero.
    """
    if not os.path.exists(path):
        _write_defaults(path)
    parser = _new_parser()
    with open(path, encoding="utf-8") as source:
        parser.read_file(source)
    section = parser[SECTION] if parser.has_section(SECTION) else {}
    return ObserverSettings(
        dt_mks=_as_unsigned(section, "dt_mks"),
        norad_number=_as_unsigned(section, "numKA"),
        latitude=_as_float(section, "Latitude"),
        longitude=_as_float(section, "Longitude"),
        altitude=_as_float(section, "Altitude"),
    )