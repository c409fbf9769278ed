"""Pointing schedules and a plain-text store for them."""

import re
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .instant import DateTime

_LINE_TAIL = "; \r\n"
_BLANKS = " \t"

_INT = r"([+-]?\d+)(?!\d)"
_SEP = r"\s*(\S)\s*"
_DATETIME = re.compile(
    r"\s*" + _INT + _SEP + _INT + _SEP + _INT
    + r"\s*" + _INT + _SEP + _INT + _SEP + _INT + _SEP + _INT
    + r"\s*(\S+)"
)
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class ScheduleEntry:
    """Azimuth and elevation in degrees at one instant."""

    azm: float = 0.0
    elv: float = 0.0
    on_date: DateTime = field(default_factory=DateTime)


class ScheduleSaver(ABC):
    """A place where a schedule can be stored and read back."""

    @abstractmethod
    def save(self, entries):
        """Store the given entries."""

    @abstractmethod
    def load(self):
        """Return the stored entries as a list."""


def _format_number(value):
    return format(float(value), "g")


def _parse_float32(text):
    """Parse the leading number of ``text`` as a single-precision value."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    value = float(match.group(1))
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"number out of range: {text!r}") from exc


def trim(text):
    """Remove spaces and tabs from both ends."""
    return text.strip(_BLANKS)


def parse_datetime(text):
    """Parse ``YYYY-MM-DD HH:MM:SS.UUUUUU UTC`` into seven integers.

    Raises ValueError when the text does not have that shape or a field
    is out of range.
    """
    match = _DATETIME.match(text)
    if match is None:
        raise ValueError(f"malformed date and time: {text!r}")
    (year, sep1, month, sep2, day, hour, sep3, minute,
     sep4, second, sep5, microsecond, zone) = match.groups()
    if (sep1, sep2, sep3, sep4, sep5, zone) != ("-", "-", ":", ":", ".", "UTC"):
        raise ValueError(f"malformed date and time: {text!r}")
    fields = tuple(int(part) for part in (year, month, day, hour, minute, second, microsecond))
    _, month_, day_, hour_, minute_, second_, _ = fields
    if not (1 <= month_ <= 12 and 1 <= day_ <= 31 and 0 <= hour_ <= 23
            and 0 <= minute_ <= 59 and 0 <= second_ <= 60):
        raise ValueError(f"date and time out of range: {text!r}")
    return fields


class FileScheduleSaver(ScheduleSaver):
    """Keeps a schedule in a text file, one ``date,azimuth,elevation;`` line per entry."""

    def __init__(self, path):
        self.path = path

    def save(self, entries):
        """Overwrite the file with the given entries."""
        with open(self.path, "w", encoding="utf-8") as out:
            for entry in entries:
                out.write(
                    f"{entry.on_date},{_format_number(entry.azm)},"
                    f"{_format_number(entry.elv)};\n"
                )

    def save_step(self, est_azm, cur_azm, est_elv, cur_elv, err_azm, err_elv):
        """Append one line of estimated, current and error angles."""
        values = (est_azm, cur_azm, est_elv, cur_elv, err_azm, err_elv)
        with open(self.path, "a", encoding="utf-8") as out:
            out.write(",".join(_format_number(v) for v in values) + ";\n")

    def clear(self):
        """Empty the file, creating it if needed."""
        with open(self.path, "w", encoding="utf-8"):
            pass

    def load(self):
        """Read the entries back, skipping lines that cannot be parsed."""
        entries = []
        with open(self.path, encoding="utf-8") as source:
            for raw in source:
                entry = self._parse_line(raw)
                if entry is not None:
                    entries.append(entry)
        return entries

    @staticmethod
    def _parse_line(raw):
        line = raw.rstrip(_LINE_TAIL)
        date_text, sep, rest = line.partition(",")
        if not sep:
            return None
        azm_text, sep, elv_text = rest.partition(",")
        if not sep:
            return None
        try:
            on_date = DateTime.from_components(*parse_datetime(trim(date_text)))
            return ScheduleEntry(
                _parse_float32(trim(azm_text)),
                _parse_float32(trim(elv_text)),
                on_date,
            )
        except ValueError:
            return None