"""Application configuration and date parsing with reference layouts."""

from __future__ import annotations

import calendar
import functools
import json
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from os import PathLike

from classbooking.errors import DateParseError

FILE_PATH = "../config.json"
BOOKING_SUCCESS = "Booking created successfully"
CLASS_SUCCESS = "Class data saved successfully"
CONFIG_LOAD_FAILED = "Failed to load config: %s"

_FIELDS = {"DateFormat": "date_format", "BaseRoute": "base_route", "Port": "port"}


@dataclass(frozen=True)
class Config:
    """Service settings read from the JSON configuration file."""

    date_format: str = ""
    base_route: str = ""
    port: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build a config from decoded JSON; keys match case-insensitively."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(f"cannot decode {type(data).__name__} into Config")
        values = {}
        for key, raw in data.items():
            name = _match_key(key, _FIELDS)
            if name is None or raw is None:
                continue
            if not isinstance(raw, str):
                raise TypeError(f"Config field {name} must be a string, got {type(raw).__name__}")
            values[_FIELDS[name]] = raw
        return cls(**values)

    def parse_date(self, value):
        """Parse ``value`` against the configured reference layout."""
        return _parse_layout(self.date_format, value)


@functools.lru_cache(maxsize=None)
def load_config(file_path):
    """Load the configuration file once; later calls return the same object."""
    with open(file_path, encoding="utf-8") as handle:
        data = json.load(handle)
    return Config.from_dict(data)


def _match_key(key, names):
    if key in names:
        return key
    folded = key.casefold()
    for name in names:
        if name.casefold() == folded:
            return name
    return None


# Reference-layout parsing: layouts are written with the reference moment
# Mon Jan 2 15:04:05 -0700 2006.

_STD_CHUNKS = (
    "January", "Monday", "2006", "Jan", "Mon", "Z07:00", "Z0700", "-07:00", "-0700", "-07",
    "15", "01", "02", "03", "04", "05", "06", "_2", "PM", "pm", "1", "2", "3", "4", "5",
)
_MONTHS = [calendar.month_name[i] for i in range(1, 13)]
_MONTHS_SHORT = [calendar.month_abbr[i] for i in range(1, 13)]
_DAYS = list(calendar.day_name)
_DAYS_SHORT = list(calendar.day_abbr)
_DIGITS = "0123456789"


class _BadValue(Exception):
    pass


class _OutOfRange(Exception):
    def __init__(self, field):
        super().__init__(field)
        self.field = field


def _quote(text):
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _tokenize(layout):
    tokens = []
    literal = []
    i = 0
    while i < len(layout):
        if layout.startswith("_2006", i):
            literal.append("_")
            i += 1
            continue
        chunk = next((c for c in _STD_CHUNKS if layout.startswith(c, i)), None)
        if chunk is None:
            literal.append(layout[i])
            i += 1
            continue
        if literal:
            tokens.append((False, "".join(literal)))
            literal = []
        tokens.append((True, chunk))
        i += len(chunk)
    if literal:
        tokens.append((False, "".join(literal)))
    return tokens


def _getnum(text, fixed):
    if not text or text[0] not in _DIGITS:
        raise _BadValue
    if len(text) < 2 or text[1] not in _DIGITS:
        if fixed:
            raise _BadValue
        return int(text[0]), text[1:]
    return int(text[:2]), text[2:]


def _lookup(names, text):
    for index, name in enumerate(names):
        if text[: len(name)].casefold() == name.casefold():
            return index, text[len(name):]
    raise _BadValue


def _checked(number, low, high, field):
    if not low <= number <= high:
        raise _OutOfRange(field)
    return number


def _parse_offset(chunk, text):
    if chunk.startswith("Z") and text.startswith("Z"):
        return timezone.utc, text[1:]
    if not text or text[0] not in "+-":
        raise _BadValue
    sign = -1 if text[0] == "-" else 1
    body = chunk.lstrip("Z-")
    width = 1 + len(body)
    part = text[1:width]
    if len(part) != len(body):
        raise _BadValue
    if ":" in body:
        if part[2:3] != ":":
            raise _BadValue
        part = part[:2] + part[3:]
    if not part.isdigit() or not part.isascii():
        raise _BadValue
    hours = int(part[:2])
    minutes = int(part[2:4]) if len(part) >= 4 else 0
    try:
        zone = timezone(sign * timedelta(hours=hours, minutes=minutes))
    except ValueError as exc:
        raise _BadValue from exc
    return zone, text[width:]


def _parse_layout(layout, value):
    original = value
    year = None
    month, day, hour, minute, second = 1, 1, 0, 0, 0
    pm = None
    zone = timezone.utc
    for is_std, chunk in _tokenize(layout):
        if not is_std:
            if not value.startswith(chunk):
                raise DateParseError(
                    f"parsing time {_quote(original)} as {_quote(layout)}: "
                    f"cannot parse {_quote(value)} as {_quote(chunk)}"
                )
            value = value[len(chunk):]
            continue
        held = value
        try:
            if chunk == "2006":
                if len(value) < 4 or not all(c in _DIGITS for c in value[:4]):
                    raise _BadValue
                year, value = int(value[:4]), value[4:]
            elif chunk == "06":
                short, value = _getnum(value, True)
                year = short + (1900 if short >= 69 else 2000)
            elif chunk in ("January", "Jan"):
                names = _MONTHS if chunk == "January" else _MONTHS_SHORT
                index, value = _lookup(names, value)
                month = index + 1
            elif chunk in ("Monday", "Mon"):
                _, value = _lookup(_DAYS if chunk == "Monday" else _DAYS_SHORT, value)
            elif chunk in ("01", "1"):
                month, value = _getnum(value, chunk == "01")
                _checked(month, 1, 12, "month")
            elif chunk in ("02", "2", "_2"):
                if chunk == "_2" and value.startswith(" "):
                    value = value[1:]
                day, value = _getnum(value, chunk == "02")
                _checked(day, 0, 31, "day")
            elif chunk == "15":
                hour, value = _getnum(value, False)
                _checked(hour, 0, 23, "hour")
            elif chunk in ("03", "3"):
                hour, value = _getnum(value, chunk == "03")
                _checked(hour, 0, 12, "hour")
            elif chunk in ("04", "4"):
                minute, value = _getnum(value, chunk == "04")
                _checked(minute, 0, 59, "minute")
            elif chunk in ("05", "5"):
                second, value = _getnum(value, chunk == "05")
                _checked(second, 0, 59, "second")
            elif chunk in ("PM", "pm"):
                marker = value[:2]
                if marker == chunk:
                    pm = True
                elif marker == ("AM" if chunk == "PM" else "am"):
                    pm = False
                else:
                    raise _BadValue
                value = value[2:]
            else:
                zone, value = _parse_offset(chunk, value)
        except _BadValue:
            raise DateParseError(
                f"parsing time {_quote(original)} as {_quote(layout)}: "
                f"cannot parse {_quote(held)} as {_quote(chunk)}"
            ) from None
        except _OutOfRange as exc:
            raise DateParseError(
                f"parsing time {_quote(original)}: {exc.field} out of range"
            ) from None
    if value:
        raise DateParseError(f"parsing time {_quote(original)}: extra text: {_quote(value)}")
    if pm is True and hour < 12:
        hour += 12
    elif pm is False and hour == 12:
        hour = 0
    full_year = year if year else 1
    if day < 1 or day > calendar.monthrange(full_year, month)[1]:
        raise DateParseError(f"parsing time {_quote(original)}: day out of range")
    return datetime(full_year, month, day, hour, minute, second, tzinfo=zone)