"""Request and stored records for classes and bookings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone

from classbooking.errors import UnmarshallingError

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _kind(value):
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _decode(cls, data):
    """Decode a JSON object into ``cls``, matching keys case-insensitively."""
    try:
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        payload = json.loads(data)
    except (UnicodeDecodeError, ValueError) as exc:
        raise UnmarshallingError(str(exc)) from exc
    if payload is None:
        return cls()
    if not isinstance(payload, dict):
        raise UnmarshallingError(f"cannot unmarshal {_kind(payload)} into {cls.__name__}")

    spec = {f.metadata["json"]: f for f in fields(cls)}
    values = {}
    for key, raw in payload.items():
        target = spec.get(key)
        if target is None:
            target = next((f for name, f in spec.items() if name.casefold() == key.casefold()), None)
        if target is None or raw is None:
            continue
        expected = target.metadata["kind"]
        if expected is int:
            valid = isinstance(raw, int) and not isinstance(raw, bool)
        else:
            valid = isinstance(raw, str)
        if not valid:
            raise UnmarshallingError(
                f"cannot unmarshal {_kind(raw)} into field {cls.__name__}.{target.name}"
            )
        values[target.name] = raw
    return cls(**values)


def _json_field(name, kind, default):
    return field(default=default, metadata={"json": name, "kind": kind})


@dataclass
class BookingInfo:
    """A request to book a user into a class on a date."""

    class_name: str = _json_field("className", str, "")
    user_name: str = _json_field("userName", str, "")
    booking_date: str = _json_field("bookingDate", str, "")

    @classmethod
    def from_json(cls, data):
        return _decode(cls, data)


@dataclass
class ClassRequest:
    """A request to create a class running between two dates."""

    name: str = _json_field("className", str, "")
    capacity: int = _json_field("classCapacity", int, 0)
    start_date: str = _json_field("startDate", str, "")
    end_date: str = _json_field("endDate", str, "")

    @classmethod
    def from_json(cls, data):
        return _decode(cls, data)


@dataclass
class ClassInfo:
    """A stored class with its capacity, dates and bookings per day."""

    allowed_capacity: int = 0
    start_date: datetime = ZERO_TIME
    end_date: datetime = ZERO_TIME
    bookings: dict[datetime, list[str]] = field(default_factory=dict)


@dataclass
class Booking:
    """A single user's booking on a date."""

    user_name: str = ""
    booking_date: datetime = ZERO_TIME