"""Business rules for creating classes and booking them."""

from __future__ import annotations

from datetime import datetime, timezone

from classbooking.errors import (
    BookingDatePassedError,
    ClassNotExistError,
    EndTimeBeforeStartTimeError,
    SlotsFullError,
)
from classbooking.models import ClassInfo


def _truncate_to_day(moment: datetime) -> datetime:
    utc = moment.astimezone(timezone.utc)
    return utc.replace(hour=0, minute=0, second=0, microsecond=0)


class BusinessService:
    """Creates classes and bookings in a shared store guarded by a lock."""

    def __init__(self, store, lock, config) -> None:
        self._store = store
        self._lock = lock
        self._config = config

    def create_class(self, info):
        """Validate ``info`` and store a new class under its name."""
        start_date = self._config.parse_date(info.start_date)
        end_date = self._config.parse_date(info.end_date)
        if end_date < start_date:
            raise EndTimeBeforeStartTimeError()

        class_info = ClassInfo(
            allowed_capacity=info.capacity,
            end_date=_truncate_to_day(end_date),
        )
        with self._lock:
            self._store.store(info.name, class_info)

    def create_booking(self, booking_info):
        """Book a user into a class on a date, enforcing dates and capacity."""
        booking_date = self._config.parse_date(booking_info.booking_date)
        with self._lock:
            try:
                class_info = self._store.load(booking_info.class_name)
            except KeyError:
                raise ClassNotExistError() from None

            if booking_date < class_info.start_date or booking_date > class_info.end_date:
                raise BookingDatePassedError()
            day_bookings = class_info.bookings.get(booking_date, [])
            if len(day_bookings) >= class_info.allowed_capacity:
                raise SlotsFullError()

            class_info.bookings[booking_date] = [*day_bookings, booking_info.user_name]
            self._store.store(booking_info.class_name, class_info)


def initialize_service(store, lock, config):
    """Create the business service over a shared store and lock."""
    return BusinessService(store, lock, config)