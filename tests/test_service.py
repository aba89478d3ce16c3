import threading
from datetime import datetime, timedelta, timezone

import pytest

from classbooking.config import Config
from classbooking.errors import (
    BookingDatePassedError,
    ClassNotExistError,
    DateParseError,
    EndTimeBeforeStartTimeError,
    SlotsFullError,
)
from classbooking.models import BookingInfo, ClassInfo, ClassRequest
from classbooking.service import BusinessService, initialize_service
from classbooking.store import MapStore, MemoryMapStore

CFG = Config(date_format="2006-01-02")


class RecordingStore(MapStore):
    def __init__(self, initial=None):
        self.data = dict(initial or {})
        self.loads = []
        self.stores = []

    def load(self, key):
        self.loads.append(key)
        return self.data[key]

    def store(self, key, value):
        self.stores.append((key, value))
        self.data[key] = value

    def delete(self, key):
        self.data.pop(key, None)


def _today():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def test_initialize_service():
    lock = threading.Lock()
    svc = initialize_service(RecordingStore(), lock, CFG)
    assert isinstance(svc, BusinessService)
    assert not lock.locked()


def test_create_booking_valid_booking():
    now = datetime.now(timezone.utc)
    booking = BookingInfo(class_name="YogaClass", user_name="john_doe", booking_date=_today())
    booking_date = CFG.parse_date(booking.booking_date)
    class_info = ClassInfo(
        allowed_capacity=5,
        start_date=now - timedelta(hours=24),
        end_date=now + timedelta(hours=24),
    )
    store = RecordingStore({"YogaClass": class_info})
    initialize_service(store, threading.Lock(), CFG).create_booking(booking)

    assert store.loads == ["YogaClass"]
    assert len(store.stores) == 1
    key, stored = store.stores[0]
    assert key == "YogaClass"
    assert stored.bookings[booking_date] == ["john_doe"]


def test_create_booking_invalid_date_format():
    booking = BookingInfo(class_name="YogaClass", user_name="john_doe", booking_date="invalid_date")
    store = RecordingStore()
    with pytest.raises(DateParseError):
        initialize_service(store, threading.Lock(), CFG).create_booking(booking)
    assert store.loads == []


def test_create_booking_class_not_exist():
    booking = BookingInfo(class_name="NonExistentClass", user_name="john_doe", booking_date=_today())
    store = RecordingStore()
    with pytest.raises(ClassNotExistError) as info:
        initialize_service(store, threading.Lock(), CFG).create_booking(booking)
    assert str(info.value) == "Please Check Your Class Name"
    assert store.loads == ["NonExistentClass"]


def test_create_booking_date_before_class_start():
    now = datetime.now(timezone.utc)
    booking = BookingInfo(class_name="YogaClass", user_name="john_doe", booking_date=_today())
    class_info = ClassInfo(
        allowed_capacity=5,
        start_date=now + timedelta(hours=48),
        end_date=now + timedelta(hours=72),
    )
    store = RecordingStore({"YogaClass": class_info})
    with pytest.raises(BookingDatePassedError):
        initialize_service(store, threading.Lock(), CFG).create_booking(booking)
    assert store.loads == ["YogaClass"]
    assert store.stores == []


def test_create_booking_date_after_class_end():
    now = datetime.now(timezone.utc)
    later = (now + timedelta(hours=48)).strftime("%Y-%m-%d")
    booking = BookingInfo(class_name="YogaClass", user_name="john_doe", booking_date=later)
    class_info = ClassInfo(
        allowed_capacity=5,
        start_date=now - timedelta(hours=48),
        end_date=now + timedelta(hours=24),
    )
    store = RecordingStore({"YogaClass": class_info})
    with pytest.raises(BookingDatePassedError):
        initialize_service(store, threading.Lock(), CFG).create_booking(booking)
    assert store.loads == ["YogaClass"]


def test_create_booking_slots_full_for_the_date():
    now = datetime.now(timezone.utc)
    booking = BookingInfo(class_name="YogaClass", user_name="john_doe", booking_date=_today())
    booking_date = CFG.parse_date(booking.booking_date)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    class_info = ClassInfo(
        allowed_capacity=1,
        start_date=midnight - timedelta(hours=24),
        end_date=now + timedelta(hours=24),
    )
    class_info.bookings[booking_date] = ["existing_user"]
    store = RecordingStore({"YogaClass": class_info})
    with pytest.raises(SlotsFullError):
        initialize_service(store, threading.Lock(), CFG).create_booking(booking)
    assert class_info.bookings[booking_date] == ["existing_user"]
    assert store.stores == []


def test_create_class_success():
    store = RecordingStore()
    request = ClassRequest(name="Yoga Class", capacity=30, start_date="2025-06-01", end_date="2025-06-10")
    initialize_service(store, threading.Lock(), CFG).create_class(request)
    assert [key for key, _ in store.stores] == ["Yoga Class"]
    stored = store.stores[0][1]
    assert stored.allowed_capacity == 30
    assert stored.end_date == datetime(2025, 6, 10, tzinfo=timezone.utc)
    assert stored.bookings == {}


def test_create_class_invalid_start_date():
    store = RecordingStore()
    request = ClassRequest(
        name="Yoga Class", capacity=30, start_date="2025-06-01T00:00:00", end_date="2025-06-10"
    )
    with pytest.raises(DateParseError) as info:
        initialize_service(store, threading.Lock(), CFG).create_class(request)
    assert str(info.value) == 'parsing time "2025-06-01T00:00:00": extra text: "T00:00:00"'
    assert store.stores == []


def test_create_class_end_date_before_start_date():
    store = RecordingStore()
    request = ClassRequest(name="Yoga Class", capacity=30, start_date="2025-06-10", end_date="2025-06-01")
    with pytest.raises(EndTimeBeforeStartTimeError):
        initialize_service(store, threading.Lock(), CFG).create_class(request)
    assert store.stores == []


def test_create_class_start_before_end_is_stored():
    store = RecordingStore()
    request = ClassRequest(name="Yoga Class", capacity=30, start_date="2025-06-01", end_date="2025-06-10")
    initialize_service(store, threading.Lock(), CFG).create_class(request)
    assert len(store.stores) == 1
    assert store.stores[0][0] == "Yoga Class"


def test_create_class_then_book_until_full():
    store = MemoryMapStore()
    svc = initialize_service(store, threading.Lock(), CFG)
    svc.create_class(ClassRequest(name="Yoga", capacity=1, start_date="2025-06-01", end_date="2025-06-10"))
    svc.create_booking(BookingInfo(class_name="Yoga", user_name="amy", booking_date="2025-06-10"))
    with pytest.raises(SlotsFullError):
        svc.create_booking(BookingInfo(class_name="Yoga", user_name="bob", booking_date="2025-06-10"))
    with pytest.raises(BookingDatePassedError):
        svc.create_booking(BookingInfo(class_name="Yoga", user_name="bob", booking_date="2025-06-11"))
    assert store.load("Yoga").bookings == {CFG.parse_date("2025-06-10"): ["amy"]}