from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from roombook.core.entities.booking import Booking, BookingStatus, spans_overlap
from roombook.core.entities.room import Room


def _booking(room_id: str, start: datetime, hours: float = 1, booking_id: str | None = None) -> Booking:
    kwargs = {"booking_id": booking_id} if booking_id else {}
    return Booking(room_id=room_id, start_time=start, end_time=start + timedelta(hours=hours), **kwargs)


def test_touching_spans_do_not_overlap(now: datetime) -> None:
    assert not spans_overlap(now, now + timedelta(hours=1), now + timedelta(hours=1), now + timedelta(hours=2))
    assert not spans_overlap(now + timedelta(hours=1), now + timedelta(hours=2), now, now + timedelta(hours=1))


@pytest.mark.parametrize(
    "offset_start, offset_end",
    [
        (timedelta(minutes=30), timedelta(minutes=90)),  # tail overlap
        (timedelta(minutes=-30), timedelta(minutes=30)),  # head overlap
        (timedelta(minutes=15), timedelta(minutes=45)),  # contained
        (timedelta(minutes=-30), timedelta(minutes=90)),  # containing
        (timedelta(0), timedelta(hours=1)),  # identical
    ],
)
def test_overlapping_spans_are_detected(now: datetime, offset_start: timedelta, offset_end: timedelta) -> None:
    assert spans_overlap(now, now + timedelta(hours=1), now + offset_start, now + offset_end)


def test_booking_requires_start_before_end(now: datetime) -> None:
    with pytest.raises(ValueError):
        Booking(room_id="R1", start_time=now, end_time=now)

    with pytest.raises(ValueError):
        Booking(room_id="R1", start_time=now, end_time=now - timedelta(hours=1))


def test_booking_is_immutable_and_active_by_default(now: datetime) -> None:
    booking = _booking("R1", now)

    assert booking.status is BookingStatus.ACTIVE
    assert booking.booking_id
    with pytest.raises(AttributeError):
        booking.start_time = now + timedelta(hours=5)  # type: ignore[misc]


def test_booking_has_started_at_its_start_time(now: datetime) -> None:
    booking = _booking("R1", now)

    assert booking.has_started(now)
    assert booking.has_started(now + timedelta(minutes=1))
    assert not booking.has_started(now - timedelta(seconds=1))


def test_empty_room_is_available(now: datetime) -> None:
    room = Room(room_id="R1")
    assert room.is_available(now, now + timedelta(hours=1))


def test_room_availability_follows_held_bookings(now: datetime) -> None:
    room = Room(room_id="R1")
    room.add_booking(_booking("R1", now + timedelta(hours=1)))

    assert not room.is_available(now + timedelta(minutes=90), now + timedelta(minutes=150))
    assert room.is_available(now, now + timedelta(hours=1))
    assert room.is_available(now + timedelta(hours=2), now + timedelta(hours=3))


def test_add_booking_rejects_overlap(now: datetime) -> None:
    room = Room(room_id="R1")
    room.add_booking(_booking("R1", now))

    with pytest.raises(ValueError):
        room.add_booking(_booking("R1", now + timedelta(minutes=30)))

    assert len(room.bookings) == 1


def test_add_booking_rejects_foreign_room_and_duplicate_id(now: datetime) -> None:
    room = Room(room_id="R1")
    room.add_booking(_booking("R1", now, booking_id="b-1"))

    with pytest.raises(ValueError):
        room.add_booking(_booking("R2", now + timedelta(hours=5)))

    with pytest.raises(ValueError):
        room.add_booking(_booking("R1", now + timedelta(hours=5), booking_id="b-1"))


def test_lookup_and_remove_booking(now: datetime) -> None:
    room = Room(room_id="R1")
    booking = _booking("R1", now, booking_id="b-1")
    room.add_booking(booking)

    assert room.has_booking("b-1")
    assert room.get_booking("b-1") == booking
    assert room.get_booking("missing") is None

    assert room.remove_booking("b-1") == booking
    assert not room.has_booking("b-1")
    assert room.is_available(now, now + timedelta(hours=1))


def test_remove_unknown_booking_raises(now: datetime) -> None:
    room = Room(room_id="R1")

    with pytest.raises(ValueError):
        room.remove_booking("missing")


def test_sorted_bookings_orders_by_start_time(now: datetime) -> None:
    room = Room(room_id="R1")
    late = _booking("R1", now + timedelta(hours=5))
    early = _booking("R1", now + timedelta(hours=1))
    room.add_booking(late)
    room.add_booking(early)

    assert room.sorted_bookings() == [early, late]


def test_api_status_enum_mirrors_booking_status() -> None:
    from roombook.schemas.models import Status

    assert [s.value for s in Status] == [s.value for s in BookingStatus]
