from __future__ import annotations

from datetime import datetime
from typing import Iterable

from sqlalchemy.orm import Session

from roombook.core.entities.booking import Booking as CoreBooking
from roombook.core.entities.room import Room as CoreRoom
from roombook.core.gateways.clock import Clock
from roombook.core.gateways.notifier import NotificationDeliveryError, Notifier
from roombook.core.use_cases.book_room import BookRoomUseCase
from roombook.core.use_cases.cancel_booking import CancelBookingUseCase
from roombook.core.use_cases.get_available_rooms import GetAvailableRoomsUseCase
from roombook.core.use_cases.get_room import GetRoomUseCase
from roombook.core.use_cases.register_room import RegisterRoomUseCase
from roombook.infrastructure.clock import SystemClock
from roombook.infrastructure.notifiers.jsonl_outbox_notifier import JsonlOutboxNotifier
from roombook.infrastructure.notifiers.logging_notifier import LoggingNotifier
from roombook.infrastructure.repositories.room_repository_impl import RoomRepositoryImpl
from roombook.schemas.models import (
    Booking,
    BookingRequest,
    BookingResult,
    CancellationResult,
    Room,
    RoomCreate,
    Status,
)


def _default_clock() -> Clock:
    return SystemClock()


def _default_notifier() -> Notifier:
    from roombook.infrastructure.config import settings
    if settings.notifier == "log":
        return LoggingNotifier()
    return JsonlOutboxNotifier(file_path=settings.notification_outbox_path)


def _to_booking_schema(booking: CoreBooking) -> Booking:
    return Booking(
        booking_id=booking.booking_id,
        room_id=booking.room_id,
        start_time=booking.start_time,
        end_time=booking.end_time,
        status=Status(booking.status.value),
    )


def _to_room_schema(room_id: str, name: str, bookings: Iterable[CoreBooking]) -> Room:
    return Room(
        room_id=room_id,
        name=name,
        bookings=[_to_booking_schema(b) for b in bookings],
    )


def register_room_service(body: RoomCreate, db: Session) -> Room:
    use_case = RegisterRoomUseCase(room_repo=RoomRepositoryImpl(db))

    room: CoreRoom = use_case.execute(room_id=body.room_id, name=body.name)
    return _to_room_schema(room.room_id, room.name, room.sorted_bookings())


def get_room_service(room_id: str, db: Session) -> Room:
    use_case = GetRoomUseCase(room_repo=RoomRepositoryImpl(db))

    dto = use_case.execute(room_id=room_id)
    return _to_room_schema(dto.room_id, dto.name, dto.bookings)


def get_available_rooms_service(start: datetime, end: datetime, db: Session) -> list[Room]:
    use_case = GetAvailableRoomsUseCase(room_repo=RoomRepositoryImpl(db))

    rooms = use_case.execute(start=start, end=end)
    return [_to_room_schema(r.room_id, r.name, r.sorted_bookings()) for r in rooms]


def book_room_service(room_id: str, body: BookingRequest, db: Session) -> BookingResult:
    """
    Returns:
      booked=False if the room is unknown or taken for the span
      booked=True, confirmation_sent=False if the booking was committed but the
      confirmation could not be delivered
    """
    use_case = BookRoomUseCase(
        clock=_default_clock(),
        room_repo=RoomRepositoryImpl(db),
        notifier=_default_notifier(),
    )

    try:
        booked = use_case.execute(room_id=room_id, start=body.start_time, end=body.end_time)
    except NotificationDeliveryError:
        return BookingResult(booked=True, confirmation_sent=False)

    return BookingResult(booked=booked, confirmation_sent=booked)


def cancel_booking_service(booking_id: str, db: Session) -> CancellationResult:
    use_case = CancelBookingUseCase(
        clock=_default_clock(),
        room_repo=RoomRepositoryImpl(db),
        notifier=_default_notifier(),
    )

    try:
        cancelled = use_case.execute(booking_id=booking_id)
    except NotificationDeliveryError:
        return CancellationResult(cancelled=True, confirmation_sent=False)

    return CancellationResult(cancelled=cancelled, confirmation_sent=cancelled)
