from __future__ import annotations

import logging
from datetime import datetime

from roombook.core.entities.booking import Booking
from roombook.core.gateways.clock import Clock
from roombook.core.gateways.notifier import NotificationDeliveryError, Notifier
from roombook.core.repositories.room_repository import RoomRepository
from roombook.core.use_cases.errors import ValidationError, is_aware_datetime, is_blank
from roombook.core.use_cases.room_locks import RoomLocks, room_locks

logger = logging.getLogger(__name__)


class BookRoomUseCase:
    """
    Grants a booking for [start, end) in a room when the span is free.

    Returns False (no mutation, no notification) when the room is unknown or the span
    is taken. The booking is persisted before the confirmation is sent, so a failed
    confirmation never undoes it.
    """

    def __init__(
            self,
            *,
            clock: Clock,
            room_repo: RoomRepository,
            notifier: Notifier,
            locks: RoomLocks = room_locks,
    ) -> None:
        self._clock = clock
        self._room_repo = room_repo
        self._notifier = notifier
        self._locks = locks

    def execute(self, *, room_id: str, start: datetime, end: datetime) -> bool:
        self._validate(room_id=room_id, start=start, end=end)

        with self._locks.hold(room_id):
            room = self._room_repo.get(room_id)
            if room is None:
                logger.info("Booking rejected: room %r not found", room_id)
                return False

            if not room.is_available(start, end):
                logger.info("Booking rejected: room %r is taken for %s - %s", room_id, start, end)
                return False

            booking = Booking(room_id=room_id, start_time=start, end_time=end)
            room.add_booking(booking)
            self._room_repo.upsert(room)

        logger.info("Booked room %r as %s for %s - %s", room_id, booking.booking_id, start, end)

        try:
            self._notifier.send_booking_confirmation(booking)
        except NotificationDeliveryError as e:
            logger.warning("Booking %s committed but confirmation failed: %s", booking.booking_id, e)
            e.booking = booking
            raise

        return True

    def _validate(self, *, room_id: str, start: datetime, end: datetime) -> None:
        if is_blank(room_id) or not is_aware_datetime(start) or not is_aware_datetime(end):
            raise ValidationError("Booking requires valid start and end times and a room id")

        if end <= start:
            raise ValidationError("End time must be after start time")

        if start <= self._clock.now():
            raise ValidationError("Booking requires a start time in the future")
