from __future__ import annotations

import logging

from roombook.core.entities.room import Room
from roombook.core.gateways.clock import Clock
from roombook.core.gateways.notifier import NotificationDeliveryError, Notifier
from roombook.core.repositories.room_repository import RoomRepository
from roombook.core.use_cases.errors import DomainRuleViolation, ValidationError, is_blank
from roombook.core.use_cases.room_locks import RoomLocks, room_locks

logger = logging.getLogger(__name__)


class CancelBookingUseCase:
    """
    Cancels a booking that has not started yet.

    Returns False when no room holds the booking. Raises DomainRuleViolation when the
    booking already started (start_time <= now); the room keeps it in that case.
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

    def execute(self, *, booking_id: str) -> bool:
        if is_blank(booking_id):
            raise ValidationError("Cancellation requires a booking id")

        holder = self._find_room_holding(booking_id)
        if holder is None:
            logger.info("Cancellation rejected: booking %r not found", booking_id)
            return False

        with self._locks.hold(holder.room_id):
            # Reload under the lock; the booking may have been cancelled meanwhile.
            room = self._room_repo.get(holder.room_id)
            booking = room.get_booking(booking_id) if room is not None else None
            if booking is None:
                logger.info("Cancellation rejected: booking %r no longer exists", booking_id)
                return False

            if booking.has_started(self._clock.now()):
                raise DomainRuleViolation("Cannot cancel a booking that has started or finished")

            room.remove_booking(booking_id)
            self._room_repo.upsert(room)

        logger.info("Cancelled booking %s in room %r", booking_id, room.room_id)

        try:
            self._notifier.send_cancellation_confirmation(booking)
        except NotificationDeliveryError as e:
            logger.warning("Booking %s cancelled but confirmation failed: %s", booking_id, e)
            e.booking = booking
            raise

        return True

    def _find_room_holding(self, booking_id: str) -> Room | None:
        for room in self._room_repo.list_all():
            if room.has_booking(booking_id):
                return room
        return None
