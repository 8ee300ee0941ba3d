from __future__ import annotations

import logging

from roombook.core.entities.booking import Booking
from roombook.core.gateways.notifier import Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Writes confirmations to the log instead of delivering them."""

    def send_booking_confirmation(self, booking: Booking) -> None:
        logger.info(
            "Booking confirmed: %s room=%r %s - %s",
            booking.booking_id, booking.room_id, booking.start_time.isoformat(), booking.end_time.isoformat(),
        )

    def send_cancellation_confirmation(self, booking: Booking) -> None:
        logger.info("Booking cancelled: %s room=%r", booking.booking_id, booking.room_id)
