from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from roombook.core.entities.booking import Booking
from roombook.core.gateways.notifier import NotificationDeliveryError, Notifier


class OutboxStore:
    def __init__(self, path: Path):
        self._path = path

    def append(self, record: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a") as f:
            f.write(json.dumps(record) + "\n")


class JsonlOutboxNotifier(Notifier):
    """
    Notifier that queues confirmations in an append-only JSONL outbox.

    Delivering the outbox (email, chat, ...) is left to a separate process. The
    outbox file is only touched when a confirmation is sent; any failure to write
    the record is reported as NotificationDeliveryError.
    """

    def __init__(self, *, file_path: str | Path) -> None:
        self._store = OutboxStore(Path(file_path))

    def send_booking_confirmation(self, booking: Booking) -> None:
        self._append("BookingConfirmed", booking)

    def send_cancellation_confirmation(self, booking: Booking) -> None:
        self._append("BookingCancelled", booking)

    def _append(self, kind: str, booking: Booking) -> None:
        try:
            self._store.append(self._booking_to_record(kind, booking))
        except OSError as e:
            raise NotificationDeliveryError(f"Could not queue {kind} for {booking.booking_id}: {e}") from e

    @staticmethod
    def _booking_to_record(kind: str, booking: Booking) -> dict[str, Any]:
        return {
            "type": kind,
            "booking_id": booking.booking_id,
            "room_id": booking.room_id,
            "start_time": booking.start_time.isoformat(),
            "end_time": booking.end_time.isoformat(),
        }
