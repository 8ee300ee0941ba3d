from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from roombook.core.entities.booking import Booking
from roombook.core.gateways.clock import Clock
from roombook.core.gateways.notifier import NotificationDeliveryError, Notifier
from roombook.core.use_cases.room_locks import RoomLocks

NOW = datetime(2025, 1, 30, 12, 0, tzinfo=timezone.utc)


class _FixedClock(Clock):
    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta


class _RecordingNotifier(Notifier):
    """Records every confirmation; raises NotificationDeliveryError while `fail` is set."""

    def __init__(self) -> None:
        self.confirmed: list[Booking] = []
        self.cancelled: list[Booking] = []
        self.fail = False

    def send_booking_confirmation(self, booking: Booking) -> None:
        self.confirmed.append(booking)
        if self.fail:
            raise NotificationDeliveryError("smtp down")

    def send_cancellation_confirmation(self, booking: Booking) -> None:
        self.cancelled.append(booking)
        if self.fail:
            raise NotificationDeliveryError("smtp down")


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def clock() -> _FixedClock:
    return _FixedClock(NOW)


@pytest.fixture()
def notifier() -> _RecordingNotifier:
    return _RecordingNotifier()


@pytest.fixture()
def locks() -> RoomLocks:
    return RoomLocks()
