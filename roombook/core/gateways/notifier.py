from __future__ import annotations

from abc import ABC, abstractmethod

from roombook.core.entities.booking import Booking


class NotificationDeliveryError(Exception):
    """
    A confirmation could not be delivered.

    Raised after the booking change was committed; `booking` is the committed booking
    once a use case has attached it.
    """

    def __init__(self, message: str, *, booking: Booking | None = None) -> None:
        super().__init__(message)
        self.booking = booking


class Notifier(ABC):
    @abstractmethod
    def send_booking_confirmation(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def send_cancellation_confirmation(self, booking: Booking) -> None:
        raise NotImplementedError
