from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from roombook.core.entities.booking import Booking


@dataclass(slots=True)
class Room:
    room_id: str
    name: str = ""
    bookings: dict[str, Booking] = field(default_factory=dict)

    def is_available(self, start: datetime, end: datetime) -> bool:
        return not any(booking.overlaps(start, end) for booking in self.bookings.values())

    def add_booking(self, booking: Booking) -> None:
        if booking.room_id != self.room_id:
            raise ValueError(f"Booking {booking.booking_id!r} belongs to room {booking.room_id!r}")
        if booking.booking_id in self.bookings:
            raise ValueError(f"Room already holds booking {booking.booking_id!r}")
        if not self.is_available(booking.start_time, booking.end_time):
            raise ValueError("Booking overlaps an existing booking in this room")
        self.bookings[booking.booking_id] = booking

    def remove_booking(self, booking_id: str) -> Booking:
        booking = self.bookings.pop(booking_id, None)
        if booking is None:
            raise ValueError(f"Room {self.room_id!r} has no booking {booking_id!r}")
        return booking

    def has_booking(self, booking_id: str) -> bool:
        return booking_id in self.bookings

    def get_booking(self, booking_id: str) -> Booking | None:
        return self.bookings.get(booking_id)

    def sorted_bookings(self) -> list[Booking]:
        return sorted(self.bookings.values(), key=lambda b: b.start_time)
