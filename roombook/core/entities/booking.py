from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4


class BookingStatus(str, Enum):
    # Reserved for holds that are not yet confirmed; nothing assigns it today.
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"


def spans_overlap(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """
    Half-open spans [start, end) overlap iff each one starts before the other ends.
    Touching boundaries (10:00-11:00 and 11:00-12:00) do not overlap.
    """
    return start_a < end_b and start_b < end_a


@dataclass(frozen=True, slots=True)
class Booking:
    room_id: str
    start_time: datetime
    end_time: datetime
    booking_id: str = field(default_factory=lambda: uuid4().hex)
    status: BookingStatus = BookingStatus.ACTIVE

    def __post_init__(self) -> None:
        if self.start_time >= self.end_time:
            raise ValueError("Booking start time must be earlier than end time")

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return spans_overlap(self.start_time, self.end_time, start, end)

    def has_started(self, now: datetime) -> bool:
        return self.start_time <= now
