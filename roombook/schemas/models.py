from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel


class Status(Enum):
    PENDING = 'PENDING'
    ACTIVE = 'ACTIVE'
    CANCELLED = 'CANCELLED'


class Booking(BaseModel):
    booking_id: str
    room_id: str
    start_time: datetime
    end_time: datetime
    status: Status


class Room(BaseModel):
    room_id: str
    name: str
    bookings: List[Booking]


class RoomCreate(BaseModel):
    room_id: str
    name: Optional[str] = None


class BookingRequest(BaseModel):
    start_time: AwareDatetime
    end_time: AwareDatetime


class BookingResult(BaseModel):
    booked: bool
    confirmation_sent: bool


class CancellationResult(BaseModel):
    cancelled: bool
    confirmation_sent: bool
