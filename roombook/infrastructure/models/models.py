from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    DateTime,
    Enum,
    ForeignKey,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roombook.core.entities.booking import BookingStatus
from roombook.infrastructure.database import Base


class RoomModel(Base):
    __tablename__ = "rooms"

    room_id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False, default="")

    bookings = relationship("BookingModel", back_populates="room", cascade="all, delete-orphan")


class BookingModel(Base):
    """
    Bookings are never deleted: a cancelled booking keeps its row with status CANCELLED.
    Timestamps are stored as naive UTC.
    """
    __tablename__ = "bookings"

    booking_id: Mapped[str] = mapped_column(String, primary_key=True)
    room_id: Mapped[str] = mapped_column(ForeignKey("rooms.room_id"), nullable=False, index=True)
    start_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[BookingStatus] = mapped_column(Enum(BookingStatus), nullable=False, index=True)

    room = relationship("RoomModel", back_populates="bookings")
