from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from roombook.core.entities.booking import Booking, BookingStatus
from roombook.core.entities.room import Room
from roombook.core.repositories.room_repository import RoomRepository
from roombook.infrastructure.models.models import BookingModel, RoomModel


def _to_db_time(value: datetime) -> datetime:
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _from_db_time(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class RoomRepositoryImpl(RoomRepository):
    """
    SQLAlchemy implementation for the Room aggregate.

    Only ACTIVE booking rows belong to a loaded room. On upsert, bookings that left
    the room are soft-deleted (status CANCELLED) so the booking history is kept.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def get(self, room_id: str) -> Room | None:
        row = self._db.get(RoomModel, room_id)
        if row is None:
            return None

        rows = self._db.scalars(
            select(BookingModel)
            .where(BookingModel.room_id == room_id)
            .where(BookingModel.status == BookingStatus.ACTIVE)
        ).all()
        return self._to_room(row, rows)

    def list_all(self) -> list[Room]:
        rooms = self._db.scalars(select(RoomModel).order_by(RoomModel.room_id)).all()
        active = self._db.scalars(
            select(BookingModel).where(BookingModel.status == BookingStatus.ACTIVE)
        ).all()

        by_room: dict[str, list[BookingModel]] = defaultdict(list)
        for booking_row in active:
            by_room[booking_row.room_id].append(booking_row)

        return [self._to_room(row, by_room[row.room_id]) for row in rooms]

    def upsert(self, room: Room) -> None:
        row = self._db.get(RoomModel, room.room_id)
        if row is None:
            row = RoomModel(room_id=room.room_id)
        row.name = room.name
        self._db.add(row)

        stored = {
            b.booking_id: b
            for b in self._db.scalars(
                select(BookingModel)
                .where(BookingModel.room_id == room.room_id)
                .where(BookingModel.status == BookingStatus.ACTIVE)
            ).all()
        }

        for booking_id, booking_row in stored.items():
            if booking_id not in room.bookings:
                booking_row.status = BookingStatus.CANCELLED

        for booking in room.bookings.values():
            if booking.booking_id in stored:
                continue
            self._db.add(
                BookingModel(
                    booking_id=booking.booking_id,
                    room_id=room.room_id,
                    start_time=_to_db_time(booking.start_time),
                    end_time=_to_db_time(booking.end_time),
                    status=BookingStatus.ACTIVE,
                )
            )

        self._db.commit()

    @staticmethod
    def _to_room(row: RoomModel, booking_rows: list[BookingModel]) -> Room:
        bookings = {
            b.booking_id: Booking(
                booking_id=b.booking_id,
                room_id=b.room_id,
                start_time=_from_db_time(b.start_time),
                end_time=_from_db_time(b.end_time),
                status=BookingStatus(b.status) if not isinstance(b.status, BookingStatus) else b.status,
            )
            for b in booking_rows
        }
        return Room(room_id=row.room_id, name=row.name, bookings=bookings)
