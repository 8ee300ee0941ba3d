from __future__ import annotations

from dataclasses import dataclass

from roombook.core.entities.booking import Booking
from roombook.core.repositories.room_repository import RoomRepository


class NotFoundError(Exception):
    """Raise to map to HTTP 404."""


@dataclass(frozen=True, slots=True)
class RoomDTO:
    """
    Use-case return type for GET /rooms/{room_id}

    Bookings are the room's active bookings ordered by start time.
    """
    room_id: str
    name: str
    bookings: list[Booking]


class GetRoomUseCase:
    def __init__(self, *, room_repo: RoomRepository) -> None:
        self._room_repo = room_repo

    def execute(self, *, room_id: str) -> RoomDTO:
        room = self._room_repo.get(room_id)
        if room is None:
            raise NotFoundError("Room not found")

        return RoomDTO(
            room_id=room.room_id,
            name=room.name,
            bookings=room.sorted_bookings(),
        )
