from __future__ import annotations

from roombook.core.entities.room import Room
from roombook.core.repositories.room_repository import RoomRepository


def _copy(room: Room) -> Room:
    # Bookings are frozen; copying the mapping is enough.
    return Room(room_id=room.room_id, name=room.name, bookings=dict(room.bookings))


class InMemoryRoomRepository(RoomRepository):
    """
    Dict-backed Room repository.

    Rooms are copied on the way in and out so callers never share state with the
    store without going through upsert().
    """

    def __init__(self, rooms: list[Room] | None = None) -> None:
        self._rooms: dict[str, Room] = {}
        for room in rooms or []:
            self.upsert(room)

    def get(self, room_id: str) -> Room | None:
        room = self._rooms.get(room_id)
        return _copy(room) if room is not None else None

    def list_all(self) -> list[Room]:
        return [_copy(room) for room in self._rooms.values()]

    def upsert(self, room: Room) -> None:
        self._rooms[room.room_id] = _copy(room)
