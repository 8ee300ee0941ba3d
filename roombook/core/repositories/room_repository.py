from __future__ import annotations

from abc import ABC, abstractmethod

from roombook.core.entities.room import Room


class RoomRepository(ABC):
    """
    Repository interface for Room aggregates (room + its active bookings).
    """

    @abstractmethod
    def get(self, room_id: str) -> Room | None:
        """Aggregate load: room and its active bookings, or None if missing."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Room]:
        raise NotImplementedError

    @abstractmethod
    def upsert(self, room: Room) -> None:
        """Create or update a room and its booking set as one unit."""
        raise NotImplementedError
