from __future__ import annotations

import logging

from roombook.core.entities.room import Room
from roombook.core.repositories.room_repository import RoomRepository
from roombook.core.use_cases.errors import ValidationError, is_blank
from roombook.core.use_cases.room_locks import RoomLocks, room_locks

logger = logging.getLogger(__name__)


class RoomAlreadyExistsError(Exception):
    """Raise to map to HTTP 409."""


class RegisterRoomUseCase:
    def __init__(self, *, room_repo: RoomRepository, locks: RoomLocks = room_locks) -> None:
        self._room_repo = room_repo
        self._locks = locks

    def execute(self, *, room_id: str, name: str | None = None) -> Room:
        if is_blank(room_id):
            raise ValidationError("Room registration requires a room id")

        with self._locks.hold(room_id):
            if self._room_repo.get(room_id) is not None:
                raise RoomAlreadyExistsError(f"Room already exists: {room_id!r}")

            room = Room(room_id=room_id, name=name or room_id)
            self._room_repo.upsert(room)

        logger.info("Registered room %r", room_id)
        return room
