from __future__ import annotations

from datetime import datetime

from roombook.core.entities.room import Room
from roombook.core.repositories.room_repository import RoomRepository
from roombook.core.use_cases.errors import ValidationError, is_aware_datetime


class GetAvailableRoomsUseCase:
    def __init__(self, *, room_repo: RoomRepository) -> None:
        self._room_repo = room_repo

    def execute(self, *, start: datetime, end: datetime) -> list[Room]:
        if not is_aware_datetime(start) or not is_aware_datetime(end):
            raise ValidationError("Availability query requires valid start and end times")

        if end <= start:
            raise ValidationError("End time must be after start time")

        return [room for room in self._room_repo.list_all() if room.is_available(start, end)]
