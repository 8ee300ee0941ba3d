from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class _Entry:
    __slots__ = ("lock", "holders")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.holders = 0


class RoomLocks:
    """
    Process-wide registry of one lock per room id.

    Check-availability -> mutate -> save on a single room must run while holding
    that room's lock, otherwise two overlapping requests can both see the room free.
    An entry lives only while some caller holds or waits for it.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    @contextmanager
    def hold(self, room_id: str) -> Iterator[None]:
        with self._guard:
            entry = self._entries.get(room_id)
            if entry is None:
                entry = _Entry()
                self._entries[room_id] = entry
            entry.holders += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._entries[room_id]


room_locks = RoomLocks()
