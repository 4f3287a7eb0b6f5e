from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ScheduleEntry


class ScheduleRepository(Protocol):
    def exists(self) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[ScheduleEntry]:
        raise NotImplementedError

    def find_slot(self, *, day: str, time_slot: str, class_name: str) -> tuple[int, Optional[ScheduleEntry]]:
        """Row index and entry for the slot, ``(-1, None)`` when free."""

        raise NotImplementedError

    def upsert(self, entry: ScheduleEntry) -> bool:
        raise NotImplementedError

    def delete_slot(self, *, day: str, time_slot: str, class_name: str) -> bool:
        raise NotImplementedError
