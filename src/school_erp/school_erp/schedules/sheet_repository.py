from __future__ import annotations

from typing import Optional, Sequence

from ..store.repository import GridStore
from ..store.schema import TIME_TABLE
from .model import ScheduleEntry
from .repository import ScheduleRepository


class SheetScheduleRepository(ScheduleRepository):
    def __init__(self, store: GridStore):
        self._store = store

    def list_all(self) -> Sequence[ScheduleEntry]:
        return [ScheduleEntry.from_row(r) for r in self._store.get_rows(TIME_TABLE.book, TIME_TABLE.name)]

    def find_slot(self, *, day: str, time_slot: str, class_name: str) -> tuple[int, Optional[ScheduleEntry]]:
        for i, entry in enumerate(self.list_all()):
            if entry.same_slot(day=day, time_slot=time_slot, class_name=class_name):
                return i, entry
        return -1, None

    def upsert(self, entry: ScheduleEntry) -> bool:
        """Overwrite the entry occupying the same slot, else append. True if appended."""

        self._store.get_or_create_sheet(TIME_TABLE.book, TIME_TABLE.name, TIME_TABLE.headers)
        idx, _ = self.find_slot(day=entry.day, time_slot=entry.time_slot, class_name=entry.class_name)
        if idx > -1:
            self._store.update_row(TIME_TABLE.book, TIME_TABLE.name, idx, entry.to_row())
            return False
        self._store.append_row(TIME_TABLE.book, TIME_TABLE.name, entry.to_row())
        return True

    def delete_slot(self, *, day: str, time_slot: str, class_name: str) -> bool:
        idx, _ = self.find_slot(day=day, time_slot=time_slot, class_name=class_name)
        if idx == -1:
            return False
        self._store.delete_row(TIME_TABLE.book, TIME_TABLE.name, idx)
        return True

    def exists(self) -> bool:
        return self._store.sheet_exists(TIME_TABLE.book, TIME_TABLE.name)
