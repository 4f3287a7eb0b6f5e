from __future__ import annotations

from typing import Optional, Sequence

from ..store.archive import archive_record
from ..store.repository import GridStore
from ..store.schema import EVENTS_MASTER
from .model import CalendarEvent
from .repository import EventRepository


class SheetEventRepository(EventRepository):
    def __init__(self, store: GridStore):
        self._store = store
        self._sheet = EVENTS_MASTER

    def _index_of(self, event_id: str) -> int:
        for i, r in enumerate(self._store.get_rows(self._sheet.book, self._sheet.name)):
            if r and str(r[0]) == str(event_id):
                return i
        return -1

    def exists(self) -> bool:
        return self._store.sheet_exists(self._sheet.book, self._sheet.name)

    def list_all(self) -> Sequence[CalendarEvent]:
        return [CalendarEvent.from_row(r) for r in self._store.get_rows(self._sheet.book, self._sheet.name)]

    def add(self, event: CalendarEvent) -> None:
        self._store.get_or_create_sheet(self._sheet.book, self._sheet.name, self._sheet.headers)
        self._store.append_row(self._sheet.book, self._sheet.name, event.to_row())

    def update(self, event: CalendarEvent) -> bool:
        idx = self._index_of(event.event_id)
        if idx == -1:
            return False
        self._store.update_row(self._sheet.book, self._sheet.name, idx, event.to_row())
        return True

    def remove(self, event_id: str, *, deleted_by: Optional[str] = None) -> bool:
        rows = self._store.get_rows(self._sheet.book, self._sheet.name)
        for i, r in enumerate(rows):
            if r and str(r[0]) == str(event_id):
                archive_record(self._store, module="EVENTS", record_id=str(event_id), row=r, deleted_by=deleted_by)
                self._store.delete_row(self._sheet.book, self._sheet.name, i)
                return True
        return False
