from __future__ import annotations

from typing import Optional

from ..store.repository import GridStore
from ..store.schema import SYSTEM_SETTINGS
from .repository import SettingsRepository


class SheetSettingsRepository(SettingsRepository):
    """``Property -> Value`` pairs in the users book."""

    def __init__(self, store: GridStore):
        self._store = store
        self._sheet = SYSTEM_SETTINGS

    def get(self, prop: str) -> Optional[str]:
        for r in self._store.get_rows(self._sheet.book, self._sheet.name):
            if r and r[0] == prop:
                return r[1] if len(r) > 1 else ""
        return None

    def put(self, prop: str, value: str) -> None:
        self._store.get_or_create_sheet(self._sheet.book, self._sheet.name, self._sheet.headers)
        for i, r in enumerate(self._store.get_rows(self._sheet.book, self._sheet.name)):
            if r and r[0] == prop:
                self._store.update_row(self._sheet.book, self._sheet.name, i, [prop, value])
                return
        self._store.append_row(self._sheet.book, self._sheet.name, [prop, value])
