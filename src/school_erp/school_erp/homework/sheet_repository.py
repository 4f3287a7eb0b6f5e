from __future__ import annotations

from typing import Iterable, Sequence

from ..store.repository import GridStore
from ..store.schema import HOMEWORK_TEMPLATE, class_sheet_name
from .model import Homework
from .repository import HomeworkRepository


class SheetHomeworkRepository(HomeworkRepository):
    """One sheet per class-section in the homework book."""

    def __init__(self, store: GridStore):
        self._store = store

    def list_for_class(self, class_name: str, section: str) -> Sequence[Homework]:
        sheet = class_sheet_name(class_name, section)
        return [Homework.from_row(r) for r in self._store.get_rows(HOMEWORK_TEMPLATE.book, sheet)]

    def add_many(self, class_name: str, section: str, items: Iterable[Homework]) -> int:
        schema = HOMEWORK_TEMPLATE.for_sheet(class_sheet_name(class_name, section))
        self._store.get_or_create_sheet(schema.book, schema.name, schema.headers)
        count = 0
        for hw in items:
            self._store.append_row(schema.book, schema.name, hw.to_row())
            count += 1
        return count

    def delete(self, homework_id: str) -> bool:
        """Remove the entry with this ID from whichever class sheet holds it."""

        book = HOMEWORK_TEMPLATE.book
        for sheet in self._store.list_sheets(book):
            for i, r in enumerate(self._store.get_rows(book, sheet)):
                if r and str(r[0]) == str(homework_id):
                    self._store.delete_row(book, sheet, i)
                    return True
        return False
