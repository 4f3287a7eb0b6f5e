from __future__ import annotations

import threading
from typing import Sequence

from .repository import GridStore, to_cells
from .schema import Book


class InMemoryGridStore(GridStore):
    """Process-local grid store.

    Every operation holds an internal lock, so single calls are atomic; a
    sequence of calls is not (use the advisory lock for that).
    """

    def __init__(self):
        self._sheets: dict[tuple[str, str], dict] = {}
        self._lock = threading.RLock()

    def _key(self, book: Book, sheet: str) -> tuple[str, str]:
        return (Book(book).value, str(sheet))

    def _sheet(self, book: Book, sheet: str):
        return self._sheets.get(self._key(book, sheet))

    def sheet_exists(self, book: Book, sheet: str) -> bool:
        with self._lock:
            return self._sheet(book, sheet) is not None

    def list_sheets(self, book: Book) -> Sequence[str]:
        with self._lock:
            b = Book(book).value
            return [name for (bk, name) in self._sheets if bk == b]

    def get_or_create_sheet(self, book: Book, sheet: str, headers: Sequence[str] = ()) -> None:
        with self._lock:
            if self._sheet(book, sheet) is None:
                self._sheets[self._key(book, sheet)] = {"headers": list(headers), "rows": []}

    def get_headers(self, book: Book, sheet: str) -> list[str]:
        with self._lock:
            s = self._sheet(book, sheet)
            return list(s["headers"]) if s else []

    def set_headers(self, book: Book, sheet: str, headers: Sequence[str]) -> None:
        with self._lock:
            self.get_or_create_sheet(book, sheet)
            self._sheet(book, sheet)["headers"] = list(headers)

    def get_rows(self, book: Book, sheet: str) -> list[list[str]]:
        with self._lock:
            s = self._sheet(book, sheet)
            if not s:
                return []
            return [list(r) for r in s["rows"]]

    def append_row(self, book: Book, sheet: str, row: Sequence[object]) -> int:
        with self._lock:
            self.get_or_create_sheet(book, sheet)
            rows = self._sheet(book, sheet)["rows"]
            rows.append(to_cells(row))
            return len(rows) - 1

    def update_row(self, book: Book, sheet: str, index: int, row: Sequence[object]) -> None:
        with self._lock:
            rows = self._rows_or_raise(book, sheet, index)
            rows[index] = to_cells(row)

    def delete_row(self, book: Book, sheet: str, index: int) -> None:
        with self._lock:
            rows = self._rows_or_raise(book, sheet, index)
            del rows[index]

    def _rows_or_raise(self, book: Book, sheet: str, index: int) -> list:
        s = self._sheet(book, sheet)
        rows = s["rows"] if s else []
        if index < 0 or index >= len(rows):
            raise IndexError(f"Row {index} out of range for {Book(book).value}/{sheet}")
        return rows
