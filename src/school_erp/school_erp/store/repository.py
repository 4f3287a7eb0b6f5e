from __future__ import annotations

from typing import Protocol, Sequence

from .schema import Book


class GridStore(Protocol):
    """Spreadsheet-style record store.

    Each (book, sheet) is a grid with one header row followed by data rows.
    Row indices are 0-based positions among the data rows (header excluded)
    and shift on delete, so callers re-resolve an index before acting on it.
    Reading a sheet that does not exist yields an empty result, not an error.
    """

    def sheet_exists(self, book: Book, sheet: str) -> bool:
        raise NotImplementedError

    def list_sheets(self, book: Book) -> Sequence[str]:
        raise NotImplementedError

    def get_or_create_sheet(self, book: Book, sheet: str, headers: Sequence[str] = ()) -> None:
        raise NotImplementedError

    def get_headers(self, book: Book, sheet: str) -> list[str]:
        raise NotImplementedError

    def set_headers(self, book: Book, sheet: str, headers: Sequence[str]) -> None:
        raise NotImplementedError

    def get_rows(self, book: Book, sheet: str) -> list[list[str]]:
        raise NotImplementedError

    def append_row(self, book: Book, sheet: str, row: Sequence[object]) -> int:
        """Append and return the new row's index."""

        raise NotImplementedError

    def update_row(self, book: Book, sheet: str, index: int, row: Sequence[object]) -> None:
        raise NotImplementedError

    def delete_row(self, book: Book, sheet: str, index: int) -> None:
        raise NotImplementedError


def to_cells(row: Sequence[object]) -> list[str]:
    """Cells are stored as display strings; None becomes blank."""
    return ["" if v is None else str(v) for v in row]
