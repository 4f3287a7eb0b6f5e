from __future__ import annotations

import json
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_column, fetch_scalar
from .repository import GridStore, to_cells
from .schema import Book


def _load_cells(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        value = json.loads(value)
    return [str(v) for v in value]


class MySQLGridStore(GridStore):
    """Grid store persisted in two MySQL tables (see database/schema.sql).

    ``grid_sheets`` holds one header row per (book, sheet); ``grid_rows`` holds
    the data rows, ordered by their auto-increment id.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def sheet_exists(self, book: Book, sheet: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM grid_sheets WHERE book=%s AND sheet=%s",
                (Book(book).value, sheet),
            )
            return fetch_scalar(cur, "found") is not None

    def list_sheets(self, book: Book) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT sheet FROM grid_sheets WHERE book=%s ORDER BY created_at, sheet",
                (Book(book).value,),
            )
            return [str(name) for name in fetch_column(cur, "sheet")]

    def get_or_create_sheet(self, book: Book, sheet: str, headers: Sequence[str] = ()) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO grid_sheets(book, sheet, headers)
                VALUES(%s,%s,%s)
                """,
                (Book(book).value, sheet, json.dumps(list(headers))),
            )

    def get_headers(self, book: Book, sheet: str) -> list[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT headers FROM grid_sheets WHERE book=%s AND sheet=%s",
                (Book(book).value, sheet),
            )
            return _load_cells(fetch_scalar(cur, "headers"))

    def set_headers(self, book: Book, sheet: str, headers: Sequence[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO grid_sheets(book, sheet, headers)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE headers=VALUES(headers)
                """,
                (Book(book).value, sheet, json.dumps(list(headers))),
            )

    def get_rows(self, book: Book, sheet: str) -> list[list[str]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT cells FROM grid_rows
                WHERE book=%s AND sheet=%s
                ORDER BY row_id
                """,
                (Book(book).value, sheet),
            )
            return [_load_cells(cells) for cells in fetch_column(cur, "cells")]

    def append_row(self, book: Book, sheet: str, row: Sequence[object]) -> int:
        self.get_or_create_sheet(book, sheet)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO grid_rows(book, sheet, cells) VALUES(%s,%s,%s)",
                (Book(book).value, sheet, json.dumps(to_cells(row))),
            )
            row_id = int(cur.lastrowid)
            cur.execute(
                "SELECT COUNT(*) AS n FROM grid_rows WHERE book=%s AND sheet=%s AND row_id < %s",
                (Book(book).value, sheet, row_id),
            )
            return int(fetch_scalar(cur, "n") or 0)

    def update_row(self, book: Book, sheet: str, index: int, row: Sequence[object]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            row_id = self._resolve_row_id(cur, book, sheet, index)
            cur.execute(
                "UPDATE grid_rows SET cells=%s WHERE row_id=%s",
                (json.dumps(to_cells(row)), row_id),
            )

    def delete_row(self, book: Book, sheet: str, index: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            row_id = self._resolve_row_id(cur, book, sheet, index)
            cur.execute("DELETE FROM grid_rows WHERE row_id=%s", (row_id,))

    def _resolve_row_id(self, cur, book: Book, sheet: str, index: int) -> int:
        if index < 0:
            raise IndexError(f"Row {index} out of range for {Book(book).value}/{sheet}")
        cur.execute(
            """
            SELECT row_id FROM grid_rows
            WHERE book=%s AND sheet=%s
            ORDER BY row_id
            LIMIT 1 OFFSET %s
            """,
            (Book(book).value, sheet, int(index)),
        )
        row_id = fetch_scalar(cur, "row_id")
        if row_id is None:
            raise IndexError(f"Row {index} out of range for {Book(book).value}/{sheet}")
        return int(row_id)
