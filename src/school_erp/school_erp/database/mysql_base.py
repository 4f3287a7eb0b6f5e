from __future__ import annotations

from contextlib import contextmanager
from typing import Any, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Yield ``(conn, cursor)`` on a short-lived connection; commit on success."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetch_column(cur, name: str) -> List[Any]:
    """Values of one selected column, in result order."""

    return [row[name] for row in (cur.fetchall() or [])]


def fetch_scalar(cur, name: str) -> Optional[Any]:
    """First row's value for ``name``; queries using it select at most one row."""

    row = cur.fetchone()
    return row[name] if row else None
