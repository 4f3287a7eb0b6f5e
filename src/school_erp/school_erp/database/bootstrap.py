from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from ..store.repository import GridStore
from ..store.schema import FIXED_SHEETS, USERS_MASTER
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable whatever the configured database is called.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue
        if ch == "\\":
            buf.append(ch)
            escape = True
            continue
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _connect(target: DBConfig, *, with_database: bool = True):
    return DatabaseConnection(target).connect(with_database=with_database)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    """Create the grid tables (idempotent: CREATE TABLE IF NOT EXISTS)."""

    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def provision_store(store: GridStore) -> int:
    """Create every fixed sheet with its header row. Returns how many were new.

    Existing sheets whose header row is a shorter prefix of the declared one
    are widened in place; their rows are left untouched.
    """

    created = 0
    for schema in FIXED_SHEETS:
        if not store.sheet_exists(schema.book, schema.name):
            created += 1
            store.get_or_create_sheet(schema.book, schema.name, schema.headers)
            continue
        current = list(store.get_headers(schema.book, schema.name))
        wanted = list(schema.headers)
        if len(current) < len(wanted) and wanted[: len(current)] == current:
            store.set_headers(schema.book, schema.name, wanted)
            logger.info("Widened %s/%s to %d columns", schema.book.value, schema.name, len(wanted))
    if created:
        logger.info("Provisioned %d sheets", created)
    return created


def ensure_admin_user(store: GridStore, *, password: str) -> bool:
    """Seed the ``admin`` login if no such user exists. True when created."""

    for r in store.get_rows(USERS_MASTER.book, USERS_MASTER.name):
        if r and r[0] == ADMIN_USERNAME:
            return False
    store.get_or_create_sheet(USERS_MASTER.book, USERS_MASTER.name, USERS_MASTER.headers)
    store.append_row(
        USERS_MASTER.book,
        USERS_MASTER.name,
        [ADMIN_USERNAME, generate_password_hash(password), Role.ADMIN.value, "Administrator", "ADMIN", "", "", ""],
    )
    logger.info("Seeded %s user", ADMIN_USERNAME)
    return True
