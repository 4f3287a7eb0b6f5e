from __future__ import annotations

import json
from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, now_local
from .repository import GridStore
from .schema import DELETED_LOG


def archive_record(
    store: GridStore,
    *,
    module: str,
    record_id: str,
    row: Sequence[object],
    deleted_by: Optional[str] = None,
) -> None:
    """Copy a row into the archive log before it is removed from its sheet."""

    store.get_or_create_sheet(DELETED_LOG.book, DELETED_LOG.name, DELETED_LOG.headers)
    store.append_row(
        DELETED_LOG.book,
        DELETED_LOG.name,
        [format_timestamp(now_local()), deleted_by or "System", module, record_id, json.dumps(list(row))],
    )
