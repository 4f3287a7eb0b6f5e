from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import date_key, format_timestamp, now_local
from ..common.validators import require_list, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..store.locking import AdvisoryLock
from .model import Homework
from .repository import HomeworkRepository

logger = logging.getLogger(__name__)


class HomeworkService:
    def __init__(self, homework: HomeworkRepository, lock: AdvisoryLock):
        self._homework = homework
        self._lock = lock

    def list_for(self, class_name: str, section: str, date=None) -> Sequence[Homework]:
        """Homework for a class, newest first, optionally only one day's."""

        wanted = date_key(date) if date else None
        items = [
            hw
            for hw in self._homework.list_for_class(class_name, section)
            if wanted is None or date_key(hw.date) == wanted
        ]
        items.reverse()
        return items

    def assign(
        self,
        *,
        class_name: str,
        section: str,
        date,
        entries: list,
        teacher_name: str = "",
        now: Optional[datetime] = None,
    ) -> int:
        require_non_empty(class_name, "Class")
        day = date_key(date)
        if not day:
            raise ValidationError("Date is required")
        require_list(entries, "Homework entries")

        created_at = format_timestamp(now or now_local())
        items = []
        for e in entries:
            items.append(
                Homework(
                    homework_id=f"HW-{uuid.uuid4().hex[:12]}",
                    date=day,
                    subject=require_non_empty(e.get("subject"), "Subject"),
                    content=str(e.get("content") or ""),
                    teacher_name=str(teacher_name or "School"),
                    created_at=created_at,
                )
            )

        count = self._lock.run(
            lambda: self._homework.add_many(class_name, section, items), ("homework", class_name, section)
        )
        logger.info("Assigned %d homework entries to %s-%s for %s", count, class_name, section, day)
        return count

    def delete(self, homework_id: str) -> None:
        def _write() -> None:
            if not self._homework.delete(str(homework_id)):
                raise NotFoundError("Homework not found")

        self._lock.run(_write, ("homework",))
        logger.info("Homework %s removed", homework_id)
