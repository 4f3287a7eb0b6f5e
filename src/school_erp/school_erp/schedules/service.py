from __future__ import annotations

import logging
import uuid
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..store.locking import AdvisoryLock
from .model import ScheduleEntry
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)

LOCK_KEY = ("schedules",)


class ScheduleService:
    """Weekly timetable; saving an occupied slot overwrites it (last write wins)."""

    def __init__(self, schedules: ScheduleRepository, lock: AdvisoryLock):
        self._schedules = schedules
        self._lock = lock

    def for_teacher(self, teacher_id: str) -> Sequence[ScheduleEntry]:
        return [e for e in self._schedules.list_all() if e.teacher_id == str(teacher_id)]

    def for_class(self, class_name: str, section: str) -> Sequence[ScheduleEntry]:
        target = f"{class_name}-{section}"
        return [e for e in self._schedules.list_all() if e.class_name == target]

    def save(
        self,
        *,
        teacher_id: str,
        teacher_name: str,
        day: str,
        time_slot: str,
        subject: str,
        class_name: str,
    ) -> ScheduleEntry:
        day = require_non_empty(day, "Day")
        time_slot = require_non_empty(time_slot, "Time slot")
        class_name = require_non_empty(class_name, "Class")

        def _write() -> ScheduleEntry:
            _, existing = self._schedules.find_slot(day=day, time_slot=time_slot, class_name=class_name)
            entry = ScheduleEntry(
                schedule_id=existing.schedule_id if existing else f"SCH-{uuid.uuid4().hex[:12]}",
                teacher_id=str(teacher_id or ""),
                teacher_name=str(teacher_name or ""),
                day=day,
                time_slot=time_slot,
                subject=str(subject or ""),
                class_name=class_name,
            )
            self._schedules.upsert(entry)
            return entry

        entry = self._lock.run(_write, LOCK_KEY)
        logger.info("Schedule %s %s %s -> %s", day, time_slot, class_name, entry.teacher_id)
        return entry

    def delete(self, *, day: str, time_slot: str, class_name: str) -> None:
        if not self._schedules.exists():
            raise NotFoundError("No table")

        def _write() -> None:
            if not self._schedules.delete_slot(day=str(day), time_slot=str(time_slot), class_name=str(class_name)):
                raise NotFoundError("Not found")

        self._lock.run(_write, LOCK_KEY)
