from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceStats
from ..common.datetime_utils import date_key, format_timestamp, now_local
from ..common.numbers import compact_number, percentage
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import StaffAttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..store.locking import AdvisoryLock
from .model import Holiday, StaffDayRow, StaffEntry, StaffMark
from .repository import StaffAttendanceRepository

logger = logging.getLogger(__name__)


def _require_date(value) -> str:
    key = date_key(value)
    if not key:
        raise ValidationError(f"Invalid date: {value!r}")
    return key


def _status(value: str) -> StaffAttendanceStatus:
    try:
        return StaffAttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value}") from None


class StaffAttendanceService:
    """Employee attendance log and teacher leave records.

    Percentages here are weighted (Present/Late 1, Half Day 0.5, Absent 0),
    unlike the student ledger which counts present days only.
    """

    def __init__(
        self,
        staff_attendance: StaffAttendanceRepository,
        employees: EmployeeRepository,
        lock: AdvisoryLock,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._log = staff_attendance
        self._employees = employees
        self._lock = lock
        self._history_limit = int(history_limit)

    def get_day(self, date) -> list[StaffDayRow]:
        day = _require_date(date)
        by_employee = {m.employee_id: m for m in self._log.list_marks(date=day)}
        return [
            StaffDayRow(
                employee_id=e.employee_id,
                name=e.name,
                post=e.post,
                photo_url=e.photo_url,
                status=(by_employee[e.employee_id].status or None) if e.employee_id in by_employee else None,
            )
            for e in self._employees.list_all()
        ]

    def submit_day(self, date, entries: Iterable[StaffEntry], *, now: Optional[datetime] = None) -> int:
        day = _require_date(date)
        entries = [e for e in entries if e.employee_id]
        if not entries:
            raise ValidationError("Attendance list is empty")
        for e in entries:
            _status(e.status)

        def _write() -> int:
            stamp = format_timestamp(now or now_local())
            for e in entries:
                self._log.upsert_mark(StaffMark(date=day, employee_id=e.employee_id, status=e.status, timestamp=stamp))
            return len(entries)

        written = self._lock.run(_write, ("staff_attendance", day))
        logger.info("Staff attendance saved for %s (%d employees)", day, written)
        return written

    def get_history(self, employee_id: str) -> AttendanceStats:
        marks = self._log.list_marks(employee_id=str(employee_id))
        score = 0.0
        absent = 0
        history = []
        for m in marks:
            try:
                status = StaffAttendanceStatus(m.status)
            except ValueError:
                status = None
            if status is None or status is StaffAttendanceStatus.ABSENT:
                absent += 1
            else:
                score += status.weight
            history.append({"date": m.date, "status": m.status})

        history.reverse()
        total = len(marks)
        return AttendanceStats(
            present_count=compact_number(score),
            absent_count=absent,
            total_days=total,
            percentage=percentage(score, total),
            recent_history=history[: self._history_limit],
        )

    def list_holidays(self, staff_id: str) -> Sequence[Holiday]:
        return self._log.list_holidays(employee_id=str(staff_id))

    def set_holiday(
        self,
        staff_id: str,
        date,
        description: str = "",
        *,
        marked_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> None:
        staff_id = require_non_empty(staff_id, "Staff ID")
        day = _require_date(date)
        self._log.add_holiday(
            Holiday(
                date=day,
                employee_id=staff_id,
                reason=str(description or ""),
                marked_by=str(marked_by or ""),
                at=format_timestamp(now or now_local()),
            )
        )
        logger.info("Leave recorded for %s on %s", staff_id, day)

    def remove_holiday(self, staff_id: str, date) -> None:
        day = _require_date(date)
        if not self._log.remove_holiday(employee_id=str(staff_id), date=day):
            raise NotFoundError("Record not found")
        logger.info("Leave removed for %s on %s", staff_id, day)
