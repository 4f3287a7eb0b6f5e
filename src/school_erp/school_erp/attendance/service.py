from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import date_key, format_timestamp, now_local
from ..common.numbers import percentage
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceMark
from ..core.exceptions import NotFoundError, ValidationError
from ..store.locking import AdvisoryLock
from ..students.repository import StudentRepository
from .model import AttendanceEntry, AttendanceStats, DayView, RosterEntry, StudentMark
from .notifier import AbsenceNotifier, LoggingNotifier
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

CSV_FIXED_HEADERS = ("Roll No", "Name", "Photo", "Admission No")


def _require_date(value) -> str:
    key = date_key(value)
    if not key:
        raise ValidationError(f"Invalid date: {value!r}")
    return key


def _day_lock_key(class_name: str, section: str, day: str) -> tuple:
    return ("attendance", str(class_name), str(section), day)


class AttendanceService:
    """Student attendance ledger: day sheets, day locks and per-student stats."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        lock: AdvisoryLock,
        *,
        notifier: Optional[AbsenceNotifier] = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._attendance = attendance
        self._students = students
        self._lock = lock
        self._notifier = notifier or LoggingNotifier()
        self._history_limit = int(history_limit)

    def get_day(self, class_name: str, section: str, date) -> DayView:
        day = _require_date(date)
        roster = [
            RosterEntry(admission_no=s.admission_no, name=s.name, roll_no=s.roll_no, photo_url=s.photo_url)
            for s in self._students.list_roster(class_name, section)
        ]
        marks = {
            m.admission_no: m
            for m in self._attendance.list_marks(class_name=str(class_name), section=str(section), date=day)
        }
        for entry in roster:
            mark = marks.get(entry.admission_no)
            entry.status = mark.status.label if mark else None

        is_locked = self._attendance.is_locked(class_name=str(class_name), section=str(section), date=day)
        return DayView(is_locked=is_locked, students=roster)

    def submit_day(
        self,
        class_name: str,
        section: str,
        date,
        entries: Iterable[AttendanceEntry],
        *,
        marked_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> int:
        """Write every entry for the day, then close the day with a lock row.

        Re-submitting overwrites the same marks and appends another lock row;
        an existing lock does not reject the call.
        """

        class_name = require_non_empty(class_name, "Class")
        section = str(section or "")
        day = _require_date(date)
        entries = [e for e in entries if e.admission_no]
        if not entries:
            raise ValidationError("Attendance list is empty")

        def _write() -> int:
            stamp = format_timestamp(now or now_local())
            if self._attendance.is_locked(class_name=class_name, section=section, date=day):
                logger.warning("Attendance for %s-%s on %s was already submitted; overwriting", class_name, section, day)

            roster = {s.admission_no: s for s in self._students.list_roster(class_name, section)}
            for e in entries:
                known = roster.get(e.admission_no)
                self._attendance.upsert_mark(
                    StudentMark(
                        date=day,
                        admission_no=e.admission_no,
                        class_name=class_name,
                        section=section,
                        roll_no=e.roll_no or (known.roll_no if known else ""),
                        name=e.name or (known.name if known else ""),
                        photo_url=e.photo_url or (known.photo_url if known else ""),
                        status=e.status,
                        marked_by=marked_by or "System",
                        marked_at=stamp,
                    )
                )
            self._attendance.append_lock(
                class_name=class_name, section=section, date=day, marked_by=marked_by or "System", at=stamp
            )
            return len(entries)

        written = self._lock.run(_write, _day_lock_key(class_name, section, day))
        logger.info("Attendance saved for %s-%s on %s (%d students)", class_name, section, day, written)
        return written

    def mark_single(
        self,
        admission_no: str,
        status: str,
        date,
        *,
        marked_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> None:
        """Mark one student without closing the day."""

        day = _require_date(date)
        student = self._students.get(str(admission_no))
        if not student:
            raise NotFoundError("Student not found")

        def _write() -> None:
            self._attendance.upsert_mark(
                StudentMark(
                    date=day,
                    admission_no=student.admission_no,
                    class_name=student.class_name,
                    section=student.section,
                    roll_no=student.roll_no,
                    name=student.name,
                    photo_url=student.photo_url,
                    status=AttendanceMark.from_label(status),
                    marked_by=marked_by or "System",
                    marked_at=format_timestamp(now or now_local()),
                )
            )

        self._lock.run(_write, _day_lock_key(student.class_name, student.section, day))

    def get_student_history(self, admission_no: str) -> AttendanceStats:
        if not self._students.get(str(admission_no)):
            raise NotFoundError("Student not found")

        marks = sorted(self._attendance.list_marks(admission_no=str(admission_no)), key=lambda m: m.date)
        present = sum(1 for m in marks if m.status is AttendanceMark.PRESENT)
        absent = sum(1 for m in marks if m.status is AttendanceMark.ABSENT)
        history = [{"date": m.date, "status": m.status.label} for m in marks]
        history.reverse()

        return AttendanceStats(
            present_count=present,
            absent_count=absent,
            total_days=present + absent,
            percentage=percentage(present, present + absent),
            recent_history=history[: self._history_limit],
        )

    def export_csv(self, class_name: str, section: str, *, start_date=None, end_date=None) -> str:
        """Grid view of a class: fixed identity columns then one column per date.

        Values are joined with bare commas (no quoting). Returns "" when the
        class has no marks at all.
        """

        start = date_key(start_date) if start_date else None
        end = date_key(end_date) if end_date else None
        marks = [
            m
            for m in self._attendance.list_marks(class_name=str(class_name), section=str(section))
            if (not start or m.date >= start) and (not end or m.date <= end)
        ]
        if not marks:
            return ""

        dates = sorted({m.date for m in marks})
        students: dict[str, StudentMark] = {}
        cells: dict[tuple[str, str], str] = {}
        for m in marks:
            students.setdefault(m.admission_no, m)
            cells[(m.admission_no, m.date)] = m.status.value

        lines = [",".join(CSV_FIXED_HEADERS + tuple(dates))]
        for adm, first in students.items():
            row = [first.roll_no, first.name, first.photo_url, adm] + [cells.get((adm, d), "") for d in dates]
            lines.append(",".join(row))
        return "".join(line + "\n" for line in lines)

    def absentees(self, class_name: str, section: str, date) -> list[RosterEntry]:
        view = self.get_day(class_name, section, date)
        return [s for s in view.students if s.status == AttendanceMark.ABSENT.label]

    def notify_absentees(self, class_name: str, section: str, date) -> int:
        day = _require_date(date)
        absent = self.absentees(class_name, section, day)
        for student in absent:
            self._notifier.notify_absent(student=student, class_name=str(class_name), section=str(section), date=day)
        logger.info("Notified parents of %d absent students in %s-%s on %s", len(absent), class_name, section, day)
        return len(absent)
