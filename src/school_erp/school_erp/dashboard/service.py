from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import date_key, now_local
from ..common.numbers import compact_number, percentage
from ..common.ttl_cache import TTLCache
from ..core.constants import LAKH, STATS_CACHE_SECONDS
from ..core.enums import AttendanceMark
from ..employees.repository import EmployeeRepository
from ..fees.repository import FeeRepository
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)

STATS_KEY = "stats_summary"


def revenue_label(total: float) -> str:
    """``₹12.3L`` above one lakh, otherwise the thousands-separated rupee amount."""

    if total > LAKH:
        return f"₹{total / LAKH:.1f}L"
    return f"₹{compact_number(total):,}"


class DashboardService:
    """Headline numbers for the admin dashboard, cached for a few minutes."""

    def __init__(
        self,
        students: StudentRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        fees: FeeRepository,
        *,
        cache: Optional[TTLCache] = None,
    ):
        self._students = students
        self._employees = employees
        self._attendance = attendance
        self._fees = fees
        self._cache = cache or TTLCache(STATS_CACHE_SECONDS)

    def stats(self, *, now: Optional[datetime] = None) -> dict:
        cached = self._cache.get(STATS_KEY)
        if cached is not None:
            return cached

        today = date_key(now or now_local())
        marks = self._attendance.list_marks(date=today)
        present = sum(1 for m in marks if m.status is AttendanceMark.PRESENT)
        revenue = sum(t.amount for t in self._fees.list_transactions())

        stats = {
            "totalStudents": sum(1 for s in self._students.list_all() if s.is_active),
            "totalTeachers": len(self._employees.list_all()),
            "attendanceRate": percentage(present, len(marks)),
            "revenue": revenue_label(revenue),
        }
        self._cache.put(STATS_KEY, stats)
        return stats

    def invalidate(self) -> None:
        self._cache.clear()
        logger.debug("Dashboard stats cache cleared")
