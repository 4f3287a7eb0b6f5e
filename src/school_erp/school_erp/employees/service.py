from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..store.locking import AdvisoryLock
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

LOCK_KEY = ("employees",)
_ID_NUMBER = re.compile(r"^EMP(\d+)$")


class EmployeeService:
    """Use case: hire, edit and archive staff."""

    def __init__(self, employees: EmployeeRepository, lock: AdvisoryLock):
        self._employees = employees
        self._lock = lock

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get(str(employee_id))
        if not employee:
            raise NotFoundError("Not found")
        return employee

    def add(self, employee: Employee) -> None:
        require_non_empty(employee.employee_id, "Employee ID")
        require_non_empty(employee.name, "Name")

        def _write() -> None:
            if self._employees.get(employee.employee_id):
                raise ValidationError(f"Employee ID {employee.employee_id} already exists")
            self._employees.add(employee)

        self._lock.run(_write, LOCK_KEY)
        logger.info("Employee %s added", employee.employee_id)

    def update(self, employee: Employee) -> Employee:
        def _write() -> None:
            if not self._employees.update(employee):
                raise NotFoundError("Not found")

        self._lock.run(_write, LOCK_KEY)
        logger.info("Employee %s updated", employee.employee_id)
        return employee

    def archive(self, employee_id: str, *, deleted_by: Optional[str] = None) -> None:
        def _write() -> None:
            if not self._employees.archive(str(employee_id), deleted_by=deleted_by):
                raise NotFoundError("Not found")

        self._lock.run(_write, LOCK_KEY)
        logger.info("Employee %s archived by %s", employee_id, deleted_by or "System")

    def next_employee_id(self) -> str:
        highest = 0
        for e in self._employees.list_all():
            m = _ID_NUMBER.match(e.employee_id)
            if m:
                highest = max(highest, int(m.group(1)))
        return f"EMP{highest + 1:03d}"
