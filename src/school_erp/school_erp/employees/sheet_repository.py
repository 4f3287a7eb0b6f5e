from __future__ import annotations

from typing import Optional, Sequence

from ..store.archive import archive_record
from ..store.repository import GridStore
from ..store.schema import EMPLOYEES_MASTER
from .model import Employee
from .repository import EmployeeRepository


class SheetEmployeeRepository(EmployeeRepository):
    def __init__(self, store: GridStore):
        self._store = store
        self._sheet = EMPLOYEES_MASTER

    def _rows(self) -> list[list[str]]:
        return self._store.get_rows(self._sheet.book, self._sheet.name)

    def list_all(self) -> Sequence[Employee]:
        return [Employee.from_row(r) for r in self._rows() if r and r[0]]

    def get(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.list_all() if e.employee_id == str(employee_id)), None)

    def add(self, employee: Employee) -> None:
        self._store.get_or_create_sheet(self._sheet.book, self._sheet.name, self._sheet.headers)
        self._store.append_row(self._sheet.book, self._sheet.name, employee.to_row())

    def update(self, employee: Employee) -> bool:
        for i, r in enumerate(self._rows()):
            if r and str(r[0]) == employee.employee_id:
                self._store.update_row(self._sheet.book, self._sheet.name, i, employee.to_row())
                return True
        return False

    def archive(self, employee_id: str, *, deleted_by: Optional[str] = None) -> bool:
        for i, r in enumerate(self._rows()):
            if r and str(r[0]) == str(employee_id):
                archive_record(self._store, module="EMPLOYEES", record_id=str(employee_id), row=r, deleted_by=deleted_by)
                self._store.delete_row(self._sheet.book, self._sheet.name, i)
                return True
        return False
