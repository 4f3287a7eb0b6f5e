from __future__ import annotations

from typing import Iterator, Optional, Sequence

from ..store.repository import GridStore
from ..store.schema import STUDENT_LOGINS_PREFIX, USERS_MASTER, Book, student_logins_sheet
from .model import StaffUser, StudentLogin
from .repository import UserRepository


class SheetUserRepository(UserRepository):
    """Staff logins in ``USERS/Master``; student logins in ``USERS/Students_<class>``."""

    def __init__(self, store: GridStore):
        self._store = store
        self._sheet = USERS_MASTER

    # staff
    def list_staff(self) -> Sequence[StaffUser]:
        return [StaffUser.from_row(r) for r in self._store.get_rows(self._sheet.book, self._sheet.name) if r]

    def _staff_index(self, **match: str) -> int:
        for i, u in enumerate(self.list_staff()):
            if all(getattr(u, k) == str(v) for k, v in match.items()):
                return i
        return -1

    def find_staff(self, username: str) -> Optional[StaffUser]:
        return next((u for u in self.list_staff() if u.username == str(username).strip()), None)

    def find_staff_by_employee(self, employee_id: str) -> Optional[StaffUser]:
        return next((u for u in self.list_staff() if u.employee_id == str(employee_id)), None)

    def save_staff(self, user: StaffUser) -> bool:
        """Replace the employee's login or append one. True when created."""

        self._store.get_or_create_sheet(self._sheet.book, self._sheet.name, self._sheet.headers)
        idx = self._staff_index(employee_id=user.employee_id)
        if idx > -1:
            self._store.update_row(self._sheet.book, self._sheet.name, idx, user.to_row())
            return False
        self._store.append_row(self._sheet.book, self._sheet.name, user.to_row())
        return True

    def replace_staff(self, user: StaffUser) -> bool:
        idx = self._staff_index(username=user.username)
        if idx == -1:
            return False
        self._store.update_row(self._sheet.book, self._sheet.name, idx, user.to_row())
        return True

    def remove_staff_by_employee(self, employee_id: str) -> bool:
        idx = self._staff_index(employee_id=str(employee_id))
        if idx == -1:
            return False
        self._store.delete_row(self._sheet.book, self._sheet.name, idx)
        return True

    def staff_registry_exists(self) -> bool:
        return self._store.sheet_exists(self._sheet.book, self._sheet.name)

    # students
    def student_sheets(self) -> Sequence[str]:
        return [s for s in self._store.list_sheets(Book.USERS) if s.startswith(STUDENT_LOGINS_PREFIX)]

    def _student_rows(self) -> Iterator[tuple[str, int, StudentLogin]]:
        for sheet in self.student_sheets():
            for i, r in enumerate(self._store.get_rows(Book.USERS, sheet)):
                if r:
                    yield sheet, i, StudentLogin.from_row(r)

    def list_student_logins(self) -> Sequence[StudentLogin]:
        return [login for _, _, login in self._student_rows()]

    def find_student_login(self, username: str) -> Optional[StudentLogin]:
        return next((s for s in self.list_student_logins() if s.username == str(username).strip()), None)

    def find_student_login_by_admission(self, admission_no: str) -> Optional[StudentLogin]:
        return next((s for s in self.list_student_logins() if s.admission_no == str(admission_no)), None)

    def save_student_login(self, login: StudentLogin) -> None:
        """Write the login into its class sheet, dropping copies left in other classes."""

        schema = student_logins_sheet(login.class_name)
        for sheet, i, existing in reversed(list(self._student_rows())):
            if existing.admission_no == login.admission_no and sheet != schema.name:
                self._store.delete_row(Book.USERS, sheet, i)

        self._store.get_or_create_sheet(schema.book, schema.name, schema.headers)
        rows = self._store.get_rows(schema.book, schema.name)
        for i, r in enumerate(rows):
            if StudentLogin.from_row(r).admission_no == login.admission_no:
                self._store.update_row(schema.book, schema.name, i, login.to_row())
                return
        self._store.append_row(schema.book, schema.name, login.to_row())

    def remove_student_login(self, admission_no: str) -> bool:
        for sheet, i, login in self._student_rows():
            if login.admission_no == str(admission_no):
                self._store.delete_row(Book.USERS, sheet, i)
                return True
        return False

    def username_owner(self, username: str) -> Optional[str]:
        """Employee ID or admission number that holds ``username``, if any."""

        staff = self.find_staff(username)
        if staff:
            return staff.employee_id
        student = self.find_student_login(username)
        return student.admission_no if student else None
