from __future__ import annotations

from typing import Optional, Protocol

from .model import StaffUser, StudentLogin


class UserRepository(Protocol):
    """Staff logins plus the per-class student login sheets."""

    def find_staff(self, username: str) -> Optional[StaffUser]:
        raise NotImplementedError

    def find_staff_by_employee(self, employee_id: str) -> Optional[StaffUser]:
        raise NotImplementedError

    def save_staff(self, user: StaffUser) -> bool:
        raise NotImplementedError

    def replace_staff(self, user: StaffUser) -> bool:
        raise NotImplementedError

    def remove_staff_by_employee(self, employee_id: str) -> bool:
        raise NotImplementedError

    def staff_registry_exists(self) -> bool:
        raise NotImplementedError

    def find_student_login(self, username: str) -> Optional[StudentLogin]:
        raise NotImplementedError

    def find_student_login_by_admission(self, admission_no: str) -> Optional[StudentLogin]:
        raise NotImplementedError

    def save_student_login(self, login: StudentLogin) -> None:
        raise NotImplementedError

    def remove_student_login(self, admission_no: str) -> bool:
        raise NotImplementedError

    def username_owner(self, username: str) -> Optional[str]:
        raise NotImplementedError
