from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..store.locking import AdvisoryLock
from ..students.repository import StudentRepository
from .model import StaffUser, StudentLogin
from .repository import UserRepository

logger = logging.getLogger(__name__)

LOCK_KEY = ("users",)
MIN_PASSWORD_LENGTH = 6


def _password_matches(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # Blank or non-werkzeug values never match.
        return False


class AuthService:
    """Use case: log a staff member or student in."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, username: str, password: str) -> dict:
        if not username or not password:
            raise AuthenticationError("Missing credentials")
        username = str(username).strip()
        password = str(password).strip()

        staff = self._users.find_staff(username)
        if staff and _password_matches(staff.password_hash, password):
            logger.info("Staff login: %s (%s)", username, staff.role)
            return {"token": f"TK-{uuid.uuid4()}", "user": staff.to_dict()}

        student = self._users.find_student_login(username)
        if student and _password_matches(student.password_hash, password):
            logger.info("Student login: %s", username)
            return {"token": f"ST-{uuid.uuid4()}", "user": student.to_dict()}

        logger.info("Rejected login for %s", username)
        raise AuthenticationError("Invalid username or password.")


class UserService:
    """Use case: profiles and access management for staff and students."""

    def __init__(
        self,
        users: UserRepository,
        students: StudentRepository,
        employees: EmployeeRepository,
        lock: AdvisoryLock,
    ):
        self._users = users
        self._students = students
        self._employees = employees
        self._lock = lock

    def profile(self, username: str) -> dict:
        user = self._users.find_staff(username)
        if not user:
            raise NotFoundError("User not found.")
        return user.to_dict()

    def update_password(self, username: str, old_password: str, new_password: str) -> None:
        require_min_length(new_password, "New password", MIN_PASSWORD_LENGTH)

        def _write() -> None:
            user = self._users.find_staff(username)
            if not user or not _password_matches(user.password_hash, str(old_password or "")):
                raise AuthenticationError("Incorrect current password")
            self._users.replace_staff(replace(user, password_hash=generate_password_hash(new_password)))

        self._lock.run(_write, LOCK_KEY)
        logger.info("Password changed for %s", username)

    def update_profile_photo(self, username: str, photo_url: str) -> str:
        def _write() -> None:
            user = self._users.find_staff(username)
            if not user:
                raise NotFoundError("User not found")
            self._users.replace_staff(replace(user, photo_url=str(photo_url or "")))

        self._lock.run(_write, LOCK_KEY)
        return str(photo_url or "")

    def _ensure_username_free(self, username: str, owner: str) -> None:
        holder = self._users.username_owner(username)
        if holder is not None and holder != str(owner):
            raise ValidationError("Username already taken by another user.")

    # employees
    def access_for_employee(self, employee_id: str) -> Optional[dict]:
        user = self._users.find_staff_by_employee(employee_id)
        return user.to_dict() if user else None

    def save_employee_access(self, data: dict) -> bool:
        """Grant or update an employee's login. Returns True when newly created.

        A blank password on an existing login keeps the stored hash.
        """

        employee_id = require_non_empty(data.get("employeeId"), "Employee ID")
        username = require_non_empty(data.get("username"), "Username")
        role = str(data.get("role") or Role.TEACHER.value)
        if role not in {r.value for r in Role} or role == Role.STUDENT.value:
            raise ValidationError(f"Unknown staff role: {role}")
        password = str(data.get("password") or "")

        def _write() -> bool:
            self._ensure_username_free(username, employee_id)
            existing = self._users.find_staff_by_employee(employee_id)
            if existing and not password:
                password_hash = existing.password_hash
            else:
                require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
                password_hash = generate_password_hash(password)

            employee = self._employees.get(employee_id)
            photo_url = (employee.photo_url if employee else "") or (existing.photo_url if existing else "")
            is_teacher = role == Role.TEACHER.value
            return self._users.save_staff(
                StaffUser(
                    username=username,
                    password_hash=password_hash,
                    role=role,
                    name=str(data.get("name") or (employee.name if employee else "")),
                    employee_id=employee_id,
                    assigned_class=str(data.get("assignedClass") or "") if is_teacher else "",
                    assigned_section=str(data.get("assignedSection") or "") if is_teacher else "",
                    photo_url=photo_url,
                )
            )

        created = self._lock.run(_write, LOCK_KEY)
        logger.info("Access %s for employee %s (%s)", "created" if created else "updated", employee_id, role)
        return created

    def remove_employee_access(self, employee_id: str) -> None:
        if not self._users.staff_registry_exists():
            raise NotFoundError("User registry not found")

        def _write() -> None:
            if not self._users.remove_staff_by_employee(employee_id):
                raise NotFoundError("User not found")

        self._lock.run(_write, LOCK_KEY)
        logger.info("Access removed for employee %s", employee_id)

    # students
    def access_for_student(self, admission_no: str) -> Optional[dict]:
        login = self._users.find_student_login_by_admission(admission_no)
        return login.to_dict() if login else None

    def save_student_access(self, data: dict) -> None:
        admission_no = require_non_empty(data.get("admissionNo"), "Admission number")
        username = require_non_empty(data.get("username"), "Username")
        password = str(data.get("password") or "")

        def _write() -> None:
            self._ensure_username_free(username, admission_no)
            student = self._students.get(admission_no)
            if not student:
                raise NotFoundError("Student record not found")

            existing = self._users.find_student_login_by_admission(admission_no)
            if existing and not password:
                password_hash = existing.password_hash
            else:
                require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
                password_hash = generate_password_hash(password)

            self._users.save_student_login(
                StudentLogin(
                    username=username,
                    password_hash=password_hash,
                    name=str(data.get("name") or student.name),
                    admission_no=admission_no,
                    class_name=student.class_name,
                    section=student.section,
                    photo_url=student.photo_url,
                )
            )

        self._lock.run(_write, LOCK_KEY)
        logger.info("Portal access saved for student %s", admission_no)

    def remove_student_access(self, admission_no: str) -> None:
        def _write() -> None:
            if not self._users.remove_student_login(admission_no):
                raise NotFoundError("User not found")

        self._lock.run(_write, LOCK_KEY)
        logger.info("Portal access removed for student %s", admission_no)
