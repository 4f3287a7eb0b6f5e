from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class StaffUser:
    """Login for an employee; one row per employee in the users book."""

    username: str
    password_hash: str
    role: str
    name: str
    employee_id: str
    assigned_class: str = ""
    assigned_section: str = ""
    photo_url: str = ""

    @classmethod
    def from_row(cls, row: list[str]) -> "StaffUser":
        c = list(row) + [""] * (8 - len(row))
        return cls(*(str(v).strip() for v in c[:8]))

    def to_row(self) -> list[object]:
        return [
            self.username,
            self.password_hash,
            self.role,
            self.name,
            self.employee_id,
            self.assigned_class,
            self.assigned_section,
            self.photo_url,
        ]

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "role": self.role,
            "name": self.name,
            "id": self.username,
            "employeeId": self.employee_id,
            "assignedClass": self.assigned_class,
            "assignedSection": self.assigned_section,
            "avatarUrl": self.photo_url,
        }


@dataclass(frozen=True)
class StudentLogin:
    """Portal login for a student, kept in a per-class sheet."""

    username: str
    password_hash: str
    name: str
    admission_no: str
    class_name: str
    section: str
    photo_url: str = ""

    @classmethod
    def from_row(cls, row: list[str]) -> "StudentLogin":
        c = [str(v).strip() for v in list(row) + [""] * (8 - len(row))]
        return cls(
            username=c[0],
            password_hash=c[1],
            name=c[3],
            admission_no=c[4],
            class_name=c[5],
            section=c[6],
            photo_url=c[7],
        )

    def to_row(self) -> list[object]:
        return [
            self.username,
            self.password_hash,
            Role.STUDENT.value,
            self.name,
            self.admission_no,
            self.class_name,
            self.section,
            self.photo_url,
        ]

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "role": Role.STUDENT.value,
            "name": self.name,
            "admissionNo": self.admission_no,
            "assignedClass": self.class_name,
            "assignedSection": self.section,
            "avatarUrl": self.photo_url,
        }
