from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles; the role decides which dashboard is shown."""

    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"
    PARENT = "PARENT"
    MANAGEMENT = "MANAGEMENT"


class StudentStatus(str, Enum):
    ACTIVE = "Active"
    LEFT = "Left"


class AttendanceMark(str, Enum):
    """Single-character codes stored for student attendance."""

    PRESENT = "P"
    ABSENT = "A"

    @property
    def label(self) -> str:
        return "Present" if self is AttendanceMark.PRESENT else "Absent"

    @classmethod
    def from_label(cls, label: str) -> "AttendanceMark":
        # Anything other than an explicit "Present" is recorded as absent.
        return cls.PRESENT if str(label).strip() == "Present" else cls.ABSENT


class StaffAttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    HALF_DAY = "Half Day"

    @property
    def weight(self) -> float:
        return {
            StaffAttendanceStatus.PRESENT: 1.0,
            StaffAttendanceStatus.LATE: 1.0,
            StaffAttendanceStatus.HALF_DAY: 0.5,
            StaffAttendanceStatus.ABSENT: 0.0,
        }[self]
