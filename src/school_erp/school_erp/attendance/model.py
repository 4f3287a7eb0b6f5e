from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import AttendanceMark


@dataclass(frozen=True)
class AttendanceEntry:
    """One student's mark as submitted by a teacher."""

    admission_no: str
    status: AttendanceMark
    roll_no: str = ""
    name: str = ""
    photo_url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceEntry":
        return cls(
            admission_no=str(data.get("admissionNo") or "").strip(),
            status=AttendanceMark.from_label(data.get("status") or ""),
            roll_no=str(data.get("rollNo") or ""),
            name=str(data.get("name") or ""),
            photo_url=str(data.get("photoUrl") or ""),
        )


@dataclass(frozen=True)
class StudentMark:
    """Domain entity: the status of one student on one calendar day."""

    date: str
    admission_no: str
    class_name: str
    section: str
    roll_no: str
    name: str
    photo_url: str
    status: AttendanceMark
    marked_by: str = ""
    marked_at: str = ""


@dataclass
class RosterEntry:
    admission_no: str
    name: str
    roll_no: str
    photo_url: str
    status: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "admissionNo": self.admission_no,
            "name": self.name,
            "rollNo": self.roll_no,
            "photoUrl": self.photo_url,
            "status": self.status,
        }


@dataclass(frozen=True)
class DayView:
    is_locked: bool
    students: list[RosterEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"isLocked": self.is_locked, "students": [s.to_dict() for s in self.students]}


@dataclass(frozen=True)
class AttendanceStats:
    """Read-model: summary of one person's marked days."""

    present_count: float
    absent_count: int
    total_days: int
    percentage: int
    recent_history: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "totalDays": self.total_days,
            "percentage": self.percentage,
            "recentHistory": list(self.recent_history),
        }
