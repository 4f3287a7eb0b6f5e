from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StaffMark:
    """Domain entity: one row of the staff daily log."""

    date: str
    employee_id: str
    status: str
    timestamp: str = ""


@dataclass(frozen=True)
class StaffEntry:
    employee_id: str
    status: str

    @classmethod
    def from_dict(cls, data: dict) -> "StaffEntry":
        return cls(employee_id=str(data.get("employeeId") or "").strip(), status=str(data.get("status") or "").strip())


@dataclass(frozen=True)
class Holiday:
    date: str
    employee_id: str
    reason: str
    marked_by: str = ""
    at: str = ""

    def to_dict(self) -> dict:
        return {"date": self.date, "description": self.reason}


@dataclass(frozen=True)
class StaffDayRow:
    employee_id: str
    name: str
    post: str
    photo_url: str
    status: Optional[str]

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "post": self.post,
            "photoUrl": self.photo_url,
            "status": self.status,
        }
