from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get(self, admission_no: str) -> Optional[Student]:
        raise NotImplementedError

    def list_roster(self, class_name: str, section: str) -> Sequence[Student]:
        """Active students of one class/section, in sheet order."""

        raise NotImplementedError

    def add(self, student: Student) -> None:
        raise NotImplementedError

    def update(self, student: Student) -> bool:
        raise NotImplementedError

    def archive(self, admission_no: str, *, deleted_by: Optional[str] = None) -> bool:
        raise NotImplementedError
