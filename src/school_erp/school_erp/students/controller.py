from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container
from .model import Student


def register(router: ActionRouter, container: Container) -> None:
    service = container.student_service

    @router.action("getStudents")
    def get_students(d: dict) -> dict:
        students = service.list_for(
            role=d.get("role"),
            assigned_class=d.get("assignedClass") or "",
            assigned_section=d.get("assignedSection") or "",
        )
        return success([s.to_dict() for s in students])

    @router.action("getStudentDetails")
    def get_student_details(d: dict) -> dict:
        return success(service.get(d.get("admissionNo")).to_dict())

    @router.action("addStudent", writes=True)
    def add_student(d: dict) -> dict:
        service.add(Student.from_dict(d.get("student") or {}))
        return success(None, "Student registered")

    @router.action("updateStudent", writes=True)
    def update_student(d: dict) -> dict:
        student = service.update(Student.from_dict(d.get("student") or {}))
        return success({"photoUrl": student.photo_url}, "Updated")

    @router.action("archiveStudent", writes=True)
    def archive_student(d: dict) -> dict:
        service.archive(d.get("admissionNo"), deleted_by=d.get("deletedBy"))
        return success(None, "Archived")

    @router.action("getNextAdmissionNumber")
    def get_next_admission_number(d: dict) -> dict:
        return success(service.next_admission_number())
