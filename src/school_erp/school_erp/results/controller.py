from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container


def register(router: ActionRouter, container: Container) -> None:
    service = container.results_service

    @router.action("createExam", writes=True)
    def create_exam(d: dict) -> dict:
        exam_id = service.create_exam(d.get("examName"), d.get("subjects") or [], d.get("createdBy"))
        return success({"examId": exam_id}, "Exam created")

    @router.action("getExams")
    def get_exams(d: dict) -> dict:
        return success([e.to_dict() for e in service.list_exams()])

    @router.action("saveStudentMarks", writes=True)
    def save_student_marks(d: dict) -> dict:
        service.save_marks(d.get("admissionNo"), d.get("examName"), d.get("marks"), d.get("className"), d.get("section"))
        return success(None, "Marks saved")

    @router.action("addMarks", writes=True)
    def add_marks(d: dict) -> dict:
        service.add_marks(d.get("admissionNo"), d.get("examName"), d.get("marks"))
        return success(None, "Marks saved")

    @router.action("getClassResults")
    def get_class_results(d: dict) -> dict:
        return success(service.class_results(d.get("examName"), d.get("className"), d.get("section")))

    @router.action("getStudentResults")
    def get_student_results(d: dict) -> dict:
        return success(service.student_results(d.get("admissionNo")))
