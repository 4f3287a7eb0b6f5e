from __future__ import annotations

import pytest

from src.school_erp.school_erp.core.exceptions import NotFoundError


def test_exam_registry_round_trip(container, fixed_now):
    svc = container.results_service
    exam_id = svc.create_exam("Half Yearly", [{"name": "Maths", "maxMarks": 100}], "admin", now=fixed_now)

    exams = [e.to_dict() for e in svc.list_exams()]

    assert exams == [{"examId": exam_id, "examName": "Half Yearly", "subjects": [{"name": "Maths", "maxMarks": 100}]}]


def test_saving_marks_twice_overwrites_each_subject(container, enrol, fixed_now):
    enrol("A1")
    svc = container.results_service
    svc.save_marks("A1", "Half Yearly", [{"subject": "Maths", "marks": 40, "maxMarks": 100}], "5", "A", now=fixed_now)
    svc.save_marks(
        "A1",
        "Half Yearly",
        [{"subject": "Maths", "marks": 75, "maxMarks": 100}, {"subject": "Hindi", "marks": 60, "maxMarks": 100}],
        "5",
        "A",
        now=fixed_now,
    )

    assert svc.class_results("Half Yearly", "5", "A") == {"A1": {"Maths": 75, "Hindi": 60}}


def test_add_marks_resolves_class_from_student(container, enrol, fixed_now):
    enrol("B1", class_name="6", section="B")
    svc = container.results_service

    svc.add_marks("B1", "Unit Test", [{"subject": "Science", "marks": 18, "maxMarks": 25}], now=fixed_now)

    assert svc.student_results("B1") == [
        {"examName": "Unit Test", "subjects": [{"subject": "Science", "marks": 18, "maxMarks": 25}]}
    ]


def test_add_marks_for_unknown_student_raises(container):
    with pytest.raises(NotFoundError):
        container.results_service.add_marks("ghost", "Unit Test", [{"subject": "Science", "marks": 1}])


def test_results_for_unknown_student_are_empty(container):
    assert container.results_service.student_results("ghost") == []
