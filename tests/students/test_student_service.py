from __future__ import annotations

from datetime import datetime

import pytest

from src.school_erp.school_erp.core.exceptions import NotFoundError, ValidationError
from src.school_erp.school_erp.store.schema import DELETED_LOG
from src.school_erp.school_erp.students.model import Student


def test_add_forces_active_status_and_rejects_duplicates(container):
    svc = container.student_service
    svc.add(Student(admission_no="2024001", name="Asha", class_name="5", section="A", status="Left"))

    assert svc.get("2024001").status == "Active"
    with pytest.raises(ValidationError):
        svc.add(Student(admission_no="2024001", name="Again"))


def test_teachers_only_see_their_class(container, enrol):
    enrol("A1", class_name="5", section="A")
    enrol("B1", class_name="6", section="B")
    svc = container.student_service

    seen = svc.list_for(role="TEACHER", assigned_class="6", assigned_section="B")

    assert [s.admission_no for s in seen] == ["B1"]
    assert len(svc.list_for(role="ADMIN")) == 2


def test_archive_copies_row_to_deleted_log(container, enrol, store):
    enrol("A1")

    container.student_service.archive("A1", deleted_by="admin")

    with pytest.raises(NotFoundError):
        container.student_service.get("A1")
    archived = store.get_rows(DELETED_LOG.book, DELETED_LOG.name)
    assert archived[0][1:4] == ["admin", "STUDENTS", "A1"]


def test_update_missing_student_raises(container):
    with pytest.raises(NotFoundError):
        container.student_service.update(Student(admission_no="nobody"))


def test_next_admission_number_follows_year_prefix(container, enrol):
    enrol("2024007")
    enrol("2023099")

    assert container.student_service.next_admission_number(now=datetime(2024, 4, 1)) == "2024008"
    assert container.student_service.next_admission_number(now=datetime(2025, 4, 1)) == "2025001"


def test_wire_round_trip_uses_camel_case_names():
    s = Student.from_dict({"admissionNo": " A1 ", "class": "5", "totalFees": "1200", "photoUrl": "p.png"})

    assert s.admission_no == "A1"
    assert s.class_name == "5"
    assert s.to_dict()["totalFees"] == 1200
    assert s.to_dict()["photoUrl"] == "p.png"


def test_next_employee_id_is_sequential(container, hire):
    hire("EMP001")
    hire("EMP009")

    assert container.employee_service.next_employee_id() == "EMP010"
