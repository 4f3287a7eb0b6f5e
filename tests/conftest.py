from __future__ import annotations

from datetime import datetime

import pytest

from src.school_erp.school_erp.api.catalog import register_actions
from src.school_erp.school_erp.container import build_container
from src.school_erp.school_erp.employees.model import Employee
from src.school_erp.school_erp.store.memory_store import InMemoryGridStore
from src.school_erp.school_erp.students.model import Student


@pytest.fixture
def fixed_now():
    return datetime(2024, 6, 1, 9, 30, 0)


@pytest.fixture
def store():
    return InMemoryGridStore()


@pytest.fixture
def container(store):
    c = build_container(store=store, lock_timeout_seconds=1)
    register_actions(c)
    return c


@pytest.fixture
def router(container):
    return container.router


@pytest.fixture
def enrol(container):
    """Add an active student straight through the repository."""

    def _enrol(admission_no: str, *, class_name: str = "5", section: str = "A", **extra) -> Student:
        student = Student(
            admission_no=admission_no,
            roll_no=extra.pop("roll_no", admission_no[-1:]),
            name=extra.pop("name", f"Student {admission_no}"),
            class_name=class_name,
            section=section,
            **extra,
        )
        container.students_repo.add(student)
        return student

    return _enrol


@pytest.fixture
def hire(container):
    def _hire(employee_id: str, **extra) -> Employee:
        employee = Employee(employee_id=employee_id, name=extra.pop("name", f"Teacher {employee_id}"), **extra)
        container.employees_repo.add(employee)
        return employee

    return _hire
