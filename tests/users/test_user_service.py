from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.school_erp.school_erp.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from src.school_erp.school_erp.store.schema import USERS_MASTER, Book
from src.school_erp.school_erp.users.model import StaffUser


def _grant_teacher(container, **extra):
    data = {
        "employeeId": "EMP001",
        "username": "meera",
        "password": "secret123",
        "role": "TEACHER",
        "name": "Meera",
        "assignedClass": "5",
        "assignedSection": "A",
    }
    data.update(extra)
    return container.user_service.save_employee_access(data)


def test_passwords_are_stored_hashed(container, hire, store):
    hire("EMP001")
    _grant_teacher(container)

    row = store.get_rows(USERS_MASTER.book, USERS_MASTER.name)[0]
    assert row[0] == "meera"
    assert row[1] != "secret123"


def test_staff_login_returns_token_and_profile(container, hire):
    hire("EMP001")
    _grant_teacher(container)

    result = container.auth_service.login("meera", "secret123")

    assert result["token"].startswith("TK-")
    assert result["user"]["assignedClass"] == "5"
    assert "password" not in result["user"]


def test_wrong_password_is_rejected(container, hire):
    hire("EMP001")
    _grant_teacher(container)

    with pytest.raises(AuthenticationError):
        container.auth_service.login("meera", "wrong")
    with pytest.raises(AuthenticationError):
        container.auth_service.login("", "")


def test_plaintext_password_cells_never_match(container):
    container.users_repo.save_staff(StaffUser("old", "plain", "ADMIN", "Old", "E9"))

    with pytest.raises(AuthenticationError):
        container.auth_service.login("old", "plain")


def test_non_teacher_roles_drop_class_assignment(container, hire):
    hire("EMP001")

    created = _grant_teacher(container, role="MANAGEMENT")

    assert created is True
    access = container.user_service.access_for_employee("EMP001")
    assert access["assignedClass"] == ""


def test_blank_password_on_update_keeps_the_old_one(container, hire):
    hire("EMP001")
    _grant_teacher(container)

    assert _grant_teacher(container, password="", assignedClass="6") is False
    assert container.auth_service.login("meera", "secret123")["user"]["assignedClass"] == "6"


def test_username_must_be_unique_across_staff_and_students(container, hire, enrol):
    hire("EMP001")
    hire("EMP002")
    enrol("A1")
    _grant_teacher(container)

    with pytest.raises(ValidationError):
        _grant_teacher(container, employeeId="EMP002")
    with pytest.raises(ValidationError):
        container.user_service.save_student_access({"admissionNo": "A1", "username": "meera", "password": "pw1234"})


def test_student_login_lives_in_class_sheet(container, enrol, store):
    enrol("A1", class_name="5", section="A", name="Asha")
    container.user_service.save_student_access({"admissionNo": "A1", "username": "asha", "password": "pw1234"})

    assert "Students_5" in store.list_sheets(Book.USERS)
    result = container.auth_service.login("asha", "pw1234")
    assert result["token"].startswith("ST-")
    assert result["user"]["role"] == "STUDENT"
    assert result["user"]["admissionNo"] == "A1"


def test_student_access_for_unknown_student_fails(container):
    with pytest.raises(NotFoundError):
        container.user_service.save_student_access({"admissionNo": "ghost", "username": "g", "password": "pw1234"})


def test_remove_access(container, hire, enrol):
    hire("EMP001")
    enrol("A1")
    _grant_teacher(container)
    container.user_service.save_student_access({"admissionNo": "A1", "username": "asha", "password": "pw1234"})

    container.user_service.remove_employee_access("EMP001")
    container.user_service.remove_student_access("A1")

    assert container.user_service.access_for_employee("EMP001") is None
    assert container.user_service.access_for_student("A1") is None
    with pytest.raises(NotFoundError):
        container.user_service.remove_student_access("A1")


def test_update_password_checks_the_current_one(container):
    container.users_repo.save_staff(StaffUser("admin", generate_password_hash("admin123"), "ADMIN", "Admin", "ADMIN"))
    svc = container.user_service

    with pytest.raises(AuthenticationError):
        svc.update_password("admin", "nope", "newpass1")

    svc.update_password("admin", "admin123", "newpass1")
    assert container.auth_service.login("admin", "newpass1")["user"]["role"] == "ADMIN"


def test_profile_photo_is_saved(container):
    container.users_repo.save_staff(StaffUser("admin", generate_password_hash("admin123"), "ADMIN", "Admin", "ADMIN"))

    container.user_service.update_profile_photo("admin", "https://img/admin.png")

    assert container.user_service.profile("admin")["avatarUrl"] == "https://img/admin.png"
