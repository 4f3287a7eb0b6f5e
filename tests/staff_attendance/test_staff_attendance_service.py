from __future__ import annotations

import pytest

from src.school_erp.school_erp.core.exceptions import NotFoundError, ValidationError
from src.school_erp.school_erp.staff_attendance.model import StaffEntry


def test_weighted_percentage_rounds_half_up(container, hire, fixed_now):
    hire("EMP001")
    svc = container.staff_attendance_service
    days = ["2024-06-03", "2024-06-04", "2024-06-05", "2024-06-06"]
    for day, status in zip(days, ["Present", "Late", "Half Day", "Absent"]):
        svc.submit_day(day, [StaffEntry("EMP001", status)], now=fixed_now)

    stats = svc.get_history("EMP001")

    assert stats.present_count == 2.5
    assert stats.absent_count == 1
    assert stats.total_days == 4
    assert stats.percentage == 63
    assert stats.recent_history[0] == {"date": "2024-06-06", "status": "Absent"}


def test_no_marks_means_zero(container, hire):
    hire("EMP001")

    stats = container.staff_attendance_service.get_history("EMP001")

    assert stats.percentage == 0
    assert stats.recent_history == []


def test_day_view_lists_every_employee(container, hire, fixed_now):
    hire("EMP001")
    hire("EMP002")
    svc = container.staff_attendance_service
    svc.submit_day("2024-06-03", [StaffEntry("EMP001", "Late")], now=fixed_now)

    rows = {r.employee_id: r.status for r in svc.get_day("2024-06-03")}

    assert rows == {"EMP001": "Late", "EMP002": None}


def test_resubmitting_a_day_overwrites(container, hire, fixed_now):
    hire("EMP001")
    svc = container.staff_attendance_service
    svc.submit_day("2024-06-03", [StaffEntry("EMP001", "Present")], now=fixed_now)
    svc.submit_day("2024-06-03", [StaffEntry("EMP001", "Absent")], now=fixed_now)

    assert len(container.staff_attendance_repo.list_marks(employee_id="EMP001")) == 1


def test_unknown_status_is_rejected(container, hire):
    hire("EMP001")

    with pytest.raises(ValidationError):
        container.staff_attendance_service.submit_day("2024-06-03", [StaffEntry("EMP001", "Sick")])


def test_holidays_round_trip(container, fixed_now):
    svc = container.staff_attendance_service
    svc.set_holiday("EMP001", "2024-06-10", "Wedding", marked_by="admin", now=fixed_now)

    assert [h.to_dict() for h in svc.list_holidays("EMP001")] == [{"date": "2024-06-10", "description": "Wedding"}]

    svc.remove_holiday("EMP001", "2024-06-10")
    assert list(svc.list_holidays("EMP001")) == []


def test_removing_missing_holiday_raises(container, fixed_now):
    svc = container.staff_attendance_service

    with pytest.raises(NotFoundError):
        svc.remove_holiday("EMP001", "2024-06-10")

    svc.set_holiday("EMP001", "2024-06-10", now=fixed_now)
    with pytest.raises(NotFoundError):
        svc.remove_holiday("EMP001", "2024-06-11")
