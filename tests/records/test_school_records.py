from __future__ import annotations

from datetime import datetime

import pytest

from src.school_erp.school_erp.attendance.model import AttendanceEntry
from src.school_erp.school_erp.core.enums import AttendanceMark
from src.school_erp.school_erp.core.exceptions import NotFoundError, ValidationError
from src.school_erp.school_erp.dashboard.service import revenue_label
from src.school_erp.school_erp.events.model import CalendarEvent
from src.school_erp.school_erp.expenses.model import Expense
from src.school_erp.school_erp.settings.repository import SettingsRepository
from src.school_erp.school_erp.settings.service import SettingsService
from src.school_erp.school_erp.store.locking import AdvisoryLock
from src.school_erp.school_erp.store.schema import DELETED_LOG


def _slot(svc, teacher_id, subject, class_name="5-A"):
    return svc.save(
        teacher_id=teacher_id,
        teacher_name=f"T {teacher_id}",
        day="Monday",
        time_slot="09:00-09:45",
        subject=subject,
        class_name=class_name,
    )


def test_saving_an_occupied_slot_overwrites_and_keeps_id(container):
    svc = container.schedule_service
    first = _slot(svc, "EMP001", "Maths")
    second = _slot(svc, "EMP002", "Science")

    entries = svc.for_class("5", "A")
    assert len(entries) == 1
    assert entries[0].teacher_id == "EMP002"
    assert second.schedule_id == first.schedule_id
    assert list(svc.for_teacher("EMP001")) == []


def test_delete_schedule_slot(container):
    svc = container.schedule_service
    with pytest.raises(NotFoundError):
        svc.delete(day="Monday", time_slot="09:00-09:45", class_name="5-A")

    _slot(svc, "EMP001", "Maths")
    svc.delete(day="Monday", time_slot="09:00-09:45", class_name="5-A")
    assert list(svc.for_class("5", "A")) == []


def test_events_are_normalised_and_archived_on_removal(container, store):
    svc = container.event_service
    event = svc.add(CalendarEvent.from_dict({"title": "Sports Day", "date": "2024-06-10", "type": "EVENT"}))

    listed = svc.list_events()[0].to_dict()
    assert listed["type"] == "event"
    assert listed["audience"] == "all"
    assert event.event_id.startswith("EVT-")

    svc.remove(event.event_id)
    assert list(svc.list_events()) == []
    assert store.get_rows(DELETED_LOG.book, DELETED_LOG.name)[0][2] == "EVENTS"

    with pytest.raises(NotFoundError):
        svc.update(CalendarEvent.from_dict({"id": "EVT-missing", "title": "x", "date": "2024-06-11"}))


def test_expenses_total_the_current_month(container):
    svc = container.expense_service
    receipt = svc.add(Expense.from_dict({"date": "2024-06-02", "category": "Stationery", "title": "Chalk", "amount": 120}))
    svc.add(Expense.from_dict({"date": "2024-05-20", "category": "Repairs", "title": "Fan", "amount": 900}))

    summary = svc.summary(now=datetime(2024, 6, 15)).to_dict()

    assert receipt.startswith("EX-")
    assert summary["monthlyExpenses"] == 120
    assert [e["title"] for e in summary["recentExpenses"]] == ["Fan", "Chalk"]


@pytest.mark.parametrize("amount", [0, "inf", "nan"])
def test_expense_requires_positive_amount(container, amount):
    with pytest.raises(ValidationError):
        container.expense_service.add(Expense.from_dict({"date": "2024-06-02", "title": "Chalk", "amount": amount}))

    assert container.expense_service.summary().to_dict()["recentExpenses"] == []


def test_homework_filter_and_delete_by_id(container, fixed_now):
    svc = container.homework_service
    svc.assign(
        class_name="5",
        section="A",
        date="2024-06-01",
        entries=[{"subject": "Maths", "content": "Ex 2.1"}, {"subject": "Hindi", "content": "Poem"}],
        teacher_name="Meera",
        now=fixed_now,
    )
    svc.assign(class_name="5", section="A", date="2024-06-02T00:00:00Z", entries=[{"subject": "EVS"}], now=fixed_now)

    assert [h.subject for h in svc.list_for("5", "A")] == ["EVS", "Hindi", "Maths"]
    day_one = svc.list_for("5", "A", "2024-06-01")
    assert [h.subject for h in day_one] == ["Hindi", "Maths"]

    svc.delete(day_one[0].homework_id)
    assert [h.subject for h in svc.list_for("5", "A", "2024-06-01")] == ["Maths"]
    with pytest.raises(NotFoundError):
        svc.delete(day_one[0].homework_id)


def test_session_year_defaults_and_updates(container):
    svc = container.settings_service
    assert svc.active_year() == "2024-25"

    svc.update_active_year("2025-26")
    assert svc.active_year() == "2025-26"

    with pytest.raises(ValidationError):
        svc.update_active_year("next year")


class FakeSettingsRepository(SettingsRepository):
    def __init__(self, **values):
        self.values = dict(values)

    def get(self, prop):
        return self.values.get(prop)

    def put(self, prop, value):
        self.values[prop] = value


def test_settings_service_runs_on_any_settings_repository():
    repo = FakeSettingsRepository()
    svc = SettingsService(repo, AdvisoryLock(timeout_seconds=1), default_year="2030-31")

    assert svc.active_year() == "2030-31"
    svc.update_active_year("2031-32")

    assert list(repo.values.values()) == ["2031-32"]
    assert svc.active_year() == "2031-32"


@pytest.mark.parametrize(
    "total, label",
    [(0, "₹0"), (85000, "₹85,000"), (100000, "₹100,000"), (250000, "₹2.5L"), (1234567, "₹12.3L")],
)
def test_revenue_label(total, label):
    assert revenue_label(total) == label


def test_dashboard_stats_are_cached_until_a_write(container, enrol, hire, fixed_now):
    enrol("A1")
    enrol("A2")
    hire("EMP001")
    container.attendance_service.submit_day(
        "5",
        "A",
        fixed_now.date(),
        [
            AttendanceEntry("A1", AttendanceMark.PRESENT),
            AttendanceEntry("A2", AttendanceMark.ABSENT),
        ],
        now=fixed_now,
    )

    stats = container.dashboard_service.stats(now=fixed_now)
    assert stats == {"totalStudents": 2, "totalTeachers": 1, "attendanceRate": 50, "revenue": "₹0"}

    container.fee_service.record_payment("A1", 500, now=fixed_now)
    assert container.dashboard_service.stats(now=fixed_now)["revenue"] == "₹0"

    res = container.router.dispatch({"action": "collectFee", "admissionNo": "A1", "amount": 250})
    assert res["success"] is True
    assert container.dashboard_service.stats(now=fixed_now)["revenue"] == "₹750"
