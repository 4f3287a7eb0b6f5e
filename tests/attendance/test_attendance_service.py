from __future__ import annotations

import pytest

from src.school_erp.school_erp.attendance.model import AttendanceEntry
from src.school_erp.school_erp.attendance.service import AttendanceService
from src.school_erp.school_erp.core.enums import AttendanceMark
from src.school_erp.school_erp.core.exceptions import NotFoundError, ValidationError
from src.school_erp.school_erp.store.schema import STUDENT_ATTENDANCE_LOG


def _present(adm: str) -> AttendanceEntry:
    return AttendanceEntry(admission_no=adm, status=AttendanceMark.PRESENT)


def _absent(adm: str) -> AttendanceEntry:
    return AttendanceEntry(admission_no=adm, status=AttendanceMark.ABSENT)


def test_student_without_marks_has_zero_percentage(container, enrol):
    enrol("A1")

    stats = container.attendance_service.get_student_history("A1")

    assert stats.percentage == 0
    assert stats.total_days == 0
    assert stats.recent_history == []


def test_history_for_unknown_student_raises(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.get_student_history("nope")


def test_unsubmitted_day_is_open_with_blank_statuses(container, enrol):
    enrol("A1")
    enrol("A2")

    view = container.attendance_service.get_day("5", "A", "2024-06-01")

    assert view.is_locked is False
    assert [s.status for s in view.students] == [None, None]


def test_submitted_day_reads_back_and_is_locked(container, enrol, fixed_now):
    enrol("A1")
    svc = container.attendance_service

    svc.submit_day("5", "A", "2024-06-01", [_present("A1")], marked_by="T1", now=fixed_now)

    view = svc.get_day("5", "A", "2024-06-01")
    assert view.is_locked is True
    assert view.students[0].status == "Present"

    stats = svc.get_student_history("A1")
    assert stats.percentage == 100
    assert stats.recent_history == [{"date": "2024-06-01", "status": "Present"}]


def test_resubmission_overwrites_marks_but_appends_lock_rows(container, enrol, fixed_now):
    enrol("A1")
    svc = container.attendance_service

    svc.submit_day("5", "A", "2024-06-01", [_present("A1")], now=fixed_now)
    svc.submit_day("5", "A", "2024-06-01", [_absent("A1")], now=fixed_now)

    marks = container.attendance_repo.list_marks(admission_no="A1")
    assert len(marks) == 1
    assert marks[0].status is AttendanceMark.ABSENT
    assert container.attendance_repo.count_locks(class_name="5", section="A", date="2024-06-01") == 2


def test_iso_timestamp_dates_match_plain_dates(container, enrol, fixed_now):
    enrol("A1")
    svc = container.attendance_service

    svc.submit_day("5", "A", "2024-06-01T00:00:00.000Z", [_present("A1")], now=fixed_now)

    assert svc.get_day("5", "A", "2024-06-01").students[0].status == "Present"


def test_rows_with_unparseable_dates_are_ignored(container, enrol, store):
    enrol("A1")
    store.get_or_create_sheet(STUDENT_ATTENDANCE_LOG.book, STUDENT_ATTENDANCE_LOG.name, STUDENT_ATTENDANCE_LOG.headers)
    store.append_row(
        STUDENT_ATTENDANCE_LOG.book,
        STUDENT_ATTENDANCE_LOG.name,
        ["not a date", "A1", "5", "A", "1", "Student A1", "", "P", "T1", ""],
    )

    assert container.attendance_service.get_student_history("A1").total_days == 0


def test_history_is_newest_first_and_limited(container, enrol, fixed_now):
    enrol("A1")
    svc = container.attendance_service
    for day in ("2024-06-03", "2024-06-01", "2024-06-02"):
        svc.submit_day("5", "A", day, [_present("A1")], now=fixed_now)

    history = svc.get_student_history("A1").recent_history

    assert [h["date"] for h in history] == ["2024-06-03", "2024-06-02", "2024-06-01"]


def test_anything_but_present_counts_as_absent(container, enrol, fixed_now):
    enrol("A1")
    svc = container.attendance_service

    svc.mark_single("A1", "present", "2024-06-01", now=fixed_now)

    stats = svc.get_student_history("A1")
    assert stats.absent_count == 1
    assert stats.percentage == 0


def test_mark_single_does_not_lock_the_day(container, enrol, fixed_now):
    enrol("A1")
    svc = container.attendance_service

    svc.mark_single("A1", "Present", "2024-06-01", now=fixed_now)

    view = svc.get_day("5", "A", "2024-06-01")
    assert view.is_locked is False
    assert view.students[0].status == "Present"


def test_mark_single_unknown_student_raises(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.mark_single("ghost", "Present", "2024-06-01")


def test_submit_rejects_empty_list_and_bad_date(container):
    svc = container.attendance_service

    with pytest.raises(ValidationError):
        svc.submit_day("5", "A", "2024-06-01", [])
    with pytest.raises(ValidationError):
        svc.submit_day("5", "A", "yesterday", [_present("A1")])


def test_export_csv_builds_a_date_grid(container, enrol, fixed_now):
    enrol("A1", name="Asha")
    enrol("A2", name="Ravi")
    svc = container.attendance_service
    svc.submit_day("5", "A", "2024-06-01", [_present("A1"), _absent("A2")], now=fixed_now)
    svc.submit_day("5", "A", "2024-06-02", [_present("A1")], now=fixed_now)

    csv = svc.export_csv("5", "A")

    assert csv.splitlines() == [
        "Roll No,Name,Photo,Admission No,2024-06-01,2024-06-02",
        "1,Asha,,A1,P,P",
        "2,Ravi,,A2,A,",
    ]


def test_export_csv_respects_date_range(container, enrol, fixed_now):
    enrol("A1")
    svc = container.attendance_service
    svc.submit_day("5", "A", "2024-06-01", [_present("A1")], now=fixed_now)
    svc.submit_day("5", "A", "2024-06-05", [_present("A1")], now=fixed_now)

    csv = svc.export_csv("5", "A", start_date="2024-06-02", end_date="2024-06-30")

    assert csv.splitlines()[0].endswith(",2024-06-05")
    assert "2024-06-01" not in csv


def test_export_csv_without_marks_is_empty(container):
    assert container.attendance_service.export_csv("9", "Z") == ""


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def notify_absent(self, *, student, class_name, section, date):
        self.sent.append((student.admission_no, class_name, section, date))


def test_notify_absentees_only_reaches_absent_students(container, enrol, fixed_now):
    enrol("A1")
    enrol("A2")
    notifier = RecordingNotifier()
    svc = AttendanceService(container.attendance_repo, container.students_repo, container.lock, notifier=notifier)
    svc.submit_day("5", "A", "2024-06-01", [_present("A1"), _absent("A2")], now=fixed_now)

    assert svc.notify_absentees("5", "A", "2024-06-01") == 1
    assert notifier.sent == [("A2", "5", "A", "2024-06-01")]
