from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..common.validators import require_list
from ..container import Container
from .model import AttendanceEntry


def register(router: ActionRouter, container: Container) -> None:
    service = container.attendance_service

    @router.action("getAttendanceData")
    def get_attendance_data(d: dict) -> dict:
        view = service.get_day(d.get("class"), d.get("section"), d.get("date"))
        return success(view.to_dict())

    @router.action("markAttendance", writes=True)
    def mark_attendance(d: dict) -> dict:
        # Class form carries an attendanceList; the single-student form does not.
        if "attendanceList" in d:
            entries = [AttendanceEntry.from_dict(item) for item in require_list(d.get("attendanceList"), "attendanceList")]
            service.submit_day(d.get("class"), d.get("section"), d.get("date"), entries, marked_by=d.get("markedBy"))
        else:
            service.mark_single(d.get("admissionNo"), d.get("status"), d.get("date"), marked_by=d.get("markedBy"))
        return success(None, "Attendance saved")

    @router.action("getStudentAttendance")
    def get_student_attendance(d: dict) -> dict:
        return success(service.get_student_history(d.get("admissionNo")).to_dict())

    @router.action("exportAttendanceCSV")
    def export_attendance_csv(d: dict) -> dict:
        csv = service.export_csv(d.get("class"), d.get("section"), start_date=d.get("startDate"), end_date=d.get("endDate"))
        if not csv:
            return success("", "No data found for this class")
        return success(csv)

    @router.action("notifyAbsentees")
    def notify_absentees(d: dict) -> dict:
        count = service.notify_absentees(d.get("class"), d.get("section"), d.get("date"))
        return success({"notified": count}, "Parents of absent students have been notified.")
