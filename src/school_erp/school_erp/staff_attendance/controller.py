from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..common.validators import require_list
from ..container import Container
from .model import StaffEntry


def register(router: ActionRouter, container: Container) -> None:
    service = container.staff_attendance_service

    @router.action("getStaffAttendanceData")
    def get_staff_attendance_data(d: dict) -> dict:
        return success([row.to_dict() for row in service.get_day(d.get("date"))])

    @router.action("submitStaffAttendance", writes=True)
    def submit_staff_attendance(d: dict) -> dict:
        entries = [StaffEntry.from_dict(item) for item in require_list(d.get("attendanceList"), "attendanceList")]
        service.submit_day(d.get("date"), entries)
        return success(None, "Staff attendance saved")

    @router.action("getEmployeeAttendance")
    def get_employee_attendance(d: dict) -> dict:
        return success(service.get_history(d.get("employeeId")).to_dict())

    @router.action("getTeacherHolidays")
    def get_teacher_holidays(d: dict) -> dict:
        return success([h.to_dict() for h in service.list_holidays(d.get("staffId"))])

    @router.action("setTeacherHoliday", writes=True)
    def set_teacher_holiday(d: dict) -> dict:
        service.set_holiday(d.get("staffId"), d.get("date"), d.get("description"), marked_by=d.get("markedBy"))
        return success(None, "Leave recorded")

    @router.action("removeTeacherHoliday", writes=True)
    def remove_teacher_holiday(d: dict) -> dict:
        service.remove_holiday(d.get("staffId"), d.get("date"))
        return success(None, "Leave record removed")
