"""Typed façade over the action endpoint with a stale-while-revalidate cache.

Cached reads return immediately and refresh in the background; any
successful write drops the whole cache namespace so the next read refetches.
"""

from __future__ import annotations

import base64
import hashlib
import json
import logging
import threading
from typing import Any, Callable, Dict, Optional

from ..common.ttl_cache import TTLCache
from ..core.constants import CLIENT_CACHE_SECONDS
from .transport import NetworkError, Transport

logger = logging.getLogger(__name__)

CACHE_PREFIX = "wh_cache_"
NOT_CONFIGURED = "API URL is not configured."
NETWORK_ERROR = "Network error. Please check your connection or Script URL."


def cache_key(action: str, payload: Optional[Dict[str, Any]] = None) -> str:
    canonical = json.dumps({"action": action, **(payload or {})}, sort_keys=True, separators=(",", ":"))
    digest = base64.b64encode(hashlib.sha256(canonical.encode("utf-8")).digest()).decode("ascii")
    return CACHE_PREFIX + digest[:32]


def normalize_response(data: Dict[str, Any]) -> Dict[str, Any]:
    """Make ``message`` always a string."""

    out = dict(data)
    msg = out.get("message")
    if isinstance(msg, (dict, list)):
        out["message"] = json.dumps(msg)
    elif not msg:
        out["message"] = ""
    else:
        out["message"] = str(msg)
    out["success"] = bool(out.get("success"))
    return out


def _in_thread(fn: Callable[[], None]) -> None:
    threading.Thread(target=fn, name="school-erp-cache-refresh", daemon=True).start()


class SchoolApiClient:
    def __init__(
        self,
        transport: Transport,
        *,
        cache: Optional[TTLCache] = None,
        background: Callable[[Callable[[], None]], None] = _in_thread,
    ):
        self._transport = transport
        self._cache = cache if cache is not None else TTLCache(CLIENT_CACHE_SECONDS)
        self._background = background
        # Bumped by clear_cache; fetches started under an older generation do not cache.
        self._generation = 0
        self._generation_lock = threading.Lock()

    # plumbing
    def request(self, action: str, payload: Optional[Dict[str, Any]] = None, *, use_cache: bool = False) -> dict:
        payload = {k: v for k, v in (payload or {}).items() if v is not None}
        key = cache_key(action, payload)
        if use_cache:
            cached = self._cache.get(key)
            if cached is not None:
                generation = self._generation
                self._background(lambda: self._fetch(action, payload, key, generation=generation))
                return {"success": True, "data": cached, "message": ""}
        return self._fetch(action, payload, key)

    def _fetch(self, action: str, payload: Dict[str, Any], key: str, *, generation: Optional[int] = None) -> dict:
        if generation is None:
            generation = self._generation
        if not self._transport.configured:
            return {"success": False, "message": NOT_CONFIGURED}
        try:
            data = normalize_response(self._transport.send({"action": action, **payload}))
        except NetworkError:
            return {"success": False, "message": NETWORK_ERROR}
        if data["success"]:
            with self._generation_lock:
                if generation == self._generation:
                    self._cache.put(key, data.get("data"))
        return data

    def write(self, action: str, payload: Optional[Dict[str, Any]] = None) -> dict:
        res = self.request(action, payload)
        if res["success"]:
            self.clear_cache()
        return res

    def clear_cache(self) -> None:
        with self._generation_lock:
            self._generation += 1
            self._cache.clear(CACHE_PREFIX)

    # auth and profile
    def login(self, username: str, password: str) -> dict:
        return self.request("login", {"username": username, "pass": password})

    def get_my_profile(self, username: str) -> dict:
        return self.request("getMyProfile", {"username": username}, use_cache=True)

    def update_password(self, username: str, old_password: str, new_password: str) -> dict:
        return self.write(
            "updatePassword", {"username": username, "oldPassword": old_password, "newPassword": new_password}
        )

    def update_profile_photo(self, username: str, photo_url: str) -> dict:
        return self.write("updateProfilePhoto", {"username": username, "photoUrl": photo_url})

    # dashboard and events
    def get_stats(self) -> dict:
        return self.request("getStats", use_cache=True)

    def get_events(self) -> dict:
        return self.request("getEvents", use_cache=True)

    def add_event(self, event: dict) -> dict:
        return self.write("addEvent", {"event": event})

    def update_event(self, event: dict) -> dict:
        return self.write("updateEvent", {"event": event})

    def remove_event(self, event_id: str) -> dict:
        return self.write("removeEvent", {"id": event_id})

    # students
    def get_students(self, user: Optional[dict] = None, *, bypass_cache: bool = False) -> dict:
        user = user or {}
        payload = {
            "role": user.get("role"),
            "assignedClass": user.get("assignedClass"),
            "assignedSection": user.get("assignedSection"),
        }
        return self.request("getStudents", payload, use_cache=not bypass_cache)

    def get_student_details(self, admission_no: str) -> dict:
        return self.request("getStudentDetails", {"admissionNo": admission_no})

    def get_next_admission_number(self) -> dict:
        return self.request("getNextAdmissionNumber")

    def add_student(self, student: dict) -> dict:
        return self.write("addStudent", {"student": student})

    def update_student(self, student: dict) -> dict:
        return self.write("updateStudent", {"student": student})

    def archive_student(self, admission_no: str, deleted_by: str) -> dict:
        return self.write("archiveStudent", {"admissionNo": admission_no, "deletedBy": deleted_by})

    # attendance
    def get_attendance_data(self, class_name: str, section: str, date: str) -> dict:
        return self.request("getAttendanceData", {"class": class_name, "section": section, "date": date})

    def mark_attendance(self, admission_no: str, status: str, date: str) -> dict:
        return self.write("markAttendance", {"admissionNo": admission_no, "status": status, "date": date})

    def mark_class_attendance(
        self, class_name: str, section: str, date: str, attendance_list: list, marked_by: Optional[str] = None
    ) -> dict:
        return self.write(
            "markAttendance",
            {
                "class": class_name,
                "section": section,
                "date": date,
                "attendanceList": attendance_list,
                "markedBy": marked_by,
            },
        )

    def get_student_attendance(self, admission_no: str) -> dict:
        return self.request("getStudentAttendance", {"admissionNo": admission_no})

    def export_attendance_csv(
        self, class_name: str, section: str, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> dict:
        return self.request(
            "exportAttendanceCSV",
            {"class": class_name, "section": section, "startDate": start_date, "endDate": end_date},
        )

    def notify_absentees(self, class_name: str, section: str, date: str) -> dict:
        return self.request("notifyAbsentees", {"class": class_name, "section": section, "date": date})

    # fees
    def get_fee_dashboard(self) -> dict:
        return self.request("getFeeDashboard", use_cache=True)

    def get_student_fees(self, admission_no: str, total_fees: float) -> dict:
        return self.request("getStudentFees", {"admissionNo": admission_no, "totalFees": total_fees})

    def collect_fee(self, admission_no: str, amount: float, mode: str = "", remarks: str = "") -> dict:
        return self.write(
            "collectFee", {"admissionNo": admission_no, "amount": amount, "mode": mode, "remarks": remarks}
        )

    # exams
    def create_exam(self, exam_name: str, subjects: list, created_by: str) -> dict:
        return self.write("createExam", {"examName": exam_name, "subjects": subjects, "createdBy": created_by})

    def get_exams(self) -> dict:
        return self.request("getExams", use_cache=True)

    def get_class_results(self, exam_name: str, class_name: str, section: str) -> dict:
        return self.request("getClassResults", {"examName": exam_name, "className": class_name, "section": section})

    def save_student_marks(self, admission_no: str, exam_name: str, marks: list, class_name: str, section: str) -> dict:
        return self.write(
            "saveStudentMarks",
            {
                "admissionNo": admission_no,
                "examName": exam_name,
                "marks": marks,
                "className": class_name,
                "section": section,
            },
        )

    def add_marks(self, admission_no: str, exam_name: str, marks: list) -> dict:
        return self.write("addMarks", {"admissionNo": admission_no, "examName": exam_name, "marks": marks})

    def get_student_results(self, admission_no: str) -> dict:
        return self.request("getStudentResults", {"admissionNo": admission_no})

    # staff and HR
    def get_employees(self) -> dict:
        return self.request("getEmployees", use_cache=True)

    def get_employee_details(self, employee_id: str) -> dict:
        return self.request("getEmployeeDetails", {"employeeId": employee_id}, use_cache=True)

    def get_next_employee_id(self) -> dict:
        return self.request("getNextEmployeeId")

    def add_employee(self, employee: dict) -> dict:
        return self.write("addEmployee", {"employee": employee})

    def update_employee(self, employee: dict) -> dict:
        return self.write("updateEmployee", {"employee": employee})

    def delete_employee(self, employee_id: str, deleted_by: str) -> dict:
        return self.write("deleteEmployee", {"employeeId": employee_id, "deletedBy": deleted_by})

    def get_staff_attendance(self, date: str) -> dict:
        return self.request("getStaffAttendanceData", {"date": date})

    def mark_staff_attendance(self, date: str, attendance_list: list) -> dict:
        return self.write("submitStaffAttendance", {"date": date, "attendanceList": attendance_list})

    def get_employee_attendance(self, employee_id: str) -> dict:
        return self.request("getEmployeeAttendance", {"employeeId": employee_id})

    def get_teacher_holidays(self, staff_id: str) -> dict:
        return self.request("getTeacherHolidays", {"staffId": staff_id}, use_cache=True)

    def set_teacher_holiday(self, staff_id: str, date: str, description: str, marked_by: str) -> dict:
        return self.write(
            "setTeacherHoliday",
            {"staffId": staff_id, "date": date, "description": description, "markedBy": marked_by},
        )

    def remove_teacher_holiday(self, staff_id: str, date: str) -> dict:
        return self.write("removeTeacherHoliday", {"staffId": staff_id, "date": date})

    def get_teacher_schedule(self, teacher_id: str) -> dict:
        return self.request("getTeacherSchedule", {"teacherId": teacher_id}, use_cache=True)

    def get_class_schedule(self, class_name: str, section: str) -> dict:
        return self.request("getClassSchedule", {"className": class_name, "section": section}, use_cache=True)

    def save_schedule(
        self, teacher_id: str, teacher_name: str, day: str, time_slot: str, subject: str, class_name: str
    ) -> dict:
        return self.write(
            "saveSchedule",
            {
                "teacherId": teacher_id,
                "teacherName": teacher_name,
                "day": day,
                "timeSlot": time_slot,
                "subject": subject,
                "className": class_name,
            },
        )

    def delete_schedule(self, day: str, time_slot: str, class_name: str) -> dict:
        return self.write("deleteSchedule", {"day": day, "timeSlot": time_slot, "className": class_name})

    # finance
    def get_expenses(self) -> dict:
        return self.request("getExpenses", use_cache=True)

    def get_next_expense_receipt_number(self) -> dict:
        return self.request("getNextExpenseReceiptNumber")

    def add_expense(self, expense: dict) -> dict:
        return self.write("addExpense", {"expense": expense})

    # user management
    def get_user_for_employee(self, employee_id: str) -> dict:
        return self.request("getUserForEmployee", {"employeeId": employee_id})

    def save_user_access(self, user: dict) -> dict:
        return self.write("saveUserAccess", {"user": user})

    def remove_user_access(self, employee_id: str) -> dict:
        return self.write("removeUserAccess", {"employeeId": employee_id})

    def get_user_for_student(self, admission_no: str) -> dict:
        return self.request("getUserForStudent", {"admissionNo": admission_no})

    def save_student_user_access(self, user: dict) -> dict:
        return self.write("saveStudentUserAccess", {"user": user})

    def remove_student_user_access(self, admission_no: str) -> dict:
        return self.write("removeStudentUserAccess", {"admissionNo": admission_no})

    # admin
    def get_system_config(self) -> dict:
        return self.request("getSystemConfig", use_cache=True)

    def update_system_config(self, active_year: str) -> dict:
        return self.write("updateSystemConfig", {"activeYear": active_year})

    # homework
    def get_homework(self, class_name: str, section: str, date: Optional[str] = None) -> dict:
        return self.request("getHomework", {"className": class_name, "section": section, "date": date})

    def add_homework(self, class_name: str, section: str, date: str, entries: list, teacher_name: str = "") -> dict:
        homework = {
            "className": class_name,
            "section": section,
            "date": date,
            "entries": entries,
            "teacherName": teacher_name,
        }
        return self.write("addHomework", {"homework": homework})

    def delete_homework(self, homework_id: str) -> dict:
        return self.write("deleteHomework", {"id": homework_id})
