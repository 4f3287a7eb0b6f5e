"""Closed registry of books, sheets and their header schemas.

Readers and writers both resolve column positions from here, so a sheet's
layout is declared exactly once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Book(str, Enum):
    STUDENTS = "STUDENTS"
    EMPLOYEES = "EMPLOYEES"
    STUDENT_ATTENDANCE = "STUDENT_ATTENDANCE"
    EMPLOYEE_ATTENDANCE = "EMPLOYEE_ATTENDANCE"
    FEES = "FEES"
    EXPENSES = "EXPENSES"
    HOMEWORK = "HOMEWORK"
    RESULTS = "RESULTS"
    EVENTS = "EVENTS"
    USERS = "USERS"
    DELETED_DATA = "DELETED_DATA"


@dataclass(frozen=True)
class SheetSchema:
    book: Book
    name: str
    headers: tuple[str, ...]

    def col(self, header: str) -> int:
        return self.headers.index(header)

    def blank_row(self) -> list[str]:
        return [""] * len(self.headers)

    def for_sheet(self, name: str) -> "SheetSchema":
        """Same layout under another sheet name (per-class sheets)."""
        return SheetSchema(self.book, name, self.headers)


STUDENTS_MASTER = SheetSchema(
    Book.STUDENTS,
    "Master",
    (
        "Admission No", "Roll No", "Name", "Class", "Section", "Status",
        "Father Name", "Mother Name", "DOB", "Phone 1", "Phone 2", "Address",
        "Aadhaar", "Samagra ID", "Joining Date", "Total Fees", "Photo URL",
    ),
)

EMPLOYEES_MASTER = SheetSchema(
    Book.EMPLOYEES,
    "Master",
    (
        "Employee ID", "Name", "Post", "Phone 1", "Email", "Joining Date", "Salary",
        "Father Name", "Mother Name", "DOB", "Gender", "Qualification", "Experience",
        "Address", "Phone 2", "Aadhaar", "PAN", "Bank Account", "IFSC", "Photo URL",
    ),
)

TIME_TABLE = SheetSchema(
    Book.EMPLOYEES,
    "Time_Table",
    ("ID", "TeacherID", "TeacherName", "Day", "Slot", "Subject", "Class"),
)

STUDENT_ATTENDANCE_LOG = SheetSchema(
    Book.STUDENT_ATTENDANCE,
    "Daily_Log",
    ("Date", "AdmissionNo", "Class", "Section", "RollNo", "Name", "PhotoUrl", "Status", "MarkedBy", "MarkedAt"),
)

ATTENDANCE_LOCKS = SheetSchema(
    Book.STUDENT_ATTENDANCE,
    "Global_Locks",
    ("Class", "Section", "Date", "By", "At"),
)

EMPLOYEE_ATTENDANCE_LOG = SheetSchema(
    Book.EMPLOYEE_ATTENDANCE,
    "Daily_Log",
    ("Date", "EmployeeID", "Status", "Timestamp"),
)

TEACHER_HOLIDAYS = SheetSchema(
    Book.EMPLOYEE_ATTENDANCE,
    "Holidays",
    ("Date", "EmployeeID", "Reason", "MarkedBy", "At"),
)

FEE_COLLECTION_LOG = SheetSchema(
    Book.FEES,
    "Collection_Log",
    ("Timestamp", "AdmissionNo", "Amount", "Mode", "Remarks", "ReceiptNo"),
)

EXPENSE_LEDGER = SheetSchema(
    Book.EXPENSES,
    "Main_Ledger",
    ("Date", "ReceiptNo", "Category", "Purpose", "Amount", "Mode", "Ref", "Remarks", "ApprovedBy"),
)

EVENTS_MASTER = SheetSchema(
    Book.EVENTS,
    "Master",
    ("ID", "Title", "Date", "Type", "Audience"),
)

EXAM_REGISTRY = SheetSchema(
    Book.RESULTS,
    "Registry",
    ("ExamID", "ExamName", "Admin", "CreatedAt", "Subjects_JSON"),
)

USERS_MASTER = SheetSchema(
    Book.USERS,
    "Master",
    ("username", "password", "role", "name", "employeeId", "assignedClass", "assignedSection", "photoUrl"),
)

SYSTEM_SETTINGS = SheetSchema(
    Book.USERS,
    "Settings",
    ("Property", "Value"),
)

DELETED_LOG = SheetSchema(
    Book.DELETED_DATA,
    "Deleted_Log",
    ("DeletedAt", "DeletedBy", "Module", "OriginalID", "Data_JSON"),
)

# Templates for sheets created per class; the name is filled in at runtime.
HOMEWORK_TEMPLATE = SheetSchema(
    Book.HOMEWORK,
    "",
    ("ID", "Date", "Subject", "Content", "Teacher", "CreatedAt"),
)

MARKS_TEMPLATE = SheetSchema(
    Book.RESULTS,
    "",
    ("AdmissionNo", "ExamName", "Subject", "Obtained", "Maximum", "At"),
)

STUDENT_LOGINS_TEMPLATE = SheetSchema(
    Book.USERS,
    "",
    ("Username", "Password", "Role", "Name", "AdmissionNo", "Class", "Section", "Photo"),
)

STUDENT_LOGINS_PREFIX = "Students_"

FIXED_SHEETS: tuple[SheetSchema, ...] = (
    STUDENTS_MASTER,
    EMPLOYEES_MASTER,
    TIME_TABLE,
    STUDENT_ATTENDANCE_LOG,
    ATTENDANCE_LOCKS,
    EMPLOYEE_ATTENDANCE_LOG,
    TEACHER_HOLIDAYS,
    FEE_COLLECTION_LOG,
    EXPENSE_LEDGER,
    EVENTS_MASTER,
    EXAM_REGISTRY,
    USERS_MASTER,
    SYSTEM_SETTINGS,
    DELETED_LOG,
)

_UNSAFE_SHEET_CHARS = re.compile(r"[\[\]*?/:\\]")


def class_sheet_name(class_name: Optional[str], section: Optional[str]) -> str:
    if not class_name:
        return "Unassigned"
    name = f"{class_name}-{section or 'A'}".strip()
    return _UNSAFE_SHEET_CHARS.sub("_", name)


def student_logins_sheet(class_name: Optional[str]) -> SheetSchema:
    return STUDENT_LOGINS_TEMPLATE.for_sheet(f"{STUDENT_LOGINS_PREFIX}{class_name or 'General'}")
