from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api.router import ActionRouter
from .attendance.notifier import LoggingNotifier
from .attendance.service import AttendanceService
from .attendance.sheet_repository import SheetAttendanceRepository
from .common.ttl_cache import TTLCache
from .core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS, DEFAULT_SESSION_YEAR, STATS_CACHE_SECONDS
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .employees.sheet_repository import SheetEmployeeRepository
from .events.service import EventService
from .events.sheet_repository import SheetEventRepository
from .expenses.service import ExpenseService
from .expenses.sheet_repository import SheetExpenseRepository
from .fees.service import FeeService
from .fees.sheet_repository import SheetFeeRepository
from .homework.service import HomeworkService
from .homework.sheet_repository import SheetHomeworkRepository
from .results.service import ResultsService
from .results.sheet_repository import SheetResultsRepository
from .schedules.service import ScheduleService
from .schedules.sheet_repository import SheetScheduleRepository
from .settings.service import SettingsService
from .settings.sheet_repository import SheetSettingsRepository
from .staff_attendance.service import StaffAttendanceService
from .staff_attendance.sheet_repository import SheetStaffAttendanceRepository
from .store.locking import AdvisoryLock
from .store.memory_store import InMemoryGridStore
from .store.mysql_store import MySQLGridStore
from .store.repository import GridStore
from .students.service import StudentService
from .students.sheet_repository import SheetStudentRepository
from .users.service import AuthService, UserService
from .users.sheet_repository import SheetUserRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    store: GridStore
    lock: AdvisoryLock
    router: ActionRouter

    students_repo: SheetStudentRepository
    employees_repo: SheetEmployeeRepository
    attendance_repo: SheetAttendanceRepository
    staff_attendance_repo: SheetStaffAttendanceRepository
    fees_repo: SheetFeeRepository
    users_repo: SheetUserRepository

    student_service: StudentService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    staff_attendance_service: StaffAttendanceService
    fee_service: FeeService
    schedule_service: ScheduleService
    event_service: EventService
    expense_service: ExpenseService
    homework_service: HomeworkService
    results_service: ResultsService
    auth_service: AuthService
    user_service: UserService
    settings_service: SettingsService
    dashboard_service: DashboardService


def build_container(
    *,
    db_config: Optional[dict] = None,
    store_backend: str = "mysql",
    store: Optional[GridStore] = None,
    lock_timeout_seconds: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
    session_year: str = DEFAULT_SESSION_YEAR,
    stats_cache_seconds: float = STATS_CACHE_SECONDS,
) -> Container:
    """Wire repositories and services over one store.

    Pass ``store`` to reuse an existing store (tests); otherwise
    ``store_backend`` picks MySQL (needs ``db_config``) or an in-memory grid.
    Actions are registered separately, see ``api.catalog.register_actions``.
    """

    conn = None
    if store is None:
        if store_backend == "memory":
            store = InMemoryGridStore()
        elif store_backend == "mysql":
            if not db_config:
                raise ValueError("DB_CONFIG is required for the mysql store backend")
            conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
            store = MySQLGridStore(conn)
        else:
            raise ValueError(f"Unknown STORE_BACKEND: {store_backend}")

    lock = AdvisoryLock(lock_timeout_seconds)

    students_repo = SheetStudentRepository(store)
    employees_repo = SheetEmployeeRepository(store)
    attendance_repo = SheetAttendanceRepository(store)
    staff_attendance_repo = SheetStaffAttendanceRepository(store)
    fees_repo = SheetFeeRepository(store)
    users_repo = SheetUserRepository(store)

    return Container(
        conn=conn,
        store=store,
        lock=lock,
        router=ActionRouter(),
        students_repo=students_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        staff_attendance_repo=staff_attendance_repo,
        fees_repo=fees_repo,
        users_repo=users_repo,
        student_service=StudentService(students_repo, lock),
        employee_service=EmployeeService(employees_repo, lock),
        attendance_service=AttendanceService(attendance_repo, students_repo, lock, notifier=LoggingNotifier()),
        staff_attendance_service=StaffAttendanceService(staff_attendance_repo, employees_repo, lock),
        fee_service=FeeService(fees_repo, students_repo, lock),
        schedule_service=ScheduleService(SheetScheduleRepository(store), lock),
        event_service=EventService(SheetEventRepository(store), lock),
        expense_service=ExpenseService(SheetExpenseRepository(store), lock),
        homework_service=HomeworkService(SheetHomeworkRepository(store), lock),
        results_service=ResultsService(SheetResultsRepository(store), students_repo, lock),
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo, students_repo, employees_repo, lock),
        settings_service=SettingsService(SheetSettingsRepository(store), lock, default_year=session_year),
        dashboard_service=DashboardService(
            students_repo,
            employees_repo,
            attendance_repo,
            fees_repo,
            cache=TTLCache(stats_cache_seconds),
        ),
    )
