from __future__ import annotations

from ..attendance.controller import register as register_attendance
from ..container import Container
from ..dashboard.controller import register as register_dashboard
from ..employees.controller import register as register_employees
from ..events.controller import register as register_events
from ..expenses.controller import register as register_expenses
from ..fees.controller import register as register_fees
from ..homework.controller import register as register_homework
from ..results.controller import register as register_results
from ..schedules.controller import register as register_schedules
from ..settings.controller import register as register_settings
from ..staff_attendance.controller import register as register_staff_attendance
from ..students.controller import register as register_students
from ..users.controller import register as register_users
from .router import ActionRouter

_FEATURES = (
    register_users,
    register_dashboard,
    register_events,
    register_students,
    register_attendance,
    register_fees,
    register_results,
    register_employees,
    register_staff_attendance,
    register_schedules,
    register_expenses,
    register_homework,
    register_settings,
)


def register_actions(container: Container) -> ActionRouter:
    """Attach every feature's actions to the container's router."""

    for register in _FEATURES:
        register(container.router, container)
    return container.router
