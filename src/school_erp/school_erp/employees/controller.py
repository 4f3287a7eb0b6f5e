from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container
from .model import Employee


def register(router: ActionRouter, container: Container) -> None:
    service = container.employee_service

    @router.action("getEmployees")
    def get_employees(d: dict) -> dict:
        return success([e.to_dict() for e in service.list_all()])

    @router.action("getEmployeeDetails")
    def get_employee_details(d: dict) -> dict:
        return success(service.get(d.get("employeeId")).to_dict())

    @router.action("addEmployee", writes=True)
    def add_employee(d: dict) -> dict:
        service.add(Employee.from_dict(d.get("employee") or {}))
        return success(None, "Added")

    @router.action("updateEmployee", writes=True)
    def update_employee(d: dict) -> dict:
        employee = service.update(Employee.from_dict(d.get("employee") or {}))
        return success({"photoUrl": employee.photo_url}, "Updated")

    @router.action("deleteEmployee", writes=True)
    def delete_employee(d: dict) -> dict:
        service.archive(d.get("employeeId"), deleted_by=d.get("deletedBy"))
        return success(None, "Archived")

    @router.action("getNextEmployeeId")
    def get_next_employee_id(d: dict) -> dict:
        return success(service.next_employee_id())
