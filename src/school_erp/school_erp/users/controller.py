from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container


def register(router: ActionRouter, container: Container) -> None:
    auth = container.auth_service
    users = container.user_service

    @router.action("login")
    def login(d: dict) -> dict:
        return success(auth.login(d.get("username"), d.get("pass") or d.get("password")))

    @router.action("getMyProfile")
    def get_my_profile(d: dict) -> dict:
        return success(users.profile(d.get("username")))

    @router.action("updatePassword", writes=True)
    def update_password(d: dict) -> dict:
        users.update_password(d.get("username"), d.get("oldPassword"), d.get("newPassword"))
        return success(None, "Password updated")

    @router.action("updateProfilePhoto", writes=True)
    def update_profile_photo(d: dict) -> dict:
        return success({"photoUrl": users.update_profile_photo(d.get("username"), d.get("photoUrl"))})

    @router.action("getUserForEmployee")
    def get_user_for_employee(d: dict) -> dict:
        return success(users.access_for_employee(d.get("employeeId")))

    @router.action("saveUserAccess", writes=True)
    def save_user_access(d: dict) -> dict:
        created = users.save_employee_access(d.get("user") or {})
        return success(None, "User access created" if created else "User access updated")

    @router.action("removeUserAccess", writes=True)
    def remove_user_access(d: dict) -> dict:
        users.remove_employee_access(d.get("employeeId"))
        return success(None, "Access removed")

    @router.action("getUserForStudent")
    def get_user_for_student(d: dict) -> dict:
        return success(users.access_for_student(d.get("admissionNo")))

    @router.action("saveStudentUserAccess", writes=True)
    def save_student_user_access(d: dict) -> dict:
        users.save_student_access(d.get("user") or {})
        return success(None, "Student access enabled")

    @router.action("removeStudentUserAccess", writes=True)
    def remove_student_user_access(d: dict) -> dict:
        users.remove_student_access(d.get("admissionNo"))
        return success(None, "Access removed")
