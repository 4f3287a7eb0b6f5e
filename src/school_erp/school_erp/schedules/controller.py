from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container


def register(router: ActionRouter, container: Container) -> None:
    service = container.schedule_service

    @router.action("getTeacherSchedule")
    def get_teacher_schedule(d: dict) -> dict:
        return success([e.to_dict() for e in service.for_teacher(d.get("teacherId"))])

    @router.action("getClassSchedule")
    def get_class_schedule(d: dict) -> dict:
        return success([e.to_dict() for e in service.for_class(d.get("className"), d.get("section"))])

    @router.action("saveSchedule", writes=True)
    def save_schedule(d: dict) -> dict:
        service.save(
            teacher_id=d.get("teacherId"),
            teacher_name=d.get("teacherName"),
            day=d.get("day"),
            time_slot=d.get("timeSlot"),
            subject=d.get("subject"),
            class_name=d.get("className"),
        )
        return success(None, "Schedule updated")

    @router.action("deleteSchedule", writes=True)
    def delete_schedule(d: dict) -> dict:
        service.delete(day=d.get("day"), time_slot=d.get("timeSlot"), class_name=d.get("className"))
        return success(None, "Slot cleared")
