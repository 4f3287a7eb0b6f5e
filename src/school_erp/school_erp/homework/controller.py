from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container


def register(router: ActionRouter, container: Container) -> None:
    service = container.homework_service

    @router.action("getHomework")
    def get_homework(d: dict) -> dict:
        items = service.list_for(d.get("className"), d.get("section"), d.get("date"))
        return success([hw.to_dict() for hw in items])

    @router.action("addHomework", writes=True)
    def add_homework(d: dict) -> dict:
        h = d.get("homework") or {}
        service.assign(
            class_name=h.get("className"),
            section=h.get("section"),
            date=h.get("date"),
            entries=h.get("entries"),
            teacher_name=h.get("teacherName"),
        )
        return success({}, "Homework assigned")

    @router.action("deleteHomework", writes=True)
    def delete_homework(d: dict) -> dict:
        service.delete(d.get("id"))
        return success(None, "Homework removed")
