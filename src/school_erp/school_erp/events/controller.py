from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container
from .model import CalendarEvent


def register(router: ActionRouter, container: Container) -> None:
    service = container.event_service

    @router.action("getEvents")
    def get_events(d: dict) -> dict:
        return success([e.to_dict() for e in service.list_events()])

    @router.action("addEvent", writes=True)
    def add_event(d: dict) -> dict:
        service.add(CalendarEvent.from_dict(d.get("event") or {}))
        return success(None, "Event published")

    @router.action("updateEvent", writes=True)
    def update_event(d: dict) -> dict:
        service.update(CalendarEvent.from_dict(d.get("event") or {}))
        return success(None, "Event modified")

    @router.action("removeEvent", writes=True)
    def remove_event(d: dict) -> dict:
        service.remove(d.get("id"), deleted_by=d.get("deletedBy"))
        return success(None, "Event removed")
