from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..store.locking import AdvisoryLock
from .model import CalendarEvent
from .repository import EventRepository

logger = logging.getLogger(__name__)

LOCK_KEY = ("events",)


class EventService:
    def __init__(self, events: EventRepository, lock: AdvisoryLock):
        self._events = events
        self._lock = lock

    def list_events(self) -> Sequence[CalendarEvent]:
        return self._events.list_all()

    def add(self, event: CalendarEvent) -> CalendarEvent:
        require_non_empty(event.title, "Title")
        require_non_empty(event.date, "Date")
        event = replace(event, event_id=f"EVT-{uuid.uuid4().hex[:12]}")
        self._lock.run(lambda: self._events.add(event), LOCK_KEY)
        logger.info("Event %s published for %s", event.event_id, event.date)
        return event

    def update(self, event: CalendarEvent) -> None:
        if not self._events.exists():
            raise NotFoundError("Events registry missing")

        def _write() -> None:
            if not self._events.update(event):
                raise NotFoundError("Event ID not found")

        self._lock.run(_write, LOCK_KEY)

    def remove(self, event_id: str, *, deleted_by: Optional[str] = None) -> None:
        if not self._events.exists():
            raise NotFoundError("Events registry missing")

        def _write() -> None:
            if not self._events.remove(event_id, deleted_by=deleted_by or "System-Admin"):
                raise NotFoundError("Event not found")

        self._lock.run(_write, LOCK_KEY)
        logger.info("Event %s removed", event_id)
