from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CalendarEvent


class EventRepository(Protocol):
    def exists(self) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[CalendarEvent]:
        raise NotImplementedError

    def add(self, event: CalendarEvent) -> None:
        raise NotImplementedError

    def update(self, event: CalendarEvent) -> bool:
        raise NotImplementedError

    def remove(self, event_id: str, *, deleted_by: Optional[str] = None) -> bool:
        """Archive then delete the event; False when the ID is unknown."""

        raise NotImplementedError
