from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarEvent:
    event_id: str
    title: str
    date: str
    type: str
    audience: str = "all"

    @classmethod
    def from_row(cls, row: list[str]) -> "CalendarEvent":
        cells = list(row) + [""] * (5 - len(row))
        return cls(
            event_id=str(cells[0]),
            title=str(cells[1]),
            date=str(cells[2]),
            type=str(cells[3]).lower(),
            audience=str(cells[4] or "all"),
        )

    @classmethod
    def from_dict(cls, d: dict, *, event_id: str = "") -> "CalendarEvent":
        return cls(
            event_id=str(d.get("id") or event_id),
            title=str(d.get("title") or ""),
            date=str(d.get("date") or ""),
            type=str(d.get("type") or ""),
            audience=str(d.get("audience") or "all"),
        )

    def to_row(self) -> list[object]:
        return [self.event_id, self.title, self.date, self.type, self.audience]

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "title": self.title,
            "date": self.date,
            "type": self.type,
            "audience": self.audience,
        }
