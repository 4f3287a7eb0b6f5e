from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import Homework


class HomeworkRepository(Protocol):
    def list_for_class(self, class_name: str, section: str) -> Sequence[Homework]:
        raise NotImplementedError

    def add_many(self, class_name: str, section: str, items: Iterable[Homework]) -> int:
        raise NotImplementedError

    def delete(self, homework_id: str) -> bool:
        raise NotImplementedError
