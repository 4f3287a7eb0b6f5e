from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    def get(self, prop: str) -> Optional[str]:
        raise NotImplementedError

    def put(self, prop: str, value: str) -> None:
        raise NotImplementedError
