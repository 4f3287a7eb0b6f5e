from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Optional

from ..core.exceptions import DomainError
from .envelope import error

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], dict]


class ActionRouter:
    """Dispatch ``{"action": name, ...fields}`` payloads to handler functions.

    Every outcome is a ``{success, data?, message}`` envelope: domain errors
    carry their own message, anything unexpected is logged and reported as a
    generic server exception.
    """

    def __init__(self, *, on_write: Iterable[Callable[[], None]] = ()):
        self._handlers: dict[str, Handler] = {}
        self._writes: set[str] = set()
        self._on_write = list(on_write)

    def add(self, name: str, handler: Handler, *, writes: bool = False) -> None:
        if name in self._handlers:
            raise ValueError(f"Action already registered: {name}")
        self._handlers[name] = handler
        if writes:
            self._writes.add(name)

    def action(self, name: str, *, writes: bool = False):
        def decorator(fn: Handler) -> Handler:
            self.add(name, fn, writes=writes)
            return fn

        return decorator

    def on_write(self, callback: Callable[[], None]) -> None:
        self._on_write.append(callback)

    @property
    def actions(self) -> list[str]:
        return sorted(self._handlers)

    def is_write(self, name: str) -> bool:
        return name in self._writes

    def dispatch(self, payload: Optional[Dict[str, Any]]) -> dict:
        if not payload or not isinstance(payload, dict):
            return error("No payload received")

        name = payload.get("action")
        handler = self._handlers.get(str(name)) if name else None
        if handler is None:
            return error(f"Invalid action: {name}")

        try:
            result = handler(payload)
        except DomainError as e:
            logger.info("Action %s rejected: %s", name, e)
            return error(str(e))
        except Exception as e:
            logger.exception("Action %s failed", name)
            return error(f"Server Exception: {e}")

        if result.get("success") and name in self._writes:
            for callback in self._on_write:
                callback()
        return result
