from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container


def register(router: ActionRouter, container: Container) -> None:
    service = container.dashboard_service

    # Any successful write may change the headline numbers.
    router.on_write(service.invalidate)

    @router.action("getStats")
    def get_stats(d: dict) -> dict:
        return success(service.stats())
