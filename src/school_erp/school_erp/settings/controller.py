from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container


def register(router: ActionRouter, container: Container) -> None:
    service = container.settings_service

    @router.action("getSystemConfig")
    def get_system_config(d: dict) -> dict:
        return success({"activeYear": service.active_year()})

    @router.action("updateSystemConfig", writes=True)
    def update_system_config(d: dict) -> dict:
        return success({"activeYear": service.update_active_year(d.get("activeYear"))}, "Session updated")
