from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .envelope import success


def register(app: Flask, container: Container) -> None:
    @app.route("/api", methods=["GET"], endpoint="api_status")
    def api_status():
        return jsonify(
            success(
                {"status": "active", "session": container.settings_service.active_year()},
                "School ERP API is online.",
            )
        )

    @app.route("/api", methods=["POST"], endpoint="api_dispatch")
    def api_dispatch():
        # Clients post JSON as text/plain, so parse regardless of content type.
        payload = request.get_json(force=True, silent=True)
        return jsonify(container.router.dispatch(payload))
