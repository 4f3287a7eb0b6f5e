from __future__ import annotations

import json
from typing import Any


def _as_message(msg: Any) -> str:
    if msg is None or msg == "":
        return ""
    if isinstance(msg, (dict, list)):
        return json.dumps(msg)
    return str(msg)


def success(data: Any = None, message: Any = "") -> dict:
    return {"success": True, "data": data, "message": _as_message(message)}


def error(message: Any = "Unknown error") -> dict:
    return {"success": False, "message": _as_message(message) or "An unknown error occurred"}
