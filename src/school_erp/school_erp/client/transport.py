from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Protocol

import requests

from ..api.router import ActionRouter

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Transport-level failure; the client turns it into an error envelope."""


class Transport(Protocol):
    @property
    def configured(self) -> bool:
        raise NotImplementedError

    def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class HttpTransport:
    """POST the payload as JSON to a single endpoint.

    The body goes out as ``text/plain`` so browsers and proxies treat it as a
    simple request; the server parses it regardless of content type.
    """

    def __init__(self, url: Optional[str], *, timeout: float = 30.0):
        self._url = (url or "").strip()
        self._timeout = float(timeout)

    @property
    def configured(self) -> bool:
        return bool(self._url)

    def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = requests.post(
                self._url,
                data=json.dumps(payload).encode("utf-8"),
                headers={"Content-Type": "text/plain;charset=utf-8"},
                timeout=self._timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Request %s to %s failed: %s", payload.get("action"), self._url, e)
            raise NetworkError(str(e)) from e
        if not isinstance(data, dict):
            raise NetworkError("Response is not a JSON object")
        return data


class LocalTransport:
    """Dispatch in-process; payloads still go through a JSON round trip."""

    def __init__(self, router: ActionRouter):
        self._router = router

    @property
    def configured(self) -> bool:
        return True

    def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            wire = json.loads(json.dumps(payload))
        except (TypeError, ValueError) as e:
            raise NetworkError(str(e)) from e
        return json.loads(json.dumps(self._router.dispatch(wire)))
