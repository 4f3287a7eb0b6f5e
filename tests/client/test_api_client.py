from __future__ import annotations

import pytest
import requests

from src.school_erp.school_erp.client.api_client import (
    CACHE_PREFIX,
    NETWORK_ERROR,
    NOT_CONFIGURED,
    SchoolApiClient,
    cache_key,
    normalize_response,
)
from src.school_erp.school_erp.client.transport import HttpTransport, LocalTransport, NetworkError
from src.school_erp.school_erp.common.ttl_cache import TTLCache


class FakeTransport:
    def __init__(self, responses=None, *, configured=True):
        self.sent = []
        self._responses = list(responses or [])
        self.configured = configured

    def send(self, payload):
        self.sent.append(payload)
        res = self._responses.pop(0) if self._responses else {"success": True, "data": len(self.sent)}
        if isinstance(res, Exception):
            raise res
        return res


class ManualClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def deferred():
    return []


def _client(transport, jobs, clock=None):
    cache = TTLCache(1800, clock=clock) if clock else TTLCache(1800)
    return SchoolApiClient(transport, cache=cache, background=jobs.append)


def test_cache_key_is_stable_and_prefixed():
    a = cache_key("getStudents", {"role": "ADMIN", "assignedClass": "5"})
    b = cache_key("getStudents", {"assignedClass": "5", "role": "ADMIN"})

    assert a == b
    assert a.startswith(CACHE_PREFIX)
    assert len(a) == len(CACHE_PREFIX) + 32
    assert cache_key("getStudents", {"role": "TEACHER"}) != a


def test_fresh_hit_returns_cached_data_and_refreshes_in_background(deferred):
    transport = FakeTransport([{"success": True, "data": ["first"]}, {"success": True, "data": ["second"]}])
    client = _client(transport, deferred)

    assert client.get_events()["data"] == ["first"]
    cached = client.get_events()

    assert cached == {"success": True, "data": ["first"], "message": ""}
    assert len(transport.sent) == 1
    assert len(deferred) == 1

    deferred.pop()()
    assert client.get_events()["data"] == ["second"]


def test_expired_entries_are_fetched_synchronously(deferred):
    clock = ManualClock()
    transport = FakeTransport()
    client = _client(transport, deferred, clock)

    client.get_stats()
    clock.now += 1801
    res = client.get_stats()

    assert res["data"] == 2
    assert deferred == []


def test_successful_write_clears_the_cache(deferred):
    transport = FakeTransport()
    client = _client(transport, deferred)
    client.get_events()

    client.add_event({"title": "Sports Day", "date": "2024-06-10", "type": "event"})
    client.get_events()

    assert [p["action"] for p in transport.sent] == ["getEvents", "addEvent", "getEvents"]
    assert deferred == []


def test_refresh_started_before_a_write_does_not_repopulate_the_cache(deferred):
    transport = FakeTransport(
        [
            {"success": True, "data": ["before"]},
            {"success": True, "data": None},
            {"success": True, "data": ["stale"]},
            {"success": True, "data": ["after"]},
        ]
    )
    client = _client(transport, deferred)
    client.get_events()
    client.get_events()
    refresh = deferred.pop()

    client.add_event({"title": "Sports Day", "date": "2024-06-10", "type": "event"})
    refresh()

    assert client.get_events()["data"] == ["after"]
    assert [p["action"] for p in transport.sent] == ["getEvents", "addEvent", "getEvents", "getEvents"]


def test_failed_write_keeps_the_cache(deferred):
    transport = FakeTransport([{"success": True, "data": []}, {"success": False, "message": "Event not found"}])
    client = _client(transport, deferred)
    client.get_events()

    assert client.remove_event("EVT-x")["message"] == "Event not found"
    client.get_events()
    assert len(transport.sent) == 2


def test_transport_failure_becomes_network_error_envelope(deferred):
    client = _client(FakeTransport([NetworkError("timed out")]), deferred)

    assert client.get_stats() == {"success": False, "message": NETWORK_ERROR}


def test_unconfigured_endpoint_short_circuits(deferred):
    transport = FakeTransport(configured=False)

    res = _client(transport, deferred).login("admin", "pw")

    assert res == {"success": False, "message": NOT_CONFIGURED}
    assert transport.sent == []
    assert HttpTransport("").configured is False


def test_http_transport_maps_connection_failures(monkeypatch, deferred):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "post", refuse)
    client = _client(HttpTransport("http://erp.invalid/api"), deferred)

    assert client.get_events() == {"success": False, "message": NETWORK_ERROR}


def test_messages_are_normalised():
    assert normalize_response({"success": True, "message": {"a": 1}})["message"] == '{"a": 1}'
    assert normalize_response({"success": True})["message"] == ""
    assert normalize_response({"success": False, "message": None})["message"] == ""


def test_local_transport_dispatches_in_process(container, enrol):
    enrol("A1", name="Asha")
    client = SchoolApiClient(LocalTransport(container.router), background=lambda fn: None)

    res = client.get_student_details("A1")

    assert res["success"] is True
    assert res["data"]["name"] == "Asha"
    assert client.get_student_details("ghost") == {"success": False, "message": "Not found"}
