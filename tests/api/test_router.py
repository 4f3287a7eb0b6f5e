from __future__ import annotations

from src.school_erp.school_erp.api.envelope import error, success
from src.school_erp.school_erp.api.router import ActionRouter
from src.school_erp.school_erp.core.exceptions import ValidationError


def test_unknown_action_names_the_action(router):
    res = router.dispatch({"action": "doMagic"})

    assert res == {"success": False, "message": "Invalid action: doMagic"}


def test_missing_payload_is_reported():
    assert ActionRouter().dispatch(None)["message"] == "No payload received"
    assert ActionRouter().dispatch({})["message"] == "No payload received"


def test_domain_errors_keep_their_message():
    router = ActionRouter()

    @router.action("fail")
    def _fail(d):
        raise ValidationError("Amount must be greater than zero")

    assert router.dispatch({"action": "fail"}) == {"success": False, "message": "Amount must be greater than zero"}


def test_unexpected_errors_become_server_exceptions():
    router = ActionRouter()

    @router.action("boom")
    def _boom(d):
        raise KeyError("x")

    res = router.dispatch({"action": "boom"})
    assert res["success"] is False
    assert res["message"].startswith("Server Exception: ")


def test_write_callbacks_run_only_after_successful_writes():
    calls = []
    router = ActionRouter(on_write=[lambda: calls.append("cleared")])
    router.add("read", lambda d: success([]))
    router.add("save", lambda d: success(None, "Saved"), writes=True)
    router.add("reject", lambda d: error("nope"), writes=True)

    router.dispatch({"action": "read"})
    router.dispatch({"action": "reject"})
    assert calls == []

    router.dispatch({"action": "save"})
    assert calls == ["cleared"]


def test_envelope_messages_are_always_strings():
    assert success({"a": 1}, {"detail": "x"})["message"] == '{"detail": "x"}'
    assert success()["message"] == ""
    assert error(None)["message"] == "An unknown error occurred"


def test_export_without_data_is_a_successful_empty_string(router):
    res = router.dispatch({"action": "exportAttendanceCSV", "class": "5", "section": "A"})

    assert res == {"success": True, "data": "", "message": "No data found for this class"}


def test_catalog_covers_every_feature(router):
    expected = {
        "login", "getStats", "getEvents", "getStudents", "markAttendance", "collectFee",
        "createExam", "getEmployees", "submitStaffAttendance", "saveSchedule", "addExpense",
        "saveUserAccess", "getSystemConfig", "getHomework",
    }

    assert expected <= set(router.actions)
