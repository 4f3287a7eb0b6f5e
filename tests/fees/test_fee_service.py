from __future__ import annotations

import re
import uuid
from datetime import datetime

import pytest

from src.school_erp.school_erp.core.exceptions import ValidationError
from src.school_erp.school_erp.fees.receipts import ReceiptNumberGenerator


def test_partial_payments_reduce_dues(container, enrol, fixed_now):
    enrol("A1")
    svc = container.fee_service
    svc.record_payment("A1", 500, "Cash", now=fixed_now)
    svc.record_payment("A1", 300, "UPI", now=fixed_now)

    summary = svc.get_student_summary("A1", 1000)

    assert summary.paid_fees == 800
    assert summary.due_fees == 200
    assert [t.amount for t in summary.history] == [300, 500]


def test_overpayment_gives_negative_dues(container, enrol, fixed_now):
    enrol("A1")
    svc = container.fee_service
    svc.record_payment("A1", 2000, now=fixed_now)

    assert svc.get_student_summary("A1", 1000).due_fees == -1000


def test_receipt_numbers_are_prefixed_and_unique(container, enrol, fixed_now):
    enrol("A1")
    svc = container.fee_service

    receipts = {svc.record_payment("A1", 10, now=fixed_now) for _ in range(20)}

    assert len(receipts) == 20
    assert all(re.fullmatch(r"FE-[0-9A-F]{10}", r) for r in receipts)


def test_receipt_generator_redraws_on_collision():
    first = uuid.UUID("aaaaaaaa-aaaa-4aaa-8aaa-aaaaaaaaaaaa")
    ids = iter([first, first, uuid.UUID("bbbbbbbb-bbbb-4bbb-8bbb-bbbbbbbbbbbb")])
    gen = ReceiptNumberGenerator("FE-", id_factory=lambda: next(ids))
    taken = {gen.candidate()}

    assert gen.next(taken) == "FE-BBBBBBBBBB"


@pytest.mark.parametrize("amount", [0, -5, "abc", None, "nan", "inf", "1e400", float("nan")])
def test_non_positive_amounts_are_rejected(container, enrol, amount):
    enrol("A1")

    with pytest.raises(ValidationError):
        container.fee_service.record_payment("A1", amount)


def test_monthly_dashboard_counts_current_month_only(container, enrol):
    enrol("A1", name="Asha")
    svc = container.fee_service
    svc.record_payment("A1", 400, now=datetime(2024, 5, 31, 12, 0))
    svc.record_payment("A1", 250, now=datetime(2024, 6, 2, 12, 0))
    svc.record_payment("ZZ", 100, now=datetime(2024, 6, 3, 12, 0))

    dashboard = svc.get_monthly_dashboard(now=datetime(2024, 6, 15))

    assert dashboard.monthly_collection == 350
    recent = dashboard.recent_transactions
    assert recent[0]["studentName"] == "Unknown"
    assert recent[1]["studentName"] == "Asha"
    assert recent[1]["studentClass"] == "5-A"
