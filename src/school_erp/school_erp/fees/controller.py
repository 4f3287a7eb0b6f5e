from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container


def register(router: ActionRouter, container: Container) -> None:
    service = container.fee_service

    @router.action("getFeeDashboard")
    def get_fee_dashboard(d: dict) -> dict:
        return success(service.get_monthly_dashboard().to_dict())

    @router.action("getStudentFees")
    def get_student_fees(d: dict) -> dict:
        return success(service.get_student_summary(d.get("admissionNo"), d.get("totalFees")).to_dict())

    @router.action("collectFee", writes=True)
    def collect_fee(d: dict) -> dict:
        receipt = service.record_payment(d.get("admissionNo"), d.get("amount"), d.get("mode"), d.get("remarks"))
        return success({"receiptNo": receipt}, "Payment recorded")
