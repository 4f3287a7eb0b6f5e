from __future__ import annotations

from ..api.envelope import success
from ..api.router import ActionRouter
from ..container import Container
from .model import Expense


def register(router: ActionRouter, container: Container) -> None:
    service = container.expense_service

    @router.action("getExpenses")
    def get_expenses(d: dict) -> dict:
        return success(service.summary().to_dict())

    @router.action("addExpense", writes=True)
    def add_expense(d: dict) -> dict:
        receipt = service.add(Expense.from_dict(d.get("expense") or {}))
        return success({"receiptNumber": receipt}, "Expense saved")

    @router.action("getNextExpenseReceiptNumber")
    def get_next_expense_receipt_number(d: dict) -> dict:
        return success(service.next_receipt_number())
