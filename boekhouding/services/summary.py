# boekhouding/services/summary.py
from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from boekhouding.models.transaction import Summary, Transaction, TransactionType, coerce_amount


def _fields(tx: Union[Transaction, Mapping[str, Any]]) -> tuple[Any, float]:
    if isinstance(tx, Transaction):
        return tx.type, tx.amount
    return tx.get("type"), coerce_amount(tx.get("amount"))


def calculate_summary(transactions: Iterable[Union[Transaction, Mapping[str, Any]]]) -> Summary:
    """
    Totals per type in one pass. Anything that is not an expense counts as
    income. Plain float addition, no rounding to cents.
    """
    income = 0.0
    expenses = 0.0
    for tx in transactions:
        kind, amount = _fields(tx)
        if kind == TransactionType.EXPENSE.value:
            expenses += amount
        else:
            income += amount
    return Summary(total_income=income, total_expenses=expenses, result=income - expenses)
