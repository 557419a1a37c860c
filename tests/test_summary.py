from datetime import datetime, timezone

from boekhouding.models.transaction import TransactionIn
from boekhouding.services.summary import calculate_summary

NOW = datetime(2025, 1, 10, tzinfo=timezone.utc)


def _tx(amount, kind):
    return TransactionIn.model_validate({"amount": amount, "type": kind}).to_transaction(NOW)


def test_empty_ledger_is_all_zero():
    s = calculate_summary([])
    assert (s.total_income, s.total_expenses, s.result) == (0.0, 0.0, 0.0)


def test_income_and_expenses():
    s = calculate_summary([_tx(150.5, "income"), _tx(50, "expense"), _tx(25, "expense"), _tx(10, "income")])
    assert s.total_income == 160.5
    assert s.total_expenses == 75.0
    assert s.result == s.total_income - s.total_expenses == 85.5


def test_negative_result():
    s = calculate_summary([_tx(10, "income"), _tx(30, "expense")])
    assert s.result == -20.0


def test_plain_float_addition_without_rounding():
    s = calculate_summary([_tx(0.1, "income"), _tx(0.2, "income")])
    assert s.total_income == 0.1 + 0.2
    assert s.total_income != 0.3


def test_accepts_plain_mappings():
    s = calculate_summary([
        {"type": "income", "amount": 100},
        {"type": "expense", "amount": "40"},
        {"type": "whatever", "amount": 5},
        {"amount": None},
    ])
    assert s.total_income == 105.0
    assert s.total_expenses == 40.0
    assert s.result == 65.0


def test_single_pass_over_iterator():
    s = calculate_summary(_tx(1, "income") for _ in range(3))
    assert s.total_income == 3.0
