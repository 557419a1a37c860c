from boekhouding.models.transaction import (
    Summary,
    Transaction,
    TransactionIn,
    TransactionType,
)

__all__ = ["Summary", "Transaction", "TransactionIn", "TransactionType"]
