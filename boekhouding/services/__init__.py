from boekhouding.services.ledger import LedgerWrite, TransactionRepository, get_ledger
from boekhouding.services.sheets import SheetRepository, get_sheets, sanitize_slug
from boekhouding.services.summary import calculate_summary

__all__ = [
    "LedgerWrite",
    "SheetRepository",
    "TransactionRepository",
    "calculate_summary",
    "get_ledger",
    "get_sheets",
    "sanitize_slug",
]
