# boekhouding/services/ledger.py
from __future__ import annotations

import json
import threading
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, List, NamedTuple


from boekhouding.config import get_settings
from boekhouding.logging_setup import get_logger
from boekhouding.models.transaction import Transaction

log = get_logger(__name__)


class LedgerWrite(NamedTuple):
    """Collection after a mutation, and whether it reached the disk."""

    transactions: List[Transaction]
    saved: bool


class TransactionRepository:
    """
    The ledger as one JSON array file. Every call reads the file again, there
    is no in-memory cache. Read-modify-write cycles hold a per-repository lock
    so concurrent requests can't overwrite each other's changes.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def init_storage(self) -> None:
        """Creates the data directory and an empty ledger file if missing."""
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.write_text("[]", encoding="utf-8")
                log.info("Created empty ledger at %s", self.path)

    def load_all(self) -> List[Transaction]:
        with self._lock:
            return self._view(self._read())

    def save(self, transactions: Iterable[Transaction]) -> bool:
        with self._lock:
            return self._write([t.to_json() for t in transactions])

    def append(self, tx: Transaction) -> LedgerWrite:
        with self._lock:
            records = self._read()
            records.append(tx.to_json())
            saved = self._write(records)
        log.debug("Appended transaction %s (%s %.2f)", tx.id, tx.type, tx.amount)
        return LedgerWrite(self._view(records), saved)

    def remove_by_id(self, tx_id: str) -> LedgerWrite:
        with self._lock:
            records = self._read()
            kept = [
                r for r in records
                if not (isinstance(r, dict) and Transaction.from_stored(r).id == tx_id)
            ]
            saved = self._write(kept)
        if len(kept) == len(records):
            log.debug("Delete of unknown transaction id %r", tx_id)
        return LedgerWrite(self._view(kept), saved)

    # --- file access, caller holds the lock ---------------------------------
    # Records travel as the raw JSON values from disk, so entries written by
    # older versions go back into the file exactly as they came out.

    def _read(self) -> List[Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            log.error("Error reading transactions from %s", self.path, exc_info=True)
            return []
        if not isinstance(data, list):
            log.error("Ledger file %s does not hold a JSON array", self.path)
            return []
        return data

    def _view(self, records: List[Any]) -> List[Transaction]:
        out: List[Transaction] = []
        for i, raw in enumerate(records):
            if isinstance(raw, dict):
                out.append(Transaction.from_stored(raw))
            else:
                log.warning("Ledger record #%d is not an object, left untouched", i)
        return out

    def _write(self, records: List[Any]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            return True
        except OSError:
            log.error("Error writing transactions to %s", self.path, exc_info=True)
            return False


@lru_cache()
def get_ledger() -> TransactionRepository:
    """Process-wide repository (FastAPI dependency)."""
    return TransactionRepository(get_settings().transactions_file)
