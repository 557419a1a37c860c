# boekhouding/models/transaction.py
from __future__ import annotations

import math
import re
import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """2025-01-10T09:30:00.000Z"""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def coerce_amount(value: Any) -> float:
    """Numbers and numeric strings become floats; everything else becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        out = float(value)
    elif isinstance(value, str):
        try:
            out = float(value.strip() or "0")
        except ValueError:
            return 0.0
    else:
        return 0.0
    return out if math.isfinite(out) else 0.0


def coerce_date(value: Any) -> Optional[str]:
    """Returns the value if it is a real YYYY-MM-DD date, else None."""
    if not isinstance(value, str) or not ISO_DATE.match(value):
        return None
    try:
        date.fromisoformat(value)
    except ValueError:
        return None
    return value


def coerce_type(value: Any) -> str:
    return TransactionType.EXPENSE.value if value == TransactionType.EXPENSE.value else TransactionType.INCOME.value


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Transaction(_CamelModel):
    """A stored ledger entry. Serialized with camelCase keys (createdAt)."""

    id: str
    date: str
    description: str = ""
    amount: float
    type: Literal["income", "expense"]
    created_at: str

    @field_validator("amount")
    @classmethod
    def check_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("amount must be finite")
        return v

    @classmethod
    def from_stored(cls, raw: Mapping[str, Any]) -> Transaction:
        """
        Lenient view of a record read from disk. Never raises for a mapping:
        legacy dates and ids are kept as text, amount and type are coerced
        the same way as new input.
        """
        return cls(
            id=_text(raw.get("id")),
            date=_text(raw.get("date")),
            description=_text(raw.get("description")),
            amount=coerce_amount(raw.get("amount")),
            type=coerce_type(raw.get("type")),
            created_at=_text(raw.get("createdAt")),
        )

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE.value

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class TransactionIn(BaseModel):
    """
    Incoming POST payload. Never rejects a JSON object: every field falls back
    to a default (today, "", 0, income) instead of raising.
    """

    model_config = ConfigDict(extra="ignore")

    date: Optional[str] = None
    description: str = ""
    amount: float = 0.0
    type: Literal["income", "expense"] = "income"

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> Optional[str]:
        return coerce_date(v)

    @field_validator("description", mode="before")
    @classmethod
    def normalize_description(cls, v: Any) -> str:
        return _text(v)

    @field_validator("amount", mode="before")
    @classmethod
    def normalize_amount(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> str:
        return coerce_type(v)

    def to_transaction(self, now: Optional[datetime] = None) -> Transaction:
        now = now or _utcnow()
        return Transaction(
            id=uuid.uuid4().hex,
            date=self.date or now.astimezone(timezone.utc).date().isoformat(),
            description=self.description,
            amount=self.amount,
            type=self.type,
            created_at=iso_timestamp(now),
        )


class Summary(_CamelModel):
    total_income: float = 0.0
    total_expenses: float = 0.0
    result: float = 0.0

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
