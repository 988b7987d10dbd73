"""Mini README: Transaction value types for the finance ledger.

Structure:
    * TransactionType - enum distinguishing income from expense entries.
    * Transaction - immutable dataclass describing a single money movement.

Transactions are plain value holders. Amounts are expected to be positive,
but that is checked by whichever shell builds the transaction, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        """Title-cased label used when rendering rows."""

        return self.value.capitalize()

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(slots=True, frozen=True)
class Transaction:
    """Record of income or spending on a given day.

    ``amount`` must be greater than zero for totals and budget checks to be
    meaningful; callers validate it before constructing the record.
    """

    description: str
    amount: float
    occurred_on: date
    category: str
    transaction_type: TransactionType

    @property
    def is_expense(self) -> bool:
        return self.transaction_type is TransactionType.EXPENSE

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "description": self.description,
            "amount": self.amount,
            "occurred_on": self.occurred_on.isoformat(),
            "category": self.category,
            "transaction_type": self.transaction_type.value,
        }

    def format_row(self, currency_symbol: str = "$") -> str:
        """Render a fixed-width ``date | type | category | amount | description`` row."""

        amount_text = f"{self.amount:.2f}"
        return (
            f"{self.occurred_on.isoformat():<10} | {self.transaction_type.label:<10} | "
            f"{self.category:<15} | {currency_symbol}{amount_text:<10} | {self.description}"
        )

    def __str__(self) -> str:
        return self.format_row()
