"""Mini README: In-memory finance ledger with budget checks.

Structure:
    * FinanceLedger - owns the ordered transaction list and the active budget,
      and computes every summary the shells display.

The ledger is deliberately forgiving: positions outside the list, empty
filters and unknown categories all degrade to ``False``, empty lists or
``0.0`` instead of raising. Every getter hands back a fresh container so
callers can never mutate ledger state by accident.

Category matching is not uniform. ``get_transactions_by_category`` compares
case-insensitively, while ``calculate_expenses_by_category`` and therefore
``check_budget_exceeded`` group by the exact stored string. "Food" and
"food" are one category for filtering but two for spending totals.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from .budget import Budget
from .transaction import Transaction, TransactionType

LOGGER = get_logger(__name__)


class FinanceLedger:
    """Manage a sequence of transactions and a single budget."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        budget: Optional[Budget] = None,
    ) -> None:
        self._transactions: List[Transaction] = list(transactions or [])
        self._budget = budget if budget is not None else Budget()
        LOGGER.debug(
            "Finance ledger initialised with %s transactions and budget '%s'",
            len(self._transactions),
            self._budget.name,
        )

    def __len__(self) -> int:
        return len(self._transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction to the end of the ledger."""

        self._transactions.append(transaction)
        LOGGER.info(
            "Added %s of %.2f in %s",
            transaction.transaction_type.value,
            transaction.amount,
            transaction.category,
        )

    def remove_transaction(self, index: int) -> bool:
        """Remove the transaction at ``index`` and report whether it existed.

        Negative positions are rejected rather than counted from the end.
        """

        if 0 <= index < len(self._transactions):
            removed = self._transactions.pop(index)
            LOGGER.info("Removed transaction %s (%s)", index, removed.description)
            return True
        LOGGER.debug("Ignoring removal of out-of-range index %s", index)
        return False

    def get_all_transactions(self) -> List[Transaction]:
        """Return transactions in insertion order."""

        return list(self._transactions)

    def get_transactions_by_type(self, transaction_type: TransactionType) -> List[Transaction]:
        return [
            transaction
            for transaction in self._transactions
            if transaction.transaction_type is transaction_type
        ]

    def get_transactions_by_category(self, category: str) -> List[Transaction]:
        """Return transactions whose category matches ignoring case."""

        wanted = category.casefold()
        return [
            transaction
            for transaction in self._transactions
            if transaction.category.casefold() == wanted
        ]

    def get_transactions_by_date_range(self, start: date, end: date) -> List[Transaction]:
        """Return transactions dated between ``start`` and ``end`` inclusive."""

        return [
            transaction
            for transaction in self._transactions
            if start <= transaction.occurred_on <= end
        ]

    def calculate_total_income(self) -> float:
        return sum(
            (transaction.amount for transaction in self.get_transactions_by_type(TransactionType.INCOME)),
            0.0,
        )

    def calculate_total_expenses(self) -> float:
        return sum(
            (transaction.amount for transaction in self.get_transactions_by_type(TransactionType.EXPENSE)),
            0.0,
        )

    def calculate_balance(self) -> float:
        return self.calculate_total_income() - self.calculate_total_expenses()

    def calculate_expenses_by_category(self) -> Dict[str, float]:
        """Sum expenses per exact category string."""

        expenses_by_category: Dict[str, float] = {}
        for transaction in self.get_transactions_by_type(TransactionType.EXPENSE):
            current = expenses_by_category.get(transaction.category, 0.0)
            expenses_by_category[transaction.category] = current + transaction.amount
        return expenses_by_category

    def calculate_monthly_spending(self, year: int, month: int) -> float:
        """Sum expenses dated within the given calendar month (``month`` is 1-12)."""

        _, last_day = calendar.monthrange(year, month)
        start = date(year, month, 1)
        end = date(year, month, last_day)
        return sum(
            (
                transaction.amount
                for transaction in self.get_transactions_by_date_range(start, end)
                if transaction.is_expense
            ),
            0.0,
        )

    def check_budget_exceeded(self) -> Dict[str, float]:
        """Return categories spending over their limit, mapped to the overspend.

        Categories whose limit is zero or unset are never reported.
        """

        exceeded: Dict[str, float] = {}
        for category, expenses in self.calculate_expenses_by_category().items():
            limit = self._budget.get_category_limit(category)
            if limit > 0 and expenses > limit:
                exceeded[category] = expenses - limit
        if exceeded:
            LOGGER.info("Budget exceeded in %s categories: %s", len(exceeded), sorted(exceeded))
        return exceeded

    def get_budget(self) -> Budget:
        return self._budget

    def set_budget(self, budget: Budget) -> None:
        """Replace the active budget."""

        LOGGER.info("Replacing budget '%s' with '%s'", self._budget.name, budget.name)
        self._budget = budget

    def summarise(self) -> Dict[str, float]:
        """Aggregate headline totals for summary views."""

        total_income = self.calculate_total_income()
        total_expenses = self.calculate_total_expenses()
        return {
            "total_income": total_income,
            "total_expenses": total_expenses,
            "balance": total_income - total_expenses,
            "transaction_count": len(self._transactions),
        }
