"""Mini README: Tests for the Budget and Transaction value types.

Covers limit storage semantics, defensive copies and the fixed-width
renderings used by the console menu.
"""

from __future__ import annotations

from datetime import date

import pytest

from budgettracker.finance import Budget, Transaction, TransactionType


def test_category_limit_round_trip() -> None:
    """Setting then removing a limit returns to the implicit zero."""

    budget = Budget()
    budget.set_category_limit("Food", 100.0)
    assert budget.get_category_limit("Food") == 100.0

    budget.remove_category_limit("Food")
    assert budget.get_category_limit("Food") == 0.0


def test_limits_are_case_sensitive_and_overwritable() -> None:
    """Limits are keyed by the exact string and later values win."""

    budget = Budget()
    budget.set_category_limit("Food", 100.0)
    budget.set_category_limit("Food", 80.0)

    assert budget.get_category_limit("Food") == 80.0
    assert budget.get_category_limit("food") == 0.0


def test_remove_unknown_limit_is_a_no_op() -> None:
    """Removing a limit that was never set does nothing."""

    budget = Budget(limits={"Rent": 900.0})
    budget.remove_category_limit("Travel")

    assert budget.get_all_category_limits() == {"Rent": 900.0}


def test_initial_limits_are_copied() -> None:
    """The budget keeps its own copy of the mapping it was built from."""

    limits = {"Rent": 900.0}
    budget = Budget(limits=limits)
    limits["Rent"] = 1.0

    assert budget.get_category_limit("Rent") == 900.0


def test_budget_rendering_lists_limits() -> None:
    """The text form shows the name and padded, two-decimal limits."""

    budget = Budget("Household")
    budget.set_category_limit("Food", 100.0)

    assert str(budget) == "Budget: Household\n  Food           : $100.00\n"
    assert budget.format_limits("€").endswith("€100.00\n")


def test_transaction_type_parsing() -> None:
    """Types accept any casing and reject unknown names."""

    assert TransactionType.from_str(" Income ") is TransactionType.INCOME
    assert TransactionType.EXPENSE.label == "Expense"
    with pytest.raises(ValueError):
        TransactionType.from_str("transfer")


def test_transaction_row_is_fixed_width() -> None:
    """Rows pad each column so they line up under the console header."""

    transaction = Transaction(
        description="Groceries",
        amount=150.0,
        occurred_on=date(2024, 1, 10),
        category="Food",
        transaction_type=TransactionType.EXPENSE,
    )

    assert str(transaction) == (
        "2024-01-10 | Expense    | Food            | $150.00     | Groceries"
    )
    assert transaction.as_dict()["occurred_on"] == "2024-01-10"
    assert transaction.as_dict()["transaction_type"] == "expense"
