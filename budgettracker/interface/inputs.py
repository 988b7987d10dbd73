"""Mini README: Parsing helpers for values typed into the shells.

Structure:
    * parse_amount / parse_limit - positive finite amounts and budget limits.
    * parse_date - ``YYYY-MM-DD`` dates, blank meaning today.
    * parse_month - ``YYYY-MM`` months, blank meaning the current month.
    * parse_transaction_type - menu digit to ``TransactionType``.
    * parse_menu_choice - menu digit to ``int`` (``-1`` when unreadable).

Each parser raises ``ValueError`` with a message fit to show the user.
Shells catch it and ask again; the finance core only ever sees values that
made it through here.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Optional, Tuple

from ..finance import TransactionType

DEFAULT_DATE_FORMAT = "%Y-%m-%d"

TRANSACTION_TYPE_CHOICES = {
    "1": TransactionType.INCOME,
    "2": TransactionType.EXPENSE,
}


def _parse_positive(text: str, noun: str) -> float:
    try:
        value = float(text.strip())
    except (ValueError, AttributeError) as error:
        raise ValueError("Invalid amount. Please enter a valid number.") from error
    if not math.isfinite(value):
        raise ValueError("Invalid amount. Please enter a valid number.")
    if value <= 0:
        raise ValueError(f"{noun} must be positive. Please try again.")
    return value


def parse_amount(text: str) -> float:
    """Parse a strictly positive transaction amount."""

    return _parse_positive(text, "Amount")


def parse_limit(text: str) -> float:
    """Parse a strictly positive budget limit."""

    return _parse_positive(text, "Limit")


def parse_date(
    text: str,
    *,
    today: Optional[date] = None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> date:
    """Parse a date, substituting ``today`` (default: the current date) for blank input."""

    if not text or not text.strip():
        return today or date.today()
    try:
        return datetime.strptime(text.strip(), date_format).date()
    except ValueError as error:
        raise ValueError(f"Invalid date format. Please use the {date_format} format.") from error


def parse_month(text: str, *, today: Optional[date] = None) -> Tuple[int, int]:
    """Parse ``YYYY-MM`` into ``(year, month)``; blank means the current month."""

    if not text or not text.strip():
        current = today or date.today()
        return current.year, current.month
    try:
        parsed = datetime.strptime(text.strip(), "%Y-%m")
    except ValueError as error:
        raise ValueError("Invalid month. Please use yyyy-MM format.") from error
    return parsed.year, parsed.month


def parse_transaction_type(choice: str) -> TransactionType:
    """Map the menu digit ``1`` or ``2`` onto a transaction type."""

    try:
        return TRANSACTION_TYPE_CHOICES[choice.strip()]
    except (KeyError, AttributeError) as error:
        raise ValueError("Invalid type. Please enter 1 for Income or 2 for Expense.") from error


def parse_menu_choice(text: str) -> int:
    """Return the chosen menu number, or ``-1`` when the text is not an integer."""

    try:
        return int(text.strip())
    except (ValueError, AttributeError):
        return -1
