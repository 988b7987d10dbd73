"""Mini README: Finance core of the budget tracker.

This package holds the in-memory ledger, its transactions and the budget of
per-category limits. Nothing here performs I/O or reads configuration;
console and HTTP shells validate input, call into the ledger and render the
results it returns.
"""

from .budget import Budget
from .ledger import FinanceLedger
from .transaction import Transaction, TransactionType

__all__ = ["Budget", "FinanceLedger", "Transaction", "TransactionType"]
