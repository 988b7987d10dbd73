"""Mini README: Core package initializer for the budget tracker.

This module exposes convenience imports so callers can reach the logger
factory and the finance ledger without knowing the module layout. It stays
free of web or CLI imports so the finance core can be used on its own.
"""

from .finance import FinanceLedger
from .logging_utils import get_logger

__all__ = ["FinanceLedger", "get_logger"]
