"""Mini README: Named collection of per-category spending limits.

Structure:
    * Budget - maps category names to limits and renders them for display.

Limits are keyed by the exact category string supplied; no case folding
happens here. A category without an entry reports a limit of ``0.0``, which
the ledger reads as "no limit" rather than "nothing may be spent".
"""

from __future__ import annotations

from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_BUDGET_NAME = "Default Budget"


class Budget:
    """Spending limits grouped under a display name."""

    def __init__(self, name: str = DEFAULT_BUDGET_NAME, limits: Optional[Dict[str, float]] = None) -> None:
        self.name = name
        self._category_limits: Dict[str, float] = dict(limits or {})

    def set_category_limit(self, category: str, limit: float) -> None:
        """Insert or overwrite the limit for ``category``.

        No range check is applied. A zero or negative limit is stored as given
        and behaves like an unset limit when budgets are checked.
        """

        self._category_limits[category] = limit
        LOGGER.debug("Budget '%s' limit for %s set to %.2f", self.name, category, limit)

    def get_category_limit(self, category: str) -> float:
        """Return the stored limit, or ``0.0`` when none is set."""

        return self._category_limits.get(category, 0.0)

    def remove_category_limit(self, category: str) -> None:
        """Drop the limit for ``category`` if present."""

        if self._category_limits.pop(category, None) is not None:
            LOGGER.debug("Budget '%s' limit for %s removed", self.name, category)

    def get_all_category_limits(self) -> Dict[str, float]:
        """Return a copy of every category limit."""

        return dict(self._category_limits)

    def as_dict(self) -> Dict[str, object]:
        return {"name": self.name, "limits": self.get_all_category_limits()}

    def format_limits(self, currency_symbol: str = "$") -> str:
        """Render the budget name followed by one padded line per limit."""

        lines = [f"Budget: {self.name}"]
        for category, limit in self._category_limits.items():
            lines.append(f"  {category:<15}: {currency_symbol}{limit:.2f}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format_limits()
