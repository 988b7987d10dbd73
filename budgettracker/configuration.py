"""Mini README: Centralised configuration for the budget tracker.

Structure:
    * BudgetTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Shells and the CLI entry point call ``get_settings`` and pass the values
    they need (budget name, date format, currency symbol) into the ledger and
    renderers. The finance core never reads settings itself. Variables use
    the ``BUDGETTRACKER_`` prefix, e.g. ``BUDGETTRACKER_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BudgetTrackerSettings(BaseSettings):
    """Runtime configuration for the budget tracker."""

    default_budget_name: str = Field(
        "Default Budget",
        description="Name given to the budget every new ledger starts with.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts in console output.",
    )
    date_format: str = Field(
        "%Y-%m-%d",
        description="strptime pattern accepted for dates typed at the console.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logger level name (DEBUG, INFO, WARNING, ...).",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface the HTTP interface binds to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP interface exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "BUDGETTRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_log_level(cls, value: str) -> str:
        """Accept any casing but reject names the logging module does not know."""

        level_name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level: {value}")
        return level_name


@lru_cache()
def get_settings() -> BudgetTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetTrackerSettings()
