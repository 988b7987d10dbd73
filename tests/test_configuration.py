"""Mini README: Tests for settings and logging helpers."""

from __future__ import annotations

import logging

import pytest

from budgettracker.configuration import BudgetTrackerSettings
from budgettracker.logging_utils import configure_root_logger, get_logger


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables with the project prefix override defaults."""

    monkeypatch.setenv("BUDGETTRACKER_DEFAULT_BUDGET_NAME", "Household")
    monkeypatch.setenv("BUDGETTRACKER_LOG_LEVEL", "debug")

    settings = BudgetTrackerSettings()

    assert settings.default_budget_name == "Household"
    assert settings.log_level == "DEBUG"
    assert settings.currency_symbol == "$"


def test_settings_reject_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUDGETTRACKER_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        BudgetTrackerSettings()


def test_configure_root_logger_does_not_stack_handlers() -> None:
    """Repeat configuration only changes the level."""

    configure_root_logger()
    handler_count = len(logging.getLogger().handlers)
    configure_root_logger("WARNING")

    assert len(logging.getLogger().handlers) == handler_count
    assert logging.getLogger().level == logging.WARNING
    configure_root_logger(logging.INFO)


def test_get_logger_keeps_configured_level() -> None:
    """Loggers created after the entry point sets a level do not reset it."""

    configure_root_logger("DEBUG")
    try:
        get_logger("budgettracker.late_module")
        configure_root_logger()

        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_root_logger(logging.INFO)
