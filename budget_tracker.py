"""Mini README: Entry point CLI for the budget tracker.

This script exposes a Typer CLI with two commands: ``menu`` starts the
interactive console over a fresh in-memory ledger, and ``serve`` launches the
FastAPI interface with uvicorn. Both read defaults from environment-aware
settings and configure logging before doing anything else.
"""

from __future__ import annotations

import typer
import uvicorn

from budgettracker.configuration import get_settings
from budgettracker.finance import Budget, FinanceLedger
from budgettracker.interface import ConsoleShell
from budgettracker.logging_utils import configure_root_logger

cli = typer.Typer(help="Track income, expenses and category budgets.")


@cli.command()
def menu(
    budget_name: str = typer.Option(None, help="Name for the session's budget."),
) -> None:
    """Run the interactive text menu. All data is lost on exit."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    ledger = FinanceLedger(budget=Budget(budget_name or settings.default_budget_name))
    shell = ConsoleShell(
        ledger,
        currency_symbol=settings.currency_symbol,
        date_format=settings.date_format,
    )
    shell.run()


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI interface using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Budget Tracker on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "budgettracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
