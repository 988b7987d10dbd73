"""Mini README: Interactive text menu over a finance ledger.

Structure:
    * MENU_OPTIONS - numbered menu entries shown on every loop.
    * ConsoleShell - reads choices, re-prompts on bad input and prints reports.

The shell receives its ledger from the caller instead of holding a global
one, and talks to the terminal only through the ``prompt`` and ``echo``
callables. They default to ``typer.prompt`` and ``typer.echo``; tests pass
scripted replacements. Options 1-8 follow the classic budget tracker menu;
9-12 expose the remaining ledger operations.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict, List, Optional

import typer

from ..finance import FinanceLedger, Transaction
from ..logging_utils import get_logger
from .inputs import (
    DEFAULT_DATE_FORMAT,
    parse_amount,
    parse_date,
    parse_limit,
    parse_menu_choice,
    parse_month,
    parse_transaction_type,
)

LOGGER = get_logger(__name__)

EXIT_CHOICE = 8

MENU_OPTIONS: Dict[int, str] = {
    1: "Add a transaction",
    2: "View all transactions",
    3: "View income/expense summary",
    4: "View expenses by category",
    5: "Set budget limit for category",
    6: "View budget",
    7: "Check budget status",
    8: "Exit",
    9: "Remove a transaction",
    10: "View monthly spending",
    11: "View transactions by category",
    12: "Remove budget limit for category",
}

TRANSACTION_HEADER = "Date       | Type       | Category        | Amount      | Description"
RULE = "-" * 74


def _default_prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


class ConsoleShell:
    """Menu-driven console front end for a single ledger."""

    def __init__(
        self,
        ledger: FinanceLedger,
        *,
        prompt: Optional[Callable[[str], str]] = None,
        echo: Optional[Callable[[str], None]] = None,
        currency_symbol: str = "$",
        date_format: str = DEFAULT_DATE_FORMAT,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.ledger = ledger
        self._prompt = prompt or _default_prompt
        self._echo = echo or typer.echo
        self.currency_symbol = currency_symbol
        self.date_format = date_format
        self._today = today or date.today
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.add_transaction,
            2: self.view_transactions,
            3: self.view_summary,
            4: self.view_category_expenses,
            5: self.set_budget_limit,
            6: self.view_budget,
            7: self.check_budget_status,
            9: self.remove_transaction,
            10: self.view_monthly_spending,
            11: self.view_transactions_by_category,
            12: self.remove_budget_limit,
        }

    def run(self) -> None:
        """Loop over the menu until the exit option is chosen."""

        self._echo("===== Budget Tracker =====")
        while True:
            self._print_menu()
            choice = parse_menu_choice(self._prompt("Enter your choice"))
            if choice == EXIT_CHOICE:
                break
            handler = self._handlers.get(choice)
            if handler is None:
                LOGGER.debug("Rejected menu choice %s", choice)
                self._echo("Invalid choice. Please try again.")
            else:
                handler()
            self._echo("")
        self._echo("Thank you for using Budget Tracker!")

    def _print_menu(self) -> None:
        self._echo("\nPlease select an option:")
        for number, label in MENU_OPTIONS.items():
            self._echo(f"{number}. {label}")

    def _ask(self, text: str, parser: Callable[[str], object]):
        """Prompt until ``parser`` accepts the answer."""

        while True:
            answer = self._prompt(text)
            try:
                return parser(answer)
            except ValueError as error:
                LOGGER.debug("Rejected input %r for %r: %s", answer, text, error)
                self._echo(str(error))

    def _money(self, amount: float) -> str:
        return f"{self.currency_symbol}{amount:.2f}"

    def _print_table(self, heading: str, rows: Dict[str, float]) -> None:
        self._echo(f"{'Category':<20}| {heading}")
        self._echo("-" * (22 + len(heading)))
        for category, amount in rows.items():
            self._echo(f"{category:<20}| {self._money(amount)}")

    def _print_transactions(
        self, transactions: List[Transaction], empty_message: str, *, numbered: bool = True
    ) -> None:
        """Print rows, prefixed with ledger positions when ``numbered``."""

        if not transactions:
            self._echo(empty_message)
            return
        self._echo(TRANSACTION_HEADER)
        self._echo(RULE)
        for index, transaction in enumerate(transactions):
            row = transaction.format_row(self.currency_symbol)
            self._echo(f"{index}. {row}" if numbered else row)

    def add_transaction(self) -> None:
        self._echo("\n=== Add Transaction ===")
        description = self._prompt("Enter description")
        amount = self._ask(f"Enter amount ({self.currency_symbol})", parse_amount)
        occurred_on = self._ask(
            "Enter date (yyyy-MM-dd) or leave blank for today",
            lambda text: parse_date(text, today=self._today(), date_format=self.date_format),
        )
        category = self._prompt("Enter category")
        transaction_type = self._ask(
            "Enter type (1 for Income, 2 for Expense)", parse_transaction_type
        )
        self.ledger.add_transaction(
            Transaction(
                description=description,
                amount=amount,
                occurred_on=occurred_on,
                category=category,
                transaction_type=transaction_type,
            )
        )
        self._echo("Transaction added successfully!")

    def view_transactions(self) -> None:
        self._echo("\n=== All Transactions ===")
        self._print_transactions(self.ledger.get_all_transactions(), "No transactions found.")

    def view_summary(self) -> None:
        self._echo("\n=== Income/Expense Summary ===")
        summary = self.ledger.summarise()
        self._echo(f"Total Income: {self._money(summary['total_income'])}")
        self._echo(f"Total Expenses: {self._money(summary['total_expenses'])}")
        self._echo(f"Balance: {self._money(summary['balance'])}")

    def view_category_expenses(self) -> None:
        self._echo("\n=== Expenses by Category ===")
        expenses = self.ledger.calculate_expenses_by_category()
        if not expenses:
            self._echo("No expenses found.")
            return
        self._print_table("Amount", expenses)

    def set_budget_limit(self) -> None:
        self._echo("\n=== Set Budget Limit ===")
        category = self._prompt("Enter category")
        limit = self._ask(f"Enter limit amount ({self.currency_symbol})", parse_limit)
        self.ledger.get_budget().set_category_limit(category, limit)
        self._echo("Budget limit set successfully!")

    def view_budget(self) -> None:
        self._echo("\n=== Budget ===")
        budget = self.ledger.get_budget()
        self._echo(budget.format_limits(self.currency_symbol))
        if not budget.get_all_category_limits():
            self._echo("No budget limits set yet.")

    def check_budget_status(self) -> None:
        self._echo("\n=== Budget Status ===")
        exceeded = self.ledger.check_budget_exceeded()
        if not exceeded:
            self._echo("All categories are within budget!")
            return
        self._echo("The following categories have exceeded their budget:")
        self._print_table("Exceeded By", exceeded)

    def remove_transaction(self) -> None:
        self._echo("\n=== Remove Transaction ===")
        index = parse_menu_choice(self._prompt("Enter transaction number"))
        if self.ledger.remove_transaction(index):
            self._echo("Transaction removed successfully!")
        else:
            self._echo("No transaction with that number.")

    def view_monthly_spending(self) -> None:
        self._echo("\n=== Monthly Spending ===")
        year, month = self._ask(
            "Enter month (yyyy-MM) or leave blank for this month",
            lambda text: parse_month(text, today=self._today()),
        )
        spending = self.ledger.calculate_monthly_spending(year, month)
        self._echo(f"Spending for {year:04d}-{month:02d}: {self._money(spending)}")

    def view_transactions_by_category(self) -> None:
        self._echo("\n=== Transactions by Category ===")
        category = self._prompt("Enter category")
        self._print_transactions(
            self.ledger.get_transactions_by_category(category),
            f"No transactions found for {category}.",
            numbered=False,
        )

    def remove_budget_limit(self) -> None:
        self._echo("\n=== Remove Budget Limit ===")
        category = self._prompt("Enter category")
        self.ledger.get_budget().remove_category_limit(category)
        self._echo("Budget limit removed.")
