"""Mini README: FastAPI JSON interface over a finance ledger.

Structure:
    * create_application - application factory wiring ledger routes.
    * _transaction_payload / _restrict - response and filtering helpers.

Every route delegates to one ``FinanceLedger`` created per application (or
injected by the caller). Form and path validation happen here, so the
ledger only receives clean values. Transactions are addressed by their
position in the ledger, the same numbering the console menu shows.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from fastapi import FastAPI, Form, HTTPException, Path, Query
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..finance import Budget, FinanceLedger, Transaction, TransactionType
from ..logging_utils import get_logger
from .inputs import parse_date

LOGGER = get_logger(__name__)

IndexedTransactions = List[Tuple[int, Transaction]]


def _transaction_payload(index: int, transaction: Transaction) -> Dict[str, object]:
    payload = transaction.as_dict()
    payload["index"] = index
    return payload


def _restrict(entries: IndexedTransactions, matches: Iterable[Transaction]) -> IndexedTransactions:
    """Keep only entries whose transaction object appears in ``matches``."""

    wanted = {id(transaction) for transaction in matches}
    return [(index, transaction) for index, transaction in entries if id(transaction) in wanted]


def create_application(ledger: Optional[FinanceLedger] = None) -> FastAPI:
    """Create the FastAPI application bound to ``ledger`` (a fresh one by default)."""

    settings = get_settings()
    if ledger is None:
        ledger = FinanceLedger(budget=Budget(settings.default_budget_name))
    app = FastAPI(title="Budget Tracker", version="0.1.0")
    app.state.ledger = ledger

    @app.get("/transactions")
    async def list_transactions(
        transaction_type: Optional[TransactionType] = Query(None),
        category: Optional[str] = Query(None),
        start: Optional[date] = Query(None),
        end: Optional[date] = Query(None),
    ) -> JSONResponse:
        """Return transactions with their positions, optionally filtered."""

        entries: IndexedTransactions = list(enumerate(ledger.get_all_transactions()))
        if transaction_type is not None:
            entries = _restrict(entries, ledger.get_transactions_by_type(transaction_type))
        if category is not None:
            entries = _restrict(entries, ledger.get_transactions_by_category(category))
        if start is not None or end is not None:
            entries = _restrict(
                entries,
                ledger.get_transactions_by_date_range(start or date.min, end or date.max),
            )
        LOGGER.debug("Returning %s of %s transactions", len(entries), len(ledger))
        return JSONResponse(
            {"transactions": [_transaction_payload(index, item) for index, item in entries]}
        )

    @app.post("/transactions", status_code=201)
    async def add_transaction(
        description: str = Form(...),
        amount: float = Form(..., gt=0, allow_inf_nan=False),
        category: str = Form(...),
        transaction_type: str = Form(...),
        occurred_on: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Record a new transaction; type names ignore case and a missing date means today."""

        try:
            parsed_type = TransactionType.from_str(transaction_type)
            parsed_date = parse_date(occurred_on or "", date_format=settings.date_format)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        transaction = Transaction(
            description=description,
            amount=amount,
            occurred_on=parsed_date,
            category=category,
            transaction_type=parsed_type,
        )
        ledger.add_transaction(transaction)
        return JSONResponse(_transaction_payload(len(ledger) - 1, transaction), status_code=201)

    @app.delete("/transactions/{index}")
    async def remove_transaction(index: int) -> JSONResponse:
        """Remove the transaction at ``index``."""

        if not ledger.remove_transaction(index):
            raise HTTPException(status_code=404, detail=f"No transaction at position {index}")
        return JSONResponse({"removed": index, "remaining": len(ledger)})

    @app.get("/summary")
    async def summary() -> JSONResponse:
        return JSONResponse(ledger.summarise())

    @app.get("/expenses/by-category")
    async def expenses_by_category() -> JSONResponse:
        return JSONResponse({"expenses": ledger.calculate_expenses_by_category()})

    @app.get("/spending/{year}/{month}")
    async def monthly_spending(
        year: int = Path(..., ge=1, le=9999),
        month: int = Path(..., ge=1, le=12),
    ) -> JSONResponse:
        """Return total expenses for one calendar month."""

        spending = ledger.calculate_monthly_spending(year, month)
        return JSONResponse({"year": year, "month": month, "spending": spending})

    @app.get("/budget")
    async def view_budget() -> JSONResponse:
        return JSONResponse(ledger.get_budget().as_dict())

    @app.put("/budget/limits/{category}")
    async def set_budget_limit(
        category: str,
        limit: float = Form(..., gt=0, allow_inf_nan=False),
    ) -> JSONResponse:
        """Insert or overwrite a category limit."""

        budget = ledger.get_budget()
        budget.set_category_limit(category, limit)
        LOGGER.info("Limit for %s set to %.2f via HTTP", category, limit)
        return JSONResponse(budget.as_dict())

    @app.delete("/budget/limits/{category}")
    async def remove_budget_limit(category: str) -> JSONResponse:
        """Remove a category limit, reporting 404 when none was set."""

        budget = ledger.get_budget()
        if category not in budget.get_all_category_limits():
            raise HTTPException(status_code=404, detail=f"No limit set for {category}")
        budget.remove_category_limit(category)
        return JSONResponse(budget.as_dict())

    @app.get("/budget/exceeded")
    async def budget_exceeded() -> JSONResponse:
        return JSONResponse({"exceeded": ledger.check_budget_exceeded()})

    return app
