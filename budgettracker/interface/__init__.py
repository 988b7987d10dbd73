"""Mini README: Interactive interfaces (console/web) for the budget tracker.

Exports the console menu shell and the FastAPI application factory. Both
validate user input with the helpers in ``inputs`` before calling the ledger.
"""

from .console import ConsoleShell
from .web_app import create_application

__all__ = ["ConsoleShell", "create_application"]
