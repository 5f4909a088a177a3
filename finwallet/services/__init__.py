"""Mini README: Application services for finwallet.

Exports ``FinanceService`` (all domain operations behind a session context)
and the report value objects it produces.
"""

from .finance import DEFAULT_TRANSFER_CATEGORY, FinanceService
from .reports import CategoryReport, FullReport
from .session import SessionContext

__all__ = [
    "CategoryReport",
    "DEFAULT_TRANSFER_CATEGORY",
    "FinanceService",
    "FullReport",
    "SessionContext",
]
