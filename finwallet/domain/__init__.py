"""Mini README: Domain model for personal wallets.

This package holds the in-memory object graph: users own wallets, wallets
own income and expense categories and keep a balance consistent with them.
Modules here do no I/O; persistence lives in ``finwallet.storage`` and user
interaction in ``finwallet.interface``.
"""

from .categories import ExpenseCategory, IncomeCategory
from .notices import Notice, NoticeKind, OperationResult
from .user import User
from .wallet import Wallet

__all__ = [
    "ExpenseCategory",
    "IncomeCategory",
    "Notice",
    "NoticeKind",
    "OperationResult",
    "User",
    "Wallet",
]
