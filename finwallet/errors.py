"""Mini README: Exception hierarchy shared by the finwallet layers.

Structure:
    * FinwalletError - base class for every application specific error.
    * SessionStateError - a user or wallet scoped operation ran without the
      session context it requires.
    * UserNotAuthenticatedError / WalletNotSelectedError - concrete
      precondition failures raised by ``FinanceService``.

The console flow guarantees these never fire in normal use; when they do the
session loop persists state before propagating them.
"""

from __future__ import annotations


class FinwalletError(Exception):
    """Base class for finwallet errors."""


class SessionStateError(FinwalletError):
    """An operation was invoked without the session state it depends on."""


class UserNotAuthenticatedError(SessionStateError):
    """Raised when a user scoped operation runs before login."""

    def __init__(self) -> None:
        super().__init__("User not defined!")


class WalletNotSelectedError(SessionStateError):
    """Raised when a wallet scoped operation runs without an active wallet."""

    def __init__(self) -> None:
        super().__init__("Wallet not specified!")
