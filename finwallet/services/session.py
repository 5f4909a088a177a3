"""Mini README: Per-login session context.

Structure:
    * SessionContext - the authenticated user and the wallet currently in use.

A context is created on every successful sign-up or sign-in and discarded on
logout, so no session state outlives the login that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain import User, Wallet
from ..errors import WalletNotSelectedError


@dataclass(slots=True)
class SessionContext:
    """Authenticated user plus the optional active wallet."""

    user: User
    wallet: Optional[Wallet] = None

    def require_wallet(self) -> Wallet:
        if self.wallet is None:
            raise WalletNotSelectedError()
        return self.wallet
