"""Mini README: User accounts and their wallets.

Structure:
    * User - login credentials plus an ordered collection of uniquely named
      wallets.

Credentials are stored and compared as plain text; this is a single-user
console tracker, not an authentication system.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .categories import validate_name
from .wallet import Wallet


class User:
    """A registered account owning zero or more wallets."""

    def __init__(self, login: str, password: str, wallets: Iterable[Wallet] = ()) -> None:
        self._login = validate_name(login, label="Login")
        self._password = password
        self._wallets: List[Wallet] = []
        for wallet in wallets:
            if self.get_wallet(wallet.name) is not None:
                raise ValueError(f"Duplicate wallet '{wallet.name}' for user '{login}'")
            self._wallets.append(wallet)

    @property
    def login(self) -> str:
        return self._login

    @property
    def password(self) -> str:
        return self._password

    @property
    def wallets(self) -> List[Wallet]:
        return list(self._wallets)

    def wallet_names(self) -> List[str]:
        return [wallet.name for wallet in self._wallets]

    def check_password(self, password: str) -> bool:
        return self._password == password

    def get_wallet(self, name: str) -> Optional[Wallet]:
        return next((w for w in self._wallets if w.name == name), None)

    def add_wallet(self, name: str) -> Optional[Wallet]:
        """Append a new empty wallet; ``None`` when the name is taken."""

        if self.get_wallet(name) is not None:
            return None
        wallet = Wallet(name)
        self._wallets.append(wallet)
        return wallet

    def remove_wallet(self, name: str) -> bool:
        wallet = self.get_wallet(name)
        if wallet is None:
            return False
        self._wallets.remove(wallet)
        return True

    def __repr__(self) -> str:
        return f"User(login={self._login!r}, wallets={self.wallet_names()!r})"
