"""Mini README: Literal console command tokens.

Tokens are case-sensitive and read one per line. ``MENU``, ``LOG_OFF`` and
``EXIT`` are global and recognised at every prompt; ``SIGN_UP`` and
``SIGN_IN`` are only meaningful on the welcome screen; ``ALL_CATEGORIES``
is the "no filter" answer inside report category selection.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ConsoleCommand(str, Enum):
    """Enumerate the commands understood by the console session."""

    SIGN_UP = "su"
    SIGN_IN = "si"
    CREATE_WALLET = "cw"
    DELETE_WALLET = "dw"
    CHANGE_WALLET = "chgw"
    ADD_INCOME = "ainc"
    ADD_EXPENSE = "aexp"
    GET_FULL_REPORT = "frep"
    GET_EXPENSES_REPORT = "exprep"
    GET_INCOME_REPORT = "increp"
    ALL_CATEGORIES = "allcat"
    GET_BALANCE = "bal"
    SET_CATEGORY_BUDGET = "cb"
    WALLET_TRANSFER = "wtrans"
    USER_TRANSFER = "utrans"
    LOG_OFF = "lo"
    DISPLAY_MENU = "menu"
    EXIT = "x"

    @classmethod
    def lookup(cls, token: str) -> Optional["ConsoleCommand"]:
        """Return the command for an exact token, or ``None``."""

        try:
            return cls(token)
        except ValueError:
            return None

