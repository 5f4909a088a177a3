"""Mini README: Advisory notices and operation results.

Structure:
    * NoticeKind - enum naming every advisory condition the domain can raise.
    * Notice - a single user-facing message tagged with its kind.
    * OperationResult - success flag plus the notices gathered on the way.

Notices never block a mutation. Callers decide whether to print, log or
ignore them. ``OperationResult`` is truthy only on success so it can be used
wherever a plain boolean outcome is expected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class NoticeKind(str, Enum):
    """Enumerate the advisory conditions reported to the user."""

    NEGATIVE_BALANCE = "negative_balance"
    BUDGET_EXCEEDED = "budget_exceeded"
    CATEGORY_NOT_FOUND = "category_not_found"
    WALLET_NOT_FOUND = "wallet_not_found"
    WALLET_EXISTS = "wallet_exists"
    SELF_TRANSFER = "self_transfer"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACTIVE_WALLET = "active_wallet"
    TARGET_NOT_FOUND = "target_not_found"


@dataclass(slots=True, frozen=True)
class Notice:
    """A message describing a non-fatal condition."""

    kind: NoticeKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class OperationResult:
    """Outcome of a service operation that can fail without raising."""

    ok: bool
    notices: List[Notice] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, notices: Optional[List[Notice]] = None) -> "OperationResult":
        return cls(True, list(notices or []))

    @classmethod
    def failure(cls, kind: NoticeKind, message: str) -> "OperationResult":
        return cls(False, [Notice(kind, message)])

    def has(self, kind: NoticeKind) -> bool:
        """Return whether a notice of ``kind`` was raised."""

        return any(notice.kind is kind for notice in self.notices)
