"""Mini README: Pydantic records describing the persisted snapshot.

Structure:
    * IncomeCategoryRecord / ExpenseCategoryRecord - per-category totals.
    * WalletRecord - wallet name plus its categories.
    * UserRecord - credentials plus wallets.
    * SnapshotRecord - versioned envelope around the full user list.

Records validate untrusted file contents and translate to and from the
domain objects. Decimals serialise as strings so a save/load round trip
reproduces totals and limits exactly.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..domain import ExpenseCategory, IncomeCategory, User, Wallet
from ..domain.categories import MAX_AMOUNT

SNAPSHOT_VERSION = 1
TOTAL_DIGITS = 24


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class IncomeCategoryRecord(_Record):
    name: str = Field(..., min_length=1)
    total_income: Decimal = Field(Decimal("0"), ge=0, max_digits=TOTAL_DIGITS, decimal_places=2)

    @field_serializer("total_income")
    def _dump_total(self, value: Decimal) -> str:
        return str(value)

    @classmethod
    def from_domain(cls, category: IncomeCategory) -> "IncomeCategoryRecord":
        return cls(name=category.name, total_income=category.total_income)

    def to_domain(self) -> IncomeCategory:
        return IncomeCategory(self.name, self.total_income)


class ExpenseCategoryRecord(_Record):
    name: str = Field(..., min_length=1)
    total_expenses: Decimal = Field(Decimal("0"), ge=0, max_digits=TOTAL_DIGITS, decimal_places=2)
    limit: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT, decimal_places=2)

    @field_serializer("total_expenses", "limit")
    def _dump_amount(self, value: Optional[Decimal]) -> Optional[str]:
        return None if value is None else str(value)

    @classmethod
    def from_domain(cls, category: ExpenseCategory) -> "ExpenseCategoryRecord":
        return cls(name=category.name, total_expenses=category.total_expenses, limit=category.limit)

    def to_domain(self) -> ExpenseCategory:
        return ExpenseCategory(self.name, self.total_expenses, self.limit)


class WalletRecord(_Record):
    name: str = Field(..., min_length=1)
    income_categories: List[IncomeCategoryRecord] = Field(default_factory=list)
    expense_categories: List[ExpenseCategoryRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, wallet: Wallet) -> "WalletRecord":
        return cls(
            name=wallet.name,
            income_categories=[IncomeCategoryRecord.from_domain(c) for c in wallet.income_categories],
            expense_categories=[ExpenseCategoryRecord.from_domain(c) for c in wallet.expense_categories],
        )

    def to_domain(self) -> Wallet:
        return Wallet.restore(
            self.name,
            income_categories=[record.to_domain() for record in self.income_categories],
            expense_categories=[record.to_domain() for record in self.expense_categories],
        )


class UserRecord(_Record):
    login: str = Field(..., min_length=1)
    password: str
    wallets: List[WalletRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, user: User) -> "UserRecord":
        return cls(
            login=user.login,
            password=user.password,
            wallets=[WalletRecord.from_domain(wallet) for wallet in user.wallets],
        )

    def to_domain(self) -> User:
        return User(self.login, self.password, [record.to_domain() for record in self.wallets])


class SnapshotRecord(_Record):
    version: int = SNAPSHOT_VERSION
    users: List[UserRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, users: List[User]) -> "SnapshotRecord":
        return cls(users=[UserRecord.from_domain(user) for user in users])

    def to_domain(self) -> List[User]:
        if self.version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version: {self.version}")
        logins = [record.login for record in self.users]
        if len(logins) != len(set(logins)):
            raise ValueError("Snapshot contains duplicate logins")
        return [record.to_domain() for record in self.users]
