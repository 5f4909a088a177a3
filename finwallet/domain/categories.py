"""Mini README: Income and expense categories held by a wallet.

Structure:
    * IncomeCategory - named running total of income.
    * ExpenseCategory - named running total of expenses with an optional
      budget limit.
    * validate_amount / validate_name - shared input guards.

Totals only grow. Amounts are ``Decimal`` so wallet balances stay exact no
matter how many registrations are applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

ZERO = Decimal("0")
CENT = Decimal("0.01")
# Amounts are whole cents up to this bound, so running sums stay exact well
# within the 28-digit default decimal context.
MAX_AMOUNT = Decimal("1000000000000")


def validate_amount(value: Decimal, *, label: str = "Amount") -> Decimal:
    """Return ``value`` rounded to cents, rejecting out-of-range amounts."""

    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    if not value.is_finite() or value < ZERO or value > MAX_AMOUNT:
        raise ValueError(
            f"{label} must be a finite number between 0 and {MAX_AMOUNT}: {value}"
        )
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def validate_name(value: str, *, label: str = "Name") -> str:
    """Reject blank names."""

    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{label} must be a non-empty string.")
    return value


@dataclass(slots=True)
class IncomeCategory:
    """Running total of income recorded under one name."""

    name: str
    total_income: Decimal = ZERO

    def register_income(self, amount: Decimal) -> None:
        self.total_income += validate_amount(amount)

    def __str__(self) -> str:
        return f"{self.name}: {self.total_income:.2f}"


@dataclass(slots=True)
class ExpenseCategory:
    """Running total of expenses recorded under one name."""

    name: str
    total_expenses: Decimal = ZERO
    limit: Optional[Decimal] = None

    def register_expense(self, amount: Decimal) -> None:
        self.total_expenses += validate_amount(amount)

    def set_limit(self, limit: Decimal) -> None:
        self.limit = validate_amount(limit, label="Limit")

    @property
    def remaining_budget(self) -> Optional[Decimal]:
        """Budget left before the limit is reached, or ``None`` without a limit."""

        if self.limit is None:
            return None
        return self.limit - self.total_expenses

    def limit_exceeded(self) -> bool:
        """Return whether spending is strictly above the limit."""

        if self.limit is None:
            return False
        return self.total_expenses > self.limit

    def __str__(self) -> str:
        if self.limit is not None:
            return (
                f"{self.name}: {self.total_expenses:.2f}, "
                f"Remaining budget: {self.remaining_budget:.2f}"
            )
        return f"{self.name}: {self.total_expenses:.2f}"
