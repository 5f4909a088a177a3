"""Mini README: Report value objects rendered by the console.

Structure:
    * CategoryReport - per-category lines, their total and unmatched names.
    * FullReport - wallet balance plus income and expense reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from ..domain import Notice


@dataclass(slots=True)
class CategoryReport:
    """Display lines for a set of categories and their combined total."""

    title: str
    lines: List[str]
    total: Decimal
    missing: List[str] = field(default_factory=list)
    notices: List[Notice] = field(default_factory=list)

    def render(self) -> List[str]:
        return [self.title, *self.lines, f"Total: {self.total:.2f}"]


@dataclass(slots=True)
class FullReport:
    balance: Decimal
    income: CategoryReport
    expenses: CategoryReport

    def render(self) -> List[str]:
        return [
            f"Balance: {self.balance:.2f}",
            "",
            *self.income.render(),
            "",
            *self.expenses.render(),
        ]
