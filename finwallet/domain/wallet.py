"""Mini README: Wallet aggregate keeping categories and balance consistent.

Structure:
    * Wallet - owns ordered income and expense categories and a cached
      balance that always equals total income minus total expenses.

Every registration updates the category total and the balance together.
Limit breaches and negative balances are reported as ``Notice`` values and
logged; they never prevent the mutation itself.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional

from ..logging_utils import get_logger
from .categories import ZERO, ExpenseCategory, IncomeCategory, validate_amount, validate_name
from .notices import Notice, NoticeKind

LOGGER = get_logger(__name__)


class Wallet:
    """Named container of income and expense categories."""

    def __init__(self, name: str) -> None:
        self._name = validate_name(name, label="Wallet name")
        self._income_categories: List[IncomeCategory] = []
        self._expense_categories: List[ExpenseCategory] = []
        self._balance = ZERO

    @classmethod
    def restore(
        cls,
        name: str,
        income_categories: Iterable[IncomeCategory] = (),
        expense_categories: Iterable[ExpenseCategory] = (),
    ) -> "Wallet":
        """Rebuild a wallet from stored categories, recomputing the balance."""

        wallet = cls(name)
        for category in income_categories:
            if wallet.find_income_category(category.name) is not None:
                raise ValueError(f"Duplicate income category '{category.name}' in wallet '{name}'")
            wallet._income_categories.append(category)
        for category in expense_categories:
            if wallet.find_expense_category(category.name) is not None:
                raise ValueError(f"Duplicate expense category '{category.name}' in wallet '{name}'")
            wallet._expense_categories.append(category)
        wallet._balance = wallet.total_income() - wallet.total_expenses()
        return wallet

    @property
    def name(self) -> str:
        return self._name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def income_categories(self) -> List[IncomeCategory]:
        return list(self._income_categories)

    @property
    def expense_categories(self) -> List[ExpenseCategory]:
        return list(self._expense_categories)

    def find_income_category(self, name: str) -> Optional[IncomeCategory]:
        return next((c for c in self._income_categories if c.name == name), None)

    def find_expense_category(self, name: str) -> Optional[ExpenseCategory]:
        return next((c for c in self._expense_categories if c.name == name), None)

    def total_income(self) -> Decimal:
        return sum((c.total_income for c in self._income_categories), ZERO)

    def total_expenses(self) -> Decimal:
        return sum((c.total_expenses for c in self._expense_categories), ZERO)

    def register_income(self, category_name: str, amount: Decimal) -> List[Notice]:
        """Add income to a category, creating it on first use."""

        validate_name(category_name, label="Category name")
        amount = validate_amount(amount)
        category = self.find_income_category(category_name)
        if category is None:
            category = IncomeCategory(category_name)
            self._income_categories.append(category)
        category.register_income(amount)
        self._balance += amount
        LOGGER.debug("Wallet '%s': income %s under '%s'", self._name, amount, category_name)
        return []

    def register_expense(self, category_name: str, amount: Decimal) -> List[Notice]:
        """Add an expense to a category, creating it on first use."""

        validate_name(category_name, label="Category name")
        amount = validate_amount(amount)
        category = self.find_expense_category(category_name)
        if category is None:
            category = ExpenseCategory(category_name)
            self._expense_categories.append(category)
        category.register_expense(amount)
        self._balance -= amount
        LOGGER.debug("Wallet '%s': expense %s under '%s'", self._name, amount, category_name)

        notices = self._budget_notices(category)
        if self._balance < ZERO:
            LOGGER.info("Wallet '%s' balance is negative: %s", self._name, self._balance)
            notices.append(Notice(NoticeKind.NEGATIVE_BALANCE, "Expenses exceed income!"))
        return notices

    def set_category_limit(self, category_name: str, limit: Decimal) -> List[Notice]:
        """Set or replace the budget limit of an expense category."""

        validate_name(category_name, label="Category name")
        limit = validate_amount(limit, label="Limit")
        category = self.find_expense_category(category_name)
        if category is None:
            category = ExpenseCategory(category_name)
            self._expense_categories.append(category)
        category.set_limit(limit)
        LOGGER.debug("Wallet '%s': limit %s for '%s'", self._name, limit, category_name)
        return self._budget_notices(category)

    def _budget_notices(self, category: ExpenseCategory) -> List[Notice]:
        if not category.limit_exceeded():
            return []
        LOGGER.info(
            "Wallet '%s': category '%s' over budget (%s > %s)",
            self._name,
            category.name,
            category.total_expenses,
            category.limit,
        )
        return [Notice(NoticeKind.BUDGET_EXCEEDED, f"Budget exceeded for category: {category.name}")]

    def __repr__(self) -> str:
        return f"Wallet(name={self._name!r}, balance={self._balance})"
