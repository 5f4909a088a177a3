"""Mini README: Stateful finance service driving every domain operation.

Structure:
    * FinanceService - owns the user list, the storage gateway and the
      current ``SessionContext``. Exposes registration, login, wallet
      management, income/expense recording, limits, transfers, reports and
      persistence.

User scoped operations raise ``UserNotAuthenticatedError`` without a
session; wallet scoped ones raise ``WalletNotSelectedError`` without an
active wallet. Expected failures (duplicate names, missing targets,
insufficient funds) come back as falsy ``OperationResult`` values carrying
user-facing notices.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..domain import (
    ExpenseCategory,
    IncomeCategory,
    Notice,
    NoticeKind,
    OperationResult,
    User,
    Wallet,
)
from ..domain.categories import validate_amount
from ..errors import UserNotAuthenticatedError
from ..logging_utils import get_logger
from ..storage import UserDataStorage
from .reports import CategoryReport, FullReport
from .session import SessionContext

LOGGER = get_logger(__name__)

DEFAULT_TRANSFER_CATEGORY = "Transfers"

_CategoryT = TypeVar("_CategoryT", IncomeCategory, ExpenseCategory)


class FinanceService:
    """Session-aware facade over users, wallets and storage."""

    def __init__(
        self,
        storage: UserDataStorage,
        users: Optional[Iterable[User]] = None,
        *,
        transfer_category: str = DEFAULT_TRANSFER_CATEGORY,
    ) -> None:
        self._storage = storage
        self._users: List[User] = list(users) if users is not None else storage.load_all()
        self._session: Optional[SessionContext] = None
        self.transfer_category = transfer_category
        LOGGER.debug("Finance service initialised with %s users", len(self._users))

    @property
    def users(self) -> List[User]:
        return list(self._users)

    @property
    def session(self) -> Optional[SessionContext]:
        return self._session

    @property
    def current_user(self) -> Optional[User]:
        return self._session.user if self._session else None

    @property
    def current_wallet(self) -> Optional[Wallet]:
        return self._session.wallet if self._session else None

    def _require_session(self) -> SessionContext:
        if self._session is None:
            raise UserNotAuthenticatedError()
        return self._session

    def _require_wallet(self) -> Wallet:
        return self._require_session().require_wallet()

    def find_user(self, login: str) -> Optional[User]:
        return next((user for user in self._users if user.login == login), None)

    def register_user_if_not_exists(self, login: str, password: str) -> bool:
        """Create a user and start a session, unless the login is taken."""

        if self.find_user(login) is not None:
            LOGGER.info("Registration rejected, login '%s' already exists", login)
            return False
        user = User(login, password)
        self._users.append(user)
        self._session = SessionContext(user)
        LOGGER.info("Registered user '%s'", login)
        return True

    def log_in(self, login: str, password: str) -> bool:
        """Start a session when login and password match exactly."""

        user = self.find_user(login)
        if user is None or not user.check_password(password):
            LOGGER.info("Login failed for '%s'", login)
            return False
        self._session = SessionContext(user)
        LOGGER.info("User '%s' logged in", login)
        return True

    def logout(self) -> None:
        if self._session is not None:
            LOGGER.info("User '%s' logged out", self._session.user.login)
        self._session = None

    def wallet_names(self) -> List[str]:
        return self._require_session().user.wallet_names()

    def add_wallet(self, name: str) -> OperationResult:
        user = self._require_session().user
        if user.add_wallet(name) is None:
            return OperationResult.failure(
                NoticeKind.WALLET_EXISTS, "A wallet with this name already exists!"
            )
        LOGGER.info("User '%s' created wallet '%s'", user.login, name)
        return OperationResult.success()

    def set_active_wallet(self, name: str) -> OperationResult:
        session = self._require_session()
        wallet = session.user.get_wallet(name)
        if wallet is None:
            return OperationResult.failure(
                NoticeKind.WALLET_NOT_FOUND, "A wallet with this name does not exist."
            )
        session.wallet = wallet
        LOGGER.debug("Active wallet for '%s' is now '%s'", session.user.login, name)
        return OperationResult.success()

    def delete_wallet(self, name: str) -> OperationResult:
        """Remove one of the user's wallets other than the active one."""

        session = self._require_session()
        active = session.require_wallet()
        if name == active.name:
            return OperationResult.failure(NoticeKind.ACTIVE_WALLET, "Cannot delete current wallet!")
        if not session.user.remove_wallet(name):
            return OperationResult.failure(NoticeKind.WALLET_NOT_FOUND, f"Wallet not found: {name}")
        LOGGER.info("User '%s' deleted wallet '%s'", session.user.login, name)
        return OperationResult.success()

    def record_income(self, category: str, amount: Decimal) -> List[Notice]:
        return self._require_wallet().register_income(category, amount)

    def record_expense(self, category: str, amount: Decimal) -> List[Notice]:
        return self._require_wallet().register_expense(category, amount)

    def set_category_limit(self, category: str, limit: Decimal) -> List[Notice]:
        return self._require_wallet().set_category_limit(category, limit)

    def transfer_between_wallets(self, target_wallet_name: str, amount: Decimal) -> OperationResult:
        """Move funds from the active wallet to another wallet of the same user."""

        session = self._require_session()
        source = session.require_wallet()
        amount = validate_amount(amount)

        if target_wallet_name == source.name:
            return OperationResult.failure(
                NoticeKind.SELF_TRANSFER, "The wallet must not match the current one."
            )
        if source.balance < amount:
            return OperationResult.failure(NoticeKind.INSUFFICIENT_FUNDS, "Insufficient funds!")

        target = session.user.get_wallet(target_wallet_name)
        if target is None:
            return OperationResult.failure(NoticeKind.WALLET_NOT_FOUND, "Invalid wallet name!")
        return self._move_funds(source, target, amount)

    def transfer_between_users(
        self, target_login: str, target_wallet_name: str, amount: Decimal
    ) -> OperationResult:
        """Move funds from the active wallet to any user's named wallet.

        Only a transfer to the very same login *and* wallet counts as a self
        transfer; another wallet of the current user is a valid target.
        """

        session = self._require_session()
        source = session.require_wallet()
        amount = validate_amount(amount)

        if source.balance < amount:
            return OperationResult.failure(NoticeKind.INSUFFICIENT_FUNDS, "Insufficient funds!")
        if target_wallet_name == source.name and target_login == session.user.login:
            return OperationResult.failure(
                NoticeKind.SELF_TRANSFER, "The wallet must not match the current one!"
            )

        target_user = self.find_user(target_login)
        target = target_user.get_wallet(target_wallet_name) if target_user else None
        if target is None:
            return OperationResult.failure(
                NoticeKind.TARGET_NOT_FOUND,
                f"User {target_login} or wallet {target_wallet_name} not found!",
            )
        return self._move_funds(source, target, amount)

    def _move_funds(self, source: Wallet, target: Wallet, amount: Decimal) -> OperationResult:
        target.register_income(self.transfer_category, amount)
        notices = source.register_expense(self.transfer_category, amount)
        LOGGER.info("Transferred %s from '%s' to '%s'", amount, source.name, target.name)
        return OperationResult.success(notices)

    def balance(self) -> Decimal:
        return self._require_wallet().balance

    def income_category_names(self) -> List[str]:
        return [category.name for category in self._require_wallet().income_categories]

    def expense_category_names(self) -> List[str]:
        return [category.name for category in self._require_wallet().expense_categories]

    def income_report(self, names: Optional[Sequence[str]] = None) -> CategoryReport:
        """Income per category, optionally restricted to ``names``."""

        categories, missing = _select(self._require_wallet().income_categories, names)
        return CategoryReport(
            title="Income by category:",
            lines=[str(category) for category in categories],
            total=sum((category.total_income for category in categories), Decimal("0")),
            missing=missing,
            notices=_missing_notices(missing),
        )

    def expense_report(self, names: Optional[Sequence[str]] = None) -> CategoryReport:
        """Expenses per category, optionally restricted to ``names``."""

        categories, missing = _select(self._require_wallet().expense_categories, names)
        return CategoryReport(
            title="Expenses by category:",
            lines=[str(category) for category in categories],
            total=sum((category.total_expenses for category in categories), Decimal("0")),
            missing=missing,
            notices=_missing_notices(missing),
        )

    def full_report(self) -> FullReport:
        return FullReport(
            balance=self.balance(),
            income=self.income_report(),
            expenses=self.expense_report(),
        )

    def persist(self) -> bool:
        return self._storage.save_all(self._users)


def _select(
    categories: List[_CategoryT], names: Optional[Sequence[str]]
) -> Tuple[List[_CategoryT], List[str]]:
    """Pick categories by exact name, keeping caller order; collect misses."""

    if names is None:
        return categories, []
    by_name = {category.name: category for category in categories}
    selected: List[_CategoryT] = []
    missing: List[str] = []
    for name in dict.fromkeys(names):
        category = by_name.get(name)
        if category is None:
            missing.append(name)
        else:
            selected.append(category)
    return selected, missing


def _missing_notices(missing: List[str]) -> List[Notice]:
    return [Notice(NoticeKind.CATEGORY_NOT_FOUND, f"Category {name} not found!") for name in missing]
