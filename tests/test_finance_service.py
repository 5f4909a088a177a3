"""Mini README: Tests covering the finance service operations.

Structure:
    * registration and login rules.
    * wallet creation, selection and deletion.
    * transfers between wallets and between users.
    * filtered reports and session precondition errors.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from finwallet.domain import NoticeKind
from finwallet.errors import UserNotAuthenticatedError, WalletNotSelectedError
from finwallet.services import FinanceService
from finwallet.storage import UserDataStorage


@pytest.fixture
def service(tmp_path) -> FinanceService:
    return FinanceService(UserDataStorage(tmp_path / "users.json"))


@pytest.fixture
def funded(service: FinanceService) -> FinanceService:
    """User ``alice`` with wallets W1 (balance 100, active) and W2 (empty)."""

    service.register_user_if_not_exists("alice", "secret")
    service.add_wallet("W1")
    service.add_wallet("W2")
    service.set_active_wallet("W1")
    service.record_income("Salary", Decimal("100"))
    return service


def test_duplicate_registration_is_rejected(service: FinanceService) -> None:
    """A login can only be registered once, whatever the password."""

    assert service.register_user_if_not_exists("a", "p") is True
    assert service.current_user.login == "a"

    assert service.register_user_if_not_exists("a", "anything") is False
    assert len(service.users) == 1


def test_login_requires_exact_credentials(service: FinanceService) -> None:
    service.register_user_if_not_exists("bob", "pw")
    service.logout()
    assert service.current_user is None

    assert service.log_in("bob", "wrong") is False
    assert service.log_in("Bob", "pw") is False
    assert service.current_user is None

    assert service.log_in("bob", "pw") is True
    assert service.current_user.login == "bob"
    assert service.current_wallet is None


def test_wallet_names_must_be_unique(service: FinanceService) -> None:
    service.register_user_if_not_exists("alice", "secret")

    assert service.add_wallet("Main")
    result = service.add_wallet("Main")

    assert not result
    assert result.has(NoticeKind.WALLET_EXISTS)
    assert service.wallet_names() == ["Main"]


def test_set_active_wallet_requires_existing_name(service: FinanceService) -> None:
    service.register_user_if_not_exists("alice", "secret")
    service.add_wallet("Main")

    missing = service.set_active_wallet("Other")
    assert not missing
    assert missing.has(NoticeKind.WALLET_NOT_FOUND)
    assert service.current_wallet is None

    assert service.set_active_wallet("Main")
    assert service.current_wallet.name == "Main"


def test_wallet_transfer_moves_funds(funded: FinanceService) -> None:
    """W1 -> W2 transfer records both legs under the Transfers category."""

    result = funded.transfer_between_wallets("W2", Decimal("40"))

    assert result
    user = funded.current_user
    w1, w2 = user.get_wallet("W1"), user.get_wallet("W2")
    assert w1.balance == Decimal("60")
    assert w2.balance == Decimal("40")
    assert w1.find_expense_category("Transfers").total_expenses == Decimal("40")
    assert w2.find_income_category("Transfers").total_income == Decimal("40")


def test_wallet_transfer_with_insufficient_funds_changes_nothing(funded: FinanceService) -> None:
    result = funded.transfer_between_wallets("W2", Decimal("200"))

    assert not result
    assert result.has(NoticeKind.INSUFFICIENT_FUNDS)
    user = funded.current_user
    assert user.get_wallet("W1").balance == Decimal("100")
    assert user.get_wallet("W2").balance == Decimal("0")
    assert user.get_wallet("W1").find_expense_category("Transfers") is None


def test_wallet_transfer_rejects_self_and_unknown_targets(funded: FinanceService) -> None:
    to_self = funded.transfer_between_wallets("W1", Decimal("10"))
    unknown = funded.transfer_between_wallets("Nope", Decimal("10"))

    assert to_self.has(NoticeKind.SELF_TRANSFER)
    assert unknown.has(NoticeKind.WALLET_NOT_FOUND)
    assert funded.balance() == Decimal("100")


def test_user_transfer_to_another_user(funded: FinanceService) -> None:
    funded.logout()
    funded.register_user_if_not_exists("bob", "pw")
    funded.add_wallet("Savings")
    funded.logout()
    funded.log_in("alice", "secret")
    funded.set_active_wallet("W1")

    assert funded.transfer_between_users("bob", "Savings", Decimal("25"))

    savings = funded.find_user("bob").get_wallet("Savings")
    assert savings.balance == Decimal("25")
    assert savings.find_income_category("Transfers").total_income == Decimal("25")
    assert funded.balance() == Decimal("75")


def test_user_transfer_self_check_needs_login_and_wallet(funded: FinanceService) -> None:
    """Same login but a different wallet is an ordinary transfer."""

    same = funded.transfer_between_users("alice", "W1", Decimal("10"))
    other_wallet = funded.transfer_between_users("alice", "W2", Decimal("10"))

    assert same.has(NoticeKind.SELF_TRANSFER)
    assert other_wallet
    assert funded.current_user.get_wallet("W2").balance == Decimal("10")


def test_user_transfer_missing_target(funded: FinanceService) -> None:
    no_user = funded.transfer_between_users("ghost", "W1", Decimal("1"))
    no_wallet = funded.transfer_between_users("alice", "Nope", Decimal("1"))
    too_much = funded.transfer_between_users("alice", "W2", Decimal("101"))

    assert no_user.has(NoticeKind.TARGET_NOT_FOUND)
    assert no_user.notices[0].message == "User ghost or wallet W1 not found!"
    assert no_wallet.has(NoticeKind.TARGET_NOT_FOUND)
    assert too_much.has(NoticeKind.INSUFFICIENT_FUNDS)
    assert funded.balance() == Decimal("100")


def test_custom_transfer_category(tmp_path) -> None:
    service = FinanceService(UserDataStorage(tmp_path / "u.json"), transfer_category="Moves")
    service.register_user_if_not_exists("alice", "secret")
    service.add_wallet("A")
    service.add_wallet("B")
    service.set_active_wallet("A")
    service.record_income("Salary", Decimal("5"))

    service.transfer_between_wallets("B", Decimal("5"))

    assert service.current_user.get_wallet("B").find_income_category("Moves") is not None


def test_delete_wallet_rules(funded: FinanceService) -> None:
    """The active wallet cannot be deleted; other wallets are removed."""

    active = funded.delete_wallet("W1")
    missing = funded.delete_wallet("Nope")

    assert active.has(NoticeKind.ACTIVE_WALLET)
    assert missing.has(NoticeKind.WALLET_NOT_FOUND)
    assert funded.wallet_names() == ["W1", "W2"]

    assert funded.delete_wallet("W2")
    assert funded.wallet_names() == ["W1"]
    assert not funded.set_active_wallet("W2")


def test_reports_filter_by_exact_names(funded: FinanceService) -> None:
    funded.record_expense("Food", Decimal("12.5"))
    funded.record_expense("Fuel", Decimal("7.5"))
    funded.set_category_limit("Food", Decimal("20"))

    everything = funded.expense_report()
    assert everything.lines == ["Food: 12.50, Remaining budget: 7.50", "Fuel: 7.50"]
    assert everything.total == Decimal("20.0")
    assert everything.missing == []

    filtered = funded.expense_report(["Fuel", "Fo", "Fuel"])
    assert filtered.lines == ["Fuel: 7.50"]
    assert filtered.total == Decimal("7.5")
    assert filtered.missing == ["Fo"]
    assert [notice.message for notice in filtered.notices] == ["Category Fo not found!"]


def test_full_report_renders_balance_and_sections(funded: FinanceService) -> None:
    funded.record_expense("Food", Decimal("30"))

    lines = funded.full_report().render()

    assert lines[0] == "Balance: 70.00"
    assert "Income by category:" in lines
    assert "Salary: 100.00" in lines
    assert "Expenses by category:" in lines
    assert lines[-1] == "Total: 30.00"
    assert funded.income_category_names() == ["Salary"]
    assert funded.expense_category_names() == ["Food"]


def test_operations_require_session(service: FinanceService) -> None:
    """Running scoped operations without context raises distinguishable errors."""

    with pytest.raises(UserNotAuthenticatedError):
        service.add_wallet("Main")
    with pytest.raises(UserNotAuthenticatedError):
        service.balance()

    service.register_user_if_not_exists("alice", "secret")
    with pytest.raises(WalletNotSelectedError):
        service.record_income("Salary", Decimal("1"))
    with pytest.raises(WalletNotSelectedError):
        service.delete_wallet("Other")


def test_persist_and_reload(tmp_path) -> None:
    storage = UserDataStorage(tmp_path / "users.json")
    service = FinanceService(storage)
    service.register_user_if_not_exists("alice", "secret")
    service.add_wallet("Main")
    service.set_active_wallet("Main")
    service.record_income("Salary", Decimal("42"))

    assert service.persist() is True

    reloaded = FinanceService(storage)
    assert reloaded.log_in("alice", "secret")
    assert reloaded.set_active_wallet("Main")
    assert reloaded.balance() == Decimal("42")
