"""Mini README: Line-oriented console session for finwallet.

Structure:
    * parse_amount - strict decimal parsing for amount and budget prompts.
    * ConsoleSession - state machine moving from the welcome screen through
      authentication and wallet selection into the command loop.

Every read goes through ``ConsoleSession._read`` which skips empty lines and
handles the global ``menu``, ``lo`` and ``x`` tokens before normal parsing.
Logout and exit persist state first; exit ends ``run`` with code 0. Any
unexpected error also persists before it propagates.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional

import typer

from ..domain import Notice
from ..domain.categories import validate_amount
from ..logging_utils import get_logger
from ..services import FinanceService
from .commands import ConsoleCommand

LOGGER = get_logger(__name__)

Reader = Callable[[], str]
Writer = Callable[[str], None]

_MENU_LINES = [
    (ConsoleCommand.CREATE_WALLET, "create a new wallet"),
    (ConsoleCommand.CHANGE_WALLET, "switch wallet"),
    (ConsoleCommand.DELETE_WALLET, "delete a wallet"),
    (ConsoleCommand.ADD_INCOME, "record income"),
    (ConsoleCommand.ADD_EXPENSE, "record expenses"),
    (ConsoleCommand.GET_BALANCE, "get current balance information"),
    (ConsoleCommand.GET_INCOME_REPORT, "get income report"),
    (ConsoleCommand.GET_EXPENSES_REPORT, "get expenses report"),
    (ConsoleCommand.GET_FULL_REPORT, "get full report"),
    (ConsoleCommand.SET_CATEGORY_BUDGET, "set budget for a category"),
    (ConsoleCommand.WALLET_TRANSFER, "transfer funds to another wallet"),
    (ConsoleCommand.USER_TRANSFER, "transfer funds to another user"),
    (ConsoleCommand.LOG_OFF, "log out of the account"),
    (ConsoleCommand.EXIT, "save and exit the application"),
]


def parse_amount(text: str) -> Decimal:
    """Parse a bounded, non-negative amount in cents or raise ``ValueError``."""

    try:
        return validate_amount(Decimal(text.strip()))
    except ArithmeticError as error:
        # InvalidOperation and Overflow
        raise ValueError(f"Not a usable amount: {text!r}") from error


class _LogoutRequested(Exception):
    pass


class _ExitRequested(Exception):
    pass


def _stdin_reader() -> str:
    return input()


class ConsoleSession:
    """Interactive loop dispatching console commands to ``FinanceService``."""

    def __init__(
        self,
        service: FinanceService,
        *,
        reader: Optional[Reader] = None,
        writer: Optional[Writer] = None,
        max_auth_attempts: int = 5,
    ) -> None:
        self._service = service
        self._reader = reader or _stdin_reader
        self._writer = writer or typer.echo
        self._max_auth_attempts = max_auth_attempts
        self._handlers: Dict[ConsoleCommand, Callable[[], bool]] = {
            ConsoleCommand.GET_BALANCE: self._show_balance,
            ConsoleCommand.ADD_INCOME: self._record_income,
            ConsoleCommand.ADD_EXPENSE: self._record_expense,
            ConsoleCommand.GET_FULL_REPORT: self._full_report,
            ConsoleCommand.GET_INCOME_REPORT: self._income_report,
            ConsoleCommand.GET_EXPENSES_REPORT: self._expense_report,
            ConsoleCommand.SET_CATEGORY_BUDGET: self._set_category_limit,
            ConsoleCommand.CHANGE_WALLET: self._switch_wallet,
            ConsoleCommand.CREATE_WALLET: lambda: self._create_wallet(activate=False),
            ConsoleCommand.WALLET_TRANSFER: self._transfer_between_wallets,
            ConsoleCommand.USER_TRANSFER: self._transfer_between_users,
            ConsoleCommand.DELETE_WALLET: self._delete_wallet,
        }

    def run(self) -> int:
        """Drive the session until the user exits; return the exit code."""

        try:
            while True:
                self._show_welcome()
                try:
                    if not self._authenticate():
                        continue
                    self._show_command_menu()
                    self._command_loop()
                except _LogoutRequested:
                    self._persist()
                    self._service.logout()
        except _ExitRequested:
            self._persist()
            return 0
        except Exception:
            LOGGER.exception("Unexpected error, saving data before stopping")
            self._persist()
            raise

    def _persist(self) -> None:
        if not self._service.persist():
            self._write("Failed to save data.")

    def _write(self, message: str = "") -> None:
        self._writer(message)

    def _write_notices(self, notices: Iterable[Notice]) -> None:
        for notice in notices:
            self._write(notice.message)

    def _read(self, prompt: Optional[str] = None) -> str:
        """Read the next non-empty line, handling global commands first."""

        while True:
            if prompt:
                self._write(prompt)
            try:
                text = self._reader().strip()
            except EOFError:
                LOGGER.debug("End of input, treating as exit")
                raise _ExitRequested() from None
            if not text:
                self._write("Empty input. Please try again.")
                continue
            command = ConsoleCommand.lookup(text)
            if command is ConsoleCommand.DISPLAY_MENU:
                self._show_command_menu()
                continue
            if command is ConsoleCommand.LOG_OFF:
                raise _LogoutRequested()
            if command is ConsoleCommand.EXIT:
                raise _ExitRequested()
            return text

    def _read_amount(self, prompt: str, error_message: str) -> Decimal:
        while True:
            text = self._read(prompt)
            try:
                return parse_amount(text)
            except ValueError:
                self._write(error_message)

    def _show_welcome(self) -> None:
        self._write(
            f"If you don't have an account, enter {ConsoleCommand.SIGN_UP.value} to register "
            f"or enter the command {ConsoleCommand.SIGN_IN.value} to log in to an existing account."
        )
        self._write(f"To exit the application, enter {ConsoleCommand.EXIT.value}.")
        self._write(
            f"The list of available commands is accessible at: {ConsoleCommand.DISPLAY_MENU.value}."
        )

    def _show_command_menu(self) -> None:
        self._write("List of available commands: ")
        for command, description in _MENU_LINES:
            self._write(f"{command.value} - {description};")
        self._write()

    def _show_wallet_names(self) -> None:
        self._write("Your wallets: " + " ".join(self._service.wallet_names()))

    def _authenticate(self) -> bool:
        command = ConsoleCommand.lookup(self._read())
        if command is ConsoleCommand.SIGN_UP:
            if not self._register():
                return False
            self._create_wallet(activate=True)
            return True
        if command is ConsoleCommand.SIGN_IN:
            if not self._log_in():
                return False
            self._select_or_create_wallet()
            return True
        self._write(
            f"You entered an invalid command! Please enter "
            f"{ConsoleCommand.SIGN_IN.value} or {ConsoleCommand.SIGN_UP.value}."
        )
        return False

    def _register(self) -> bool:
        attempts = self._max_auth_attempts
        while attempts > 0:
            login = self._read("Enter login: ")
            password = self._read("Enter password: ")
            if self._service.register_user_if_not_exists(login, password):
                self._write("Registration completed successfully.")
                return True
            attempts -= 1
            self._write(
                "Registration attempt failed: a user with this login already exists. "
                f"Attempts remaining: {attempts}"
            )
        return False

    def _log_in(self) -> bool:
        attempts = self._max_auth_attempts
        while attempts > 0:
            login = self._read("Enter login: ")
            password = self._read("Enter password: ")
            if self._service.log_in(login, password):
                self._write(f"Hello, {login}!")
                return True
            attempts -= 1
            self._write(f"Login attempt failed. Attempts remaining: {attempts}")
        return False

    def _select_or_create_wallet(self) -> None:
        while True:
            self._write("Please select a wallet.")
            self._show_wallet_names()
            self._write(
                f"If you want to create a new wallet, enter {ConsoleCommand.CREATE_WALLET.value}"
            )
            name = self._read()
            if name == ConsoleCommand.CREATE_WALLET.value:
                self._create_wallet(activate=False)
                continue
            result = self._service.set_active_wallet(name)
            if result:
                return
            self._write_notices(result.notices)
            self._write("Please try again.")

    def _create_wallet(self, *, activate: bool) -> bool:
        while True:
            name = self._read("Enter the name of the new wallet: ")
            result = self._service.add_wallet(name)
            if result:
                self._write("Wallet successfully created.")
                if activate:
                    self._service.set_active_wallet(name)
                return True
            self._write_notices(result.notices)
            self._write("Please try again.")

    def _command_loop(self) -> None:
        while True:
            token = self._read("Enter command: ")
            handler = self._handlers.get(ConsoleCommand.lookup(token))
            if handler is None:
                self._write("Invalid command! Please try again.")
                continue
            if handler():
                self._write("The operation was successful.")
            else:
                self._write("The operation failed.")

    def _show_balance(self) -> bool:
        self._write(f"Balance: {self._service.balance():.2f}")
        return True

    def _record_income(self) -> bool:
        category = self._read("Enter income category: ")
        amount = self._read_amount("Enter amount: ", "Failed to read the amount. Please try again.")
        self._write_notices(self._service.record_income(category, amount))
        return True

    def _record_expense(self) -> bool:
        category = self._read("Enter expense category: ")
        amount = self._read_amount("Enter amount: ", "Failed to read the amount. Please try again.")
        self._write_notices(self._service.record_expense(category, amount))
        return True

    def _set_category_limit(self) -> bool:
        category = self._read("Enter the expense category: ")
        limit = self._read_amount("Enter the budget: ", "Failed to read the budget. Please try again.")
        self._write_notices(self._service.set_category_limit(category, limit))
        return True

    def _full_report(self) -> bool:
        for line in self._service.full_report().render():
            self._write(line)
        return True

    def _select_report_names(self, kind: str, names: List[str]) -> Optional[List[str]]:
        """Ask which categories to report on; ``None`` means all of them."""

        self._write(
            f"Select {kind} categories for the report (enter names separated by spaces)."
        )
        self._write(
            "If you want a report for all categories, enter the command "
            f"{ConsoleCommand.ALL_CATEGORIES.value}"
        )
        self._write(f"Your {kind} categories: ")
        for name in names:
            self._write(name)
        tokens = self._read().split()
        if tokens[0] == ConsoleCommand.ALL_CATEGORIES.value:
            return None
        return tokens

    def _income_report(self) -> bool:
        selection = self._select_report_names("income", self._service.income_category_names())
        report = self._service.income_report(selection)
        self._write_notices(report.notices)
        for line in report.render():
            self._write(line)
        return True

    def _expense_report(self) -> bool:
        selection = self._select_report_names("expense", self._service.expense_category_names())
        report = self._service.expense_report(selection)
        self._write_notices(report.notices)
        for line in report.render():
            self._write(line)
        return True

    def _switch_wallet(self) -> bool:
        while True:
            self._write("Enter the name of the wallet you want to switch to: ")
            self._show_wallet_names()
            result = self._service.set_active_wallet(self._read())
            if result:
                return True
            self._write_notices(result.notices)
            self._write("Please try again.")

    def _delete_wallet(self) -> bool:
        while True:
            self._write("Enter the name of the wallet you want to delete.")
            self._show_wallet_names()
            result = self._service.delete_wallet(self._read())
            if result:
                return True
            self._write_notices(result.notices)
            self._write("Please try again.")

    def _transfer_between_wallets(self) -> bool:
        self._write("Choose the wallet to which you want to transfer funds")
        self._show_wallet_names()
        wallet = self._read()
        amount = self._read_amount("Enter the amount: ", "Failed to read the amount. Please try again.")
        result = self._service.transfer_between_wallets(wallet, amount)
        self._write_notices(result.notices)
        return result.ok

    def _transfer_between_users(self) -> bool:
        login = self._read("Select the user to whom you want to transfer funds.")
        wallet = self._read(
            "Enter the name of the user's wallet to which you want to transfer funds."
        )
        amount = self._read_amount("Enter the amount: ", "Failed to read the amount. Please try again.")
        result = self._service.transfer_between_users(login, wallet, amount)
        self._write_notices(result.notices)
        return result.ok
