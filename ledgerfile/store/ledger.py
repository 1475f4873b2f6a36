"""Account ledger with balance validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from ledgerfile.exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidNameError,
)
from ledgerfile.logging import get_logger
from ledgerfile.models.account import Account, AccountView

logger = get_logger(__name__)

CENT = Decimal("0.01")


def parse_amount(value: int | str | float | Decimal) -> Decimal:
    """Convert user or caller input to a cent-quantized ``Decimal``.

    Parameters
    ----------
    value : int | str | float | Decimal
        Amount to convert. Floats go through ``str()`` so that ``0.1``
        stays ``0.10`` rather than its binary expansion.

    Returns
    -------
    Decimal
        Amount rounded half-up to two decimal places.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from exc

    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")

    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Amount out of range: {value!r}") from exc


def _positive_amount(value: int | str | float | Decimal) -> Decimal:
    amount = parse_amount(value)
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    return amount


@dataclass
class AccountLedger:
    """Fixed-size, position-indexed collection of accounts.

    Accounts are supplied at construction and are never added or removed
    afterwards. Indexes are 0-based; negative indexes are rejected rather
    than counted from the end.
    """

    accounts: list[Account] = field(default_factory=list)

    def __post_init__(self) -> None:
        for account in self.accounts:
            account.balance = parse_amount(account.balance)
            if account.balance < 0:
                raise InvalidAmountError(
                    f"Initial balance for {account.name!r} is negative: {account.balance}"
                )

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, int | str | float | Decimal]]
    ) -> AccountLedger:
        """Build a ledger from ``(name, balance)`` pairs."""
        return cls([Account(name=name, balance=parse_amount(balance)) for name, balance in pairs])

    def __len__(self) -> int:
        return len(self.accounts)

    def _get(self, index: int) -> Account:
        if isinstance(index, bool) or not isinstance(index, int):
            raise AccountNotFoundError(f"Account {index!r} not found")
        if not 0 <= index < len(self.accounts):
            raise AccountNotFoundError(f"Account {index} not found")
        return self.accounts[index]

    def list(self) -> list[AccountView]:
        """Return one row per account, in position order."""
        return [
            AccountView(index=i, name=account.name, balance=account.balance)
            for i, account in enumerate(self.accounts)
        ]

    def show_balance(self, index: int) -> Decimal:
        """Return the balance of the account at ``index``."""
        account = self._get(index)
        logger.debug("Balance of %s: %s", account.name, account.balance)
        return account.balance

    def deposit(self, index: int, amount: int | str | float | Decimal) -> Decimal:
        """Credit ``amount`` to an account and return the new balance."""
        account = self._get(index)
        amount = _positive_amount(amount)

        account.balance = account.balance + amount
        logger.info("Deposited %s to %s, balance %s", amount, account.name, account.balance)
        return account.balance

    def withdraw(self, index: int, amount: int | str | float | Decimal) -> Decimal:
        """Debit ``amount`` from an account and return the new balance.

        All checks run before the balance is assigned, so a rejected
        withdrawal leaves the account untouched.
        """
        account = self._get(index)
        amount = _positive_amount(amount)
        if amount > account.balance:
            raise InsufficientFundsError(requested=amount, available=account.balance)

        account.balance = account.balance - amount
        logger.info("Withdrew %s from %s, balance %s", amount, account.name, account.balance)
        return account.balance

    def rename(self, index: int, new_name: str) -> str:
        """Replace an account's name and return the previous one."""
        account = self._get(index)
        new_name = (new_name or "").strip()
        if not new_name:
            raise InvalidNameError("Account name must not be empty")

        old_name = account.name
        account.name = new_name
        logger.info("Renamed account %d from %s to %s", index, old_name, new_name)
        return old_name
