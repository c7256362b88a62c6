"""
Data models for the bank account system.

This module contains the Account and Bank classes. Accounts hold a balance
and an owner name; a Bank groups accounts and moves money between them.
"""

import logging
import weakref
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple, Union

from .exceptions import InsufficientFundsError, InvalidAmountError

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, str, float]


def to_decimal(value: Amount) -> Decimal:
    """Convert an amount to Decimal without going through binary floats."""
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(f"Invalid amount: {value!r}")

    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    return amount


def _checked_amount(value: Amount) -> Decimal:
    amount = to_decimal(value)
    if amount < 0:
        raise InvalidAmountError(f"Amount cannot be negative: {amount}")
    return amount


class Account:
    """Represents a bank account.

    Accounts compare by identity: two accounts with the same owner and
    balance are still different accounts.
    """

    def __init__(self, owner: str, balance: Amount):
        self._owner = owner
        self._balance = to_decimal(balance)
        self._bank_ref: Optional["weakref.ReferenceType[Bank]"] = None

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def bank(self) -> Optional["Bank"]:
        """The bank holding this account, if any."""
        if self._bank_ref is None:
            return None
        return self._bank_ref()

    def debit(self, amount: Amount) -> None:
        """Take money out of the account.

        An account whose balance is already negative refuses every debit,
        including a zero one.

        Raises:
            InsufficientFundsError: if amount is larger than the balance.
                The balance is left unchanged.
        """
        amount = _checked_amount(amount)

        if amount > self._balance:
            logger.warning(
                "Refused debit of %s from %s: balance is %s",
                amount, self._owner, self._balance
            )
            raise InsufficientFundsError()

        self._balance -= amount
        logger.debug("Debited %s from %s, balance %s", amount, self._owner, self._balance)

    def credit(self, amount: Amount) -> None:
        """Put money into the account."""
        amount = _checked_amount(amount)
        self._balance += amount
        logger.debug("Credited %s to %s, balance %s", amount, self._owner, self._balance)

    def __repr__(self) -> str:
        return f"Account(owner={self._owner!r}, balance={self._balance!r})"


@dataclass(eq=False)
class Bank:
    """A named group of accounts."""

    name: str = ""
    _accounts: List[Account] = field(default_factory=list, init=False, repr=False)

    @property
    def accounts(self) -> Tuple[Account, ...]:
        return tuple(self._accounts)

    def add_account(self, account: Account) -> None:
        """Register an account and point its bank reference here.

        Adding an account twice does nothing. An account held by another
        bank is moved to this one.
        """
        if account in self._accounts:
            return

        previous = account.bank
        if previous is not None:
            previous._accounts.remove(account)
            logger.debug("Moved %s from %r to %r", account.owner, previous.name, self.name)

        self._accounts.append(account)
        account._bank_ref = weakref.ref(self)
        logger.debug("Registered %s with %r", account.owner, self.name)

    def transfer(self, from_account: Account, to_account: Account, amount: Amount) -> None:
        """Move money from one account to another.

        The source is debited first, so an InsufficientFundsError leaves the
        destination untouched.
        """
        amount = to_decimal(amount)
        from_account.debit(amount)
        to_account.credit(amount)
        logger.debug(
            "Transferred %s from %s to %s at %r",
            amount, from_account.owner, to_account.owner, self.name
        )

    def find_account(self, owner: str) -> Optional[Account]:
        """Get the first registered account belonging to owner."""
        for account in self._accounts:
            if account.owner == owner:
                return account
        return None

    def total_balance(self) -> Decimal:
        """Sum of the balances of all registered accounts."""
        total = Decimal('0')
        for account in self._accounts:
            total += account.balance
        return total

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account: object) -> bool:
        return account in self._accounts
