"""
minibank

An in-memory bank account model with a small CLI.
Supports debits, credits and transfers between accounts held by a bank.
"""

__version__ = "0.1.0"

from typing import Iterable, Tuple

from .exceptions import BankError, InsufficientFundsError, InvalidAmountError
from .models import Account, Bank, Amount, to_decimal
from .cli import main


def create_bank(name: str, balances: Iterable[Tuple[str, Amount]] = ()) -> Bank:
    """
    Create a Bank with one registered account per (owner, balance) pair.

    Args:
        name: Name of the bank
        balances: Pairs of owner name and opening balance

    Returns:
        Bank instance
    """
    bank = Bank(name)
    for owner, balance in balances:
        bank.add_account(Account(owner, balance))
    return bank


__all__ = [
    "Account",
    "Bank",
    "Amount",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "create_bank",
    "to_decimal",
    "main"
]
