"""
Exceptions raised by the account model.
"""


class BankError(Exception):
    """Base exception for all account and bank errors."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a debit is larger than the current balance."""

    def __init__(self, message: str = "Insufficient Funds"):
        super().__init__(message)


class InvalidAmountError(BankError, ValueError):
    """Raised when an amount is negative or cannot be read as a decimal."""
    pass
