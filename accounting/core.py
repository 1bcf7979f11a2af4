"""
Core types for the accounting ledger.

This module provides the foundational data structures used by the ledger:
1. Constants: integer width of a balance, default ledger name
2. Immutable transaction records: Deposit, Withdraw
3. Exceptions: AccountingError and the three domain-specific error types
4. Checked arithmetic and argument validation helpers

Nothing in this module mutates ledger state. The Accounts class in
accounts.py is the only mutator of balances.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Union


# ============================================================================
# CONSTANTS
# ============================================================================

# Balances are unsigned 64-bit integers in the smallest currency denomination.
MAX_BALANCE = 2**64 - 1

DEFAULT_LEDGER_NAME = "main"


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Mapping from account identifier to its current balance.
BalanceMap = Dict[str, int]


# ============================================================================
# EXCEPTIONS
# ============================================================================

class AccountingError(Exception):
    """
    Base exception for all ledger operation failures.

    Every error refers to the account that caused it. Errors compare equal
    when they have the same type, account and amount, so a caller can check
    exactly which failure was surfaced.
    """

    __match_args__ = ("account",)

    def __init__(self, account: str, message: str):
        super().__init__(message)
        self.account = account

    def _key(self):
        return (type(self), self.account)

    def __eq__(self, other):
        if not isinstance(other, AccountingError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    # Exception.__reduce__ replays self.args, which holds only the message.
    def __reduce__(self):
        return (type(self), (self.account, str(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.account!r})"


class NotFound(AccountingError):
    """Raised when an operation references an account with no balance entry."""

    def __init__(self, account: str):
        super().__init__(account, f"Account {account} not found")

    def __reduce__(self):
        return (type(self), (self.account,))


class _AmountError(AccountingError):
    """An error that also reports the amount being moved."""

    __match_args__ = ("account", "amount")

    def __init__(self, account: str, amount: int, message: str):
        super().__init__(account, message)
        self.amount = amount

    def _key(self):
        return (type(self), self.account, self.amount)

    # Subclasses take (account, amount) and build their own message.
    def __reduce__(self):
        return (type(self), (self.account, self.amount))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.account!r}, {self.amount})"


class UnderFunded(_AmountError):
    """Raised when a withdrawal exceeds the account's current balance."""

    def __init__(self, account: str, amount: int):
        super().__init__(
            account, amount,
            f"Account {account} is underfunded; required amount is {amount}",
        )


class OverFunded(_AmountError):
    """
    Raised when a deposit would push the balance past the integer width.

    Carries the attempted deposit amount, not the overflowed result. The
    message reads "cannot deposit {amount}" rather than "maximum allowed
    amount is {amount}", since the number shown is the rejected deposit and
    not a limit.
    """

    def __init__(self, account: str, amount: int):
        super().__init__(
            account, amount,
            f"Account {account} is overfunded; cannot deposit {amount}",
        )


# ============================================================================
# TRANSACTION RECORDS
# ============================================================================

@dataclass(frozen=True, slots=True)
class Deposit:
    """
    A committed credit of `amount` to `account`.

    Created only as the result of a successful ledger operation. Immutable
    (frozen=True) and memory-optimized (slots=True).
    """
    account: str
    amount: int

    def __repr__(self) -> str:
        return f"Deposit({self.amount} → {self.account})"


@dataclass(frozen=True, slots=True)
class Withdraw:
    """A committed debit of `amount` from `account`."""
    account: str
    amount: int

    def __repr__(self) -> str:
        return f"Withdraw({self.amount} ← {self.account})"


# A send has no record of its own: it yields one Withdraw and one Deposit.
Tx = Union[Deposit, Withdraw]


# ============================================================================
# CHECKED ARITHMETIC
# ============================================================================

def checked_add(balance: int, amount: int, max_balance: int = MAX_BALANCE) -> Optional[int]:
    """Return balance + amount, or None if the sum exceeds max_balance."""
    total = balance + amount
    if total > max_balance:
        return None
    return total


def checked_sub(balance: int, amount: int) -> Optional[int]:
    """Return balance - amount, or None if the result would be negative."""
    if amount > balance:
        return None
    return balance - amount


# ============================================================================
# ARGUMENT VALIDATION
# ============================================================================

def validate_account(account: str) -> str:
    """
    Check that an account identifier is a non-empty string.

    Raises:
        TypeError: If account is not a str
        ValueError: If account is empty or only whitespace
    """
    if not isinstance(account, str):
        raise TypeError(f"Account must be str, got {type(account).__name__}")
    if not account.strip():
        raise ValueError("Account cannot be empty")
    return account


def validate_amount(amount: int, max_balance: int = MAX_BALANCE) -> int:
    """
    Check that an amount fits the ledger's unsigned integer width.

    Raises:
        TypeError: If amount is not an int (bool is rejected too)
        ValueError: If amount is negative or larger than max_balance
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"Amount must be int, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError(f"Amount cannot be negative, got {amount}")
    if amount > max_balance:
        raise ValueError(f"Amount {amount} exceeds maximum balance {max_balance}")
    return amount
