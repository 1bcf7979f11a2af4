"""
accounts.py - In-memory integer ledger

The Accounts class is the central state manager of the accounting package.
It is the only object that mutates balances.

Key responsibilities:
    - Holds the account -> balance mapping
    - Applies deposit, withdraw and send with checked arithmetic
    - Detects every error before a mutation is committed
    - Rolls back the withdraw half of a send when the deposit half fails
"""

from __future__ import annotations
from typing import List, Tuple

from .core import (
    # Types
    Deposit, Withdraw, BalanceMap,
    # Constants
    MAX_BALANCE, DEFAULT_LEDGER_NAME,
    # Exceptions
    AccountingError, NotFound, UnderFunded, OverFunded,
    # Helper functions
    checked_add, checked_sub, validate_account, validate_amount,
)


class Accounts:
    """
    Ledger of accounts and their current integer balance.

    Design Principles:
        - Errors before mutation: every operation validates first and only
          then writes a single balance entry.
        - All-or-nothing send: a transfer either moves the full amount or
          leaves both accounts untouched.
        - Records out, not in: successful operations return Deposit/Withdraw
          records for the caller to log. The ledger keeps no history.

    Thread Safety:
        Not thread-safe. Each thread should maintain its own Accounts instance.

    Example:
        accounts = Accounts("main")
        accounts.deposit("alice", 50)
        withdraw_tx, deposit_tx = accounts.send("alice", "bob", 50)
    """

    def __init__(
        self,
        name: str = DEFAULT_LEDGER_NAME,
        max_balance: int = MAX_BALANCE,
        verbose: bool = False,
        test_mode: bool = False
    ):
        """
        Create an empty ledger.

        Args:
            name: Ledger identifier used in output
            max_balance: Largest balance an account may hold (default: 2**64 - 1)
            verbose: Print one line per applied or rejected operation
            test_mode: Allow set_balance() calls (default: False)
        """
        if isinstance(max_balance, bool) or not isinstance(max_balance, int) or max_balance <= 0:
            raise ValueError(f"max_balance must be a positive int, got {max_balance!r}")
        self.name = name
        self.max_balance = max_balance
        self.verbose = verbose
        self._test_mode = test_mode
        self._balances: BalanceMap = {}

    # ========================================================================
    # READ-ONLY INSPECTION
    # ========================================================================

    def balances(self) -> BalanceMap:
        """Return a copy of the full account -> balance mapping."""
        return dict(self._balances)

    def get_balance(self, account: str) -> int:
        """
        Get the balance of an account.

        Raises:
            NotFound: If the account has never been deposited into
        """
        if account not in self._balances:
            raise NotFound(account)
        return self._balances[account]

    def list_accounts(self) -> List[str]:
        """List all account identifiers, sorted."""
        return sorted(self._balances)

    def total_supply(self) -> int:
        """Sum of all balances, accumulated in sorted account order."""
        return sum(self._balances[a] for a in sorted(self._balances))

    def __contains__(self, account: object) -> bool:
        return account in self._balances

    def __len__(self) -> int:
        return len(self._balances)

    def __repr__(self) -> str:
        return f"Accounts(name={self.name!r}, accounts={self._balances!r})"

    # ========================================================================
    # TEST SUPPORT
    # ========================================================================

    def set_balance(self, account: str, amount: int) -> None:
        """
        Set an account's balance directly.

        WARNING: This bypasses deposit/withdraw and is only available in
        test mode.

        Raises:
            AccountingError: If called when test_mode is False
        """
        if not self._test_mode:
            raise AccountingError(
                account,
                "set_balance() is disabled in production mode. "
                "Use deposit(), withdraw() or send() to modify balances. "
                "Set test_mode=True when creating Accounts for testing."
            )
        validate_account(account)
        validate_amount(amount, self.max_balance)
        self._balances[account] = amount

    # ========================================================================
    # BALANCE OPERATIONS (Mutating)
    # ========================================================================

    def deposit(self, account: str, amount: int) -> Deposit:
        """
        Credit `amount` to `account`, creating the account if needed.

        Returns:
            Deposit record for the committed change

        Raises:
            OverFunded: If the new balance would exceed max_balance.
                        The balance is left unchanged.
        """
        validate_account(account)
        validate_amount(amount, self.max_balance)

        current = self._balances.get(account)
        if current is None:
            # Amount is already within range, so a new account cannot overflow
            self._balances[account] = amount
        else:
            new_balance = checked_add(current, amount, self.max_balance)
            if new_balance is None:
                raise self._reject(OverFunded(account, amount))
            self._balances[account] = new_balance

        tx = Deposit(account, amount)
        self._log("✓", f"APPLIED: {tx!r}")
        return tx

    def withdraw(self, account: str, amount: int) -> Withdraw:
        """
        Debit `amount` from an existing account.

        An account withdrawn down to zero keeps its (zero) entry.

        Returns:
            Withdraw record for the committed change

        Raises:
            NotFound: If the account does not exist
            UnderFunded: If amount exceeds the current balance
        """
        validate_account(account)
        validate_amount(amount, self.max_balance)

        if account not in self._balances:
            raise self._reject(NotFound(account))
        new_balance = checked_sub(self._balances[account], amount)
        if new_balance is None:
            raise self._reject(UnderFunded(account, amount))
        self._balances[account] = new_balance

        tx = Withdraw(account, amount)
        self._log("✓", f"APPLIED: {tx!r}")
        return tx

    def send(self, sender: str, recipient: str, amount: int) -> Tuple[Withdraw, Deposit]:
        """
        Move `amount` from sender to recipient atomically.

        Withdraws from the sender, then deposits to the recipient. If the
        deposit fails the sender's balance is restored to its value before
        the call and the deposit's error is raised unchanged.

        Returns:
            (Withdraw record, Deposit record)

        Raises:
            NotFound: If the sender does not exist
            UnderFunded: If the sender cannot cover amount
            OverFunded: If the recipient would overflow (sender rolled back)
        """
        validate_account(sender)
        validate_account(recipient)
        validate_amount(amount, self.max_balance)

        if sender not in self._balances:
            raise self._reject(NotFound(sender))

        snapshot = self._balances[sender]
        withdraw_tx = self.withdraw(sender, amount)
        try:
            deposit_tx = self.deposit(recipient, amount)
        except OverFunded:
            self._balances[sender] = snapshot
            self._log("↺", f"ROLLED BACK: {sender} restored to {snapshot}")
            raise
        return withdraw_tx, deposit_tx

    # ========================================================================
    # OUTPUT
    # ========================================================================

    def _reject(self, error: AccountingError) -> AccountingError:
        self._log("✗", f"REJECTED: {error}")
        return error

    def _log(self, icon: str, message: str) -> None:
        if self.verbose:
            print(f"{icon} [{self.name}] {message}")
