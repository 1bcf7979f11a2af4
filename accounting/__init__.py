"""
accounting - Integer Account Ledger

A minimal ledger core with checked arithmetic and atomic transfers.

Usage:
    from accounting import Accounts, UnderFunded

    accounts = Accounts("main")
    accounts.deposit("alice", 50)
    accounts.deposit("bob", 0)

    # Transfer between accounts (all-or-nothing)
    withdraw_tx, deposit_tx = accounts.send("alice", "bob", 50)

    try:
        accounts.withdraw("alice", 1)
    except UnderFunded as e:
        print(e)
"""

# Core types
from .core import (
    Deposit,
    Withdraw,
    Tx,
    BalanceMap,
    AccountingError,
    NotFound,
    UnderFunded,
    OverFunded,
    checked_add,
    checked_sub,
    MAX_BALANCE,
    DEFAULT_LEDGER_NAME,
)

# Ledger
from .accounts import Accounts

# Shell
from .shell import ShellConfig, InputResult, format_ledger, run

__all__ = [
    # Core
    'Deposit', 'Withdraw', 'Tx', 'BalanceMap',
    'AccountingError', 'NotFound', 'UnderFunded', 'OverFunded',
    'checked_add', 'checked_sub',
    'MAX_BALANCE', 'DEFAULT_LEDGER_NAME',
    # Ledger
    'Accounts',
    # Shell
    'ShellConfig', 'InputResult', 'format_ledger', 'run',
]

__version__ = '0.1.0'
