"""
shell.py - Interactive command loop around an Accounts ledger

Reads one command at a time from stdin, collects its arguments, calls the
ledger and appends any returned records to an in-memory transaction log.
Errors are reported and the loop keeps going.

Run:
    python -m accounting                  # default ledger
    python -m accounting --verbose        # print every applied/rejected op
    python -m accounting --max-balance 1000
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple
import argparse
import sys

from .accounts import Accounts
from .core import (
    AccountingError, Tx,
    MAX_BALANCE, DEFAULT_LEDGER_NAME,
)


COMMANDS = ("deposit", "withdraw", "send", "print", "quit")
PROMPT = f"Please choose [{', '.join(COMMANDS)}] and hit return:"


# ============================================================================
# CONFIGURATION
# ============================================================================

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="accounting",
        description="Interactive integer account ledger.",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Print every applied, rejected or rolled-back operation.",
    )
    p.add_argument(
        "--max-balance",
        type=int,
        default=MAX_BALANCE,
        help="Largest balance an account may hold (default: 2**64 - 1).",
    )
    p.add_argument(
        "--name",
        default=DEFAULT_LEDGER_NAME,
        help="Ledger name shown by the print command.",
    )
    return p.parse_args(argv)


@dataclass
class ShellConfig:
    """Options for a shell session."""
    name: str = DEFAULT_LEDGER_NAME
    max_balance: int = MAX_BALANCE
    verbose: bool = False

    @classmethod
    def from_argv(cls, argv: Optional[Sequence[str]] = None) -> ShellConfig:
        """
        Build a config from command-line arguments.

        Raises:
            SystemExit: On an unknown flag or a missing/invalid value
        """
        args = parse_args(argv)
        return cls(name=args.name, max_balance=args.max_balance, verbose=args.verbose)


class InputResult(Enum):
    """What a single input cycle produced."""
    QUIT = "quit"
    PRINT = "print"
    CONFIRMED = "confirmed"
    NOT_SUPPORTED = "not_supported"


# ============================================================================
# INPUT HELPERS
# ============================================================================

def read_from_stdin(label: str) -> str:
    """Print a label and return the next stripped line from stdin."""
    print(label)
    return input().strip()


def read_amount(label: str) -> int:
    """
    Read a non-negative integer amount.

    Raises:
        ValueError: If the input is not a base-10 non-negative integer
    """
    text = read_from_stdin(label)
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid amount: {text!r}")
    return int(text)


def format_ledger(accounts: Accounts) -> str:
    """Render the ledger as a header plus one `account: balance` line each."""
    balances = accounts.balances()
    lines = [f"ledger: {accounts.name} ({len(balances)} accounts)"]
    width = max((len(a) for a in balances), default=0)
    for account in sorted(balances):
        lines.append(f"  {account:<{width}} : {balances[account]}")
    return "\n".join(lines)


# ============================================================================
# COMMAND LOOP
# ============================================================================

def handle_input(accounts: Accounts) -> Tuple[InputResult, List[Tx]]:
    """
    Run one input cycle: read a command, its arguments, and apply it.

    Returns:
        (result kind, records confirmed by the ledger in this cycle)

    Raises:
        AccountingError: If the ledger rejects the operation
        ValueError: If an amount or account argument is malformed
    """
    command = read_from_stdin(PROMPT)

    if command == "deposit":
        account = read_from_stdin("Account:")
        amount = read_amount("Amount:")
        return InputResult.CONFIRMED, [accounts.deposit(account, amount)]
    if command == "withdraw":
        account = read_from_stdin("Account:")
        amount = read_amount("Amount:")
        return InputResult.CONFIRMED, [accounts.withdraw(account, amount)]
    if command == "send":
        sender = read_from_stdin("Sender:")
        amount = read_amount("Amount:")
        recipient = read_from_stdin("Receiver:")
        return InputResult.CONFIRMED, list(accounts.send(sender, recipient, amount))
    if command == "print":
        print(format_ledger(accounts))
        return InputResult.PRINT, []
    if command == "quit":
        return InputResult.QUIT, []

    print("command not supported")
    return InputResult.NOT_SUPPORTED, []


def run(accounts: Accounts, tx_log: Optional[List[Tx]] = None) -> List[Tx]:
    """
    Loop over input cycles until `quit` or end of input.

    Returns:
        The transaction log, with every confirmed record appended in order
    """
    if tx_log is None:
        tx_log = []
    while True:
        try:
            result, txs = handle_input(accounts)
        except EOFError:
            break
        except (AccountingError, ValueError) as e:
            print(f"encountered error: {e}")
            continue
        if result == InputResult.QUIT:
            break
        tx_log.extend(txs)
    return tx_log


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point. Returns the process exit code."""
    config = ShellConfig.from_argv(argv)
    try:
        accounts = Accounts(
            name=config.name,
            max_balance=config.max_balance,
            verbose=config.verbose,
        )
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 2

    tx_log = run(accounts)
    if config.verbose:
        print(f"{len(tx_log)} transactions recorded")
    return 0
