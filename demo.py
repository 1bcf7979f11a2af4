#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Learn the Accounts Ledger Step by Step

Each step builds on the previous one. Press Enter to advance.

WHAT YOU'LL LEARN:
  1-2: Foundation  - The empty ledger, first deposits
  3-4: Transfers   - Sending between accounts, rejected withdrawals
  5-6: Safety      - Overflow protection, all-or-nothing sends
  7:   The Log     - Records returned to the caller, draining the ledger

Run:
    python demo.py           # Interactive mode (press Enter for each step)
    python demo.py --quick   # Run all steps without pausing
"""

from dataclasses import dataclass
from typing import List
import sys

from accounting import (
    Accounts, Tx,
    AccountingError, OverFunded,
    MAX_BALANCE,
    format_ledger,
)


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Configuration for the tutorial. Modify these to experiment."""
    initial_amount: int = 100
    send_amount: int = 10


CONFIG = DemoConfig()

QUICK_MODE = "--quick" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    """Print a step header with learning objective."""
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


# ============================================================================
# STEPS
# ============================================================================

def step_01_empty_ledger() -> Accounts:
    step_header(1, "The Empty Ledger",
        "A ledger starts with no accounts at all.")

    print(">>> accounts = Accounts('tutorial', verbose=True)")
    accounts = Accounts("tutorial", verbose=True)
    print(format_ledger(accounts))
    print(f"\nBalances are unsigned integers capped at {MAX_BALANCE}.")
    return accounts


def step_02_deposits(accounts: Accounts, tx_log: List[Tx]):
    step_header(2, "First Deposits",
        "Depositing into an unknown account opens it.")

    for account in ("bob", "alice", "charlie"):
        print(f">>> accounts.deposit({account!r}, {CONFIG.initial_amount})")
        tx_log.append(accounts.deposit(account, CONFIG.initial_amount))
    print()
    print(format_ledger(accounts))


def step_03_send(accounts: Accounts, tx_log: List[Tx]):
    step_header(3, "Sending",
        "A send yields one Withdraw and one Deposit record.")

    print(f">>> accounts.send('bob', 'alice', {CONFIG.send_amount})")
    withdraw_tx, deposit_tx = accounts.send("bob", "alice", CONFIG.send_amount)
    tx_log.extend([withdraw_tx, deposit_tx])
    print(f"\nRecords: {withdraw_tx!r}, {deposit_tx!r}")


def step_04_rejected_withdraw(accounts: Accounts):
    step_header(4, "Rejected Withdrawal",
        "Withdrawing more than the balance fails and changes nothing.")

    print(f">>> accounts.withdraw('bob', {CONFIG.initial_amount})")
    try:
        accounts.withdraw("bob", CONFIG.initial_amount)
    except AccountingError as e:
        print(f"\nRaised {type(e).__name__}: {e}")
    print(f"bob still has {accounts.get_balance('bob')}")


def step_05_overflow(accounts: Accounts, tx_log: List[Tx]):
    step_header(5, "Overflow Protection",
        "Deposits that would exceed the integer width are refused.")

    print(f">>> accounts.deposit('whale', {MAX_BALANCE})")
    tx_log.append(accounts.deposit("whale", MAX_BALANCE))
    print(">>> accounts.deposit('whale', 1)")
    try:
        accounts.deposit("whale", 1)
    except OverFunded as e:
        print(f"\nRaised OverFunded: {e}")


def step_06_atomic_send(accounts: Accounts):
    step_header(6, "All-or-Nothing Sends",
        "If the recipient overflows, the sender gets its money back.")

    before = accounts.get_balance("alice")
    print(">>> accounts.send('alice', 'whale', 5)")
    try:
        accounts.send("alice", "whale", 5)
    except OverFunded as e:
        print(f"\nRaised OverFunded: {e}")
    print(f"alice before: {before}, after: {accounts.get_balance('alice')}")


def step_07_drain(accounts: Accounts, tx_log: List[Tx]):
    step_header(7, "The Transaction Log",
        "The caller owns the log; the ledger only returns records.")

    for account in ("charlie", "alice", "bob", "whale"):
        amount = accounts.get_balance(account)
        print(f">>> accounts.withdraw({account!r}, {amount})")
        tx_log.append(accounts.withdraw(account, amount))

    print()
    print(format_ledger(accounts))
    print(f"\nThe TX log ({len(tx_log)} records):")
    for i, tx in enumerate(tx_log):
        print(f"  [{i}] {tx!r}")


def main():
    """Run every step and return the ledger with the caller-side log."""
    print("=" * 70)
    print("       ACCOUNTS LEDGER TUTORIAL")
    print("=" * 70)

    tx_log: List[Tx] = []

    accounts = step_01_empty_ledger()
    wait_for_enter()

    step_02_deposits(accounts, tx_log)
    wait_for_enter()

    step_03_send(accounts, tx_log)
    wait_for_enter()

    step_04_rejected_withdraw(accounts)
    wait_for_enter()

    step_05_overflow(accounts, tx_log)
    wait_for_enter()

    step_06_atomic_send(accounts)
    wait_for_enter()

    step_07_drain(accounts, tx_log)

    print("\n" + "=" * 70)
    print("       TUTORIAL COMPLETE!")
    print("=" * 70)
    print("""
    Next steps:
      - Run the interactive shell: python -m accounting
      - Run tests: pytest tests/
    """)
    return accounts, tx_log


if __name__ == "__main__":
    main()
