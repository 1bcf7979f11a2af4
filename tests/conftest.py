"""
conftest.py - Shared pytest fixtures for accounting tests

Provides common fixtures used across unit, conformance and functional tests:
- Empty ledger in test mode
- Funded ledger (alice has 50, bob has 0)
- Saturated ledger (bob sits at the maximum balance)
- Small-width ledger for cheap overflow checks
"""

import pytest

from accounting import Accounts, MAX_BALANCE


# =============================================================================
# BASIC FIXTURES
# =============================================================================

@pytest.fixture
def accounts():
    """Fresh ledger with no accounts."""
    return Accounts("test", test_mode=True)


@pytest.fixture
def funded_accounts(accounts):
    """Ledger where alice has 50 and bob has an explicit zero balance."""
    accounts.deposit("alice", 50)
    accounts.deposit("bob", 0)
    return accounts


@pytest.fixture
def saturated_accounts(accounts):
    """Ledger where alice has 50 and bob already holds the maximum balance."""
    accounts.deposit("alice", 50)
    accounts.deposit("bob", MAX_BALANCE)
    return accounts


@pytest.fixture
def small_accounts():
    """Ledger with a 100-unit balance ceiling."""
    ledger = Accounts("small", max_balance=100, test_mode=True)
    ledger.set_balance("alice", 60)
    ledger.set_balance("bob", 90)
    return ledger
