"""
Conservation and Range Conformance Tests

INVARIANT 1: A send redistributes but never creates or destroys value.

    ∀ successful send(S, R, a):
        total_supply after = total_supply before

INVARIANT 2: Every balance stays within the integer width.

    ∀ accounts A, at all times:
        0 ≤ balance(A) ≤ max_balance

These tests drive the ledger with arbitrary operation sequences and check
it against a plain dict model.
"""

import pytest
from hypothesis import given, settings, note
from hypothesis import strategies as st

from accounting import (
    Accounts, Deposit, Withdraw,
    AccountingError, NotFound, UnderFunded, OverFunded,
)


SMALL_MAX = 1000

ACCOUNT_NAMES = ["alice", "bob", "charlie", "dave"]


# =============================================================================
# STRATEGIES FOR PROPERTY-BASED TESTING
# =============================================================================

@st.composite
def operation(draw, max_amount: int = SMALL_MAX):
    """Generate one deposit, withdraw or send with an amount in range."""
    kind = draw(st.sampled_from(["deposit", "withdraw", "send"]))
    amount = draw(st.integers(min_value=0, max_value=max_amount))
    account = draw(st.sampled_from(ACCOUNT_NAMES))
    if kind == "send":
        recipient = draw(st.sampled_from(ACCOUNT_NAMES))
        return (kind, account, recipient, amount)
    return (kind, account, amount)


@st.composite
def operation_sequence(draw, max_ops: int = 40):
    """Generate a list of operations, heavy enough to hit every error kind."""
    return draw(st.lists(operation(), min_size=1, max_size=max_ops))


def apply_to_model(model: dict, op: tuple, max_balance: int):
    """
    Apply an operation to a plain dict and return the expected outcome.

    Returns:
        The expected records, or the expected error
    """
    kind = op[0]
    if kind == "deposit":
        _, account, amount = op
        current = model.get(account)
        if current is not None and current + amount > max_balance:
            return OverFunded(account, amount)
        model[account] = (current or 0) + amount
        return [Deposit(account, amount)]
    if kind == "withdraw":
        _, account, amount = op
        if account not in model:
            return NotFound(account)
        if amount > model[account]:
            return UnderFunded(account, amount)
        model[account] -= amount
        return [Withdraw(account, amount)]

    _, sender, recipient, amount = op
    if sender not in model:
        return NotFound(sender)
    if amount > model[sender]:
        return UnderFunded(sender, amount)
    trial = dict(model)
    trial[sender] -= amount
    current = trial.get(recipient)
    if current is not None and current + amount > max_balance:
        return OverFunded(recipient, amount)
    trial[recipient] = (current or 0) + amount
    model.clear()
    model.update(trial)
    return [Withdraw(sender, amount), Deposit(recipient, amount)]


def apply_to_accounts(accounts: Accounts, op: tuple):
    kind = op[0]
    try:
        if kind == "deposit":
            return [accounts.deposit(op[1], op[2])]
        if kind == "withdraw":
            return [accounts.withdraw(op[1], op[2])]
        return list(accounts.send(op[1], op[2], op[3]))
    except AccountingError as e:
        return e


# =============================================================================
# PROPERTY TESTS
# =============================================================================

class TestLedgerMatchesModel:
    """The ledger behaves exactly like a checked dict of integers."""

    @given(operation_sequence())
    @settings(max_examples=200)
    def test_operations_match_model(self, ops):
        """
        PROPERTY: For any sequence of operations, each outcome (records or
        error) and the resulting balances equal the model's.
        """
        accounts = Accounts("test", max_balance=SMALL_MAX)
        model = {}

        for op in ops:
            expected = apply_to_model(model, op, SMALL_MAX)
            actual = apply_to_accounts(accounts, op)
            note(f"{op} -> {actual!r}")
            assert actual == expected
            assert accounts.balances() == model

    @given(operation_sequence())
    @settings(max_examples=100)
    def test_balances_stay_in_range(self, ops):
        """
        PROPERTY: 0 ≤ balance ≤ max_balance after every operation.
        """
        accounts = Accounts("test", max_balance=SMALL_MAX)
        for op in ops:
            apply_to_accounts(accounts, op)
            for balance in accounts.balances().values():
                assert 0 <= balance <= SMALL_MAX


class TestConservationProperties:
    """Sends conserve total supply; deposits and withdrawals shift it exactly."""

    @given(operation_sequence())
    @settings(max_examples=100)
    def test_supply_changes_only_by_deposits_and_withdrawals(self, ops):
        accounts = Accounts("test", max_balance=SMALL_MAX)
        expected_supply = 0

        for op in ops:
            result = apply_to_accounts(accounts, op)
            if isinstance(result, AccountingError):
                continue
            for tx in result:
                if op[0] == "send":
                    continue
                if isinstance(tx, Deposit):
                    expected_supply += tx.amount
                else:
                    expected_supply -= tx.amount
            assert accounts.total_supply() == expected_supply

    @given(
        st.integers(min_value=0, max_value=SMALL_MAX),
        st.integers(min_value=0, max_value=SMALL_MAX),
        st.integers(min_value=0, max_value=SMALL_MAX),
    )
    def test_send_conserves_supply(self, alice, bob, amount):
        accounts = Accounts("test", max_balance=SMALL_MAX, test_mode=True)
        accounts.set_balance("alice", alice)
        accounts.set_balance("bob", bob)
        supply = accounts.total_supply()

        try:
            accounts.send("alice", "bob", amount)
        except AccountingError:
            pass

        assert accounts.total_supply() == supply


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
