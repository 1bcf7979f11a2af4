"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the Accounts ledger.

The tests are organized by invariant:
1. atomicity.py - All-or-nothing send semantics and rollback
2. conservation.py - Sends conserve supply; balances stay in range
3. failure_idempotency.py - Failed operations never change state

These tests use hypothesis for property-based testing.
"""
