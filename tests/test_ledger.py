"""Tests for PopulationLedger."""

from __future__ import annotations

import pytest

from critters.errors import InvariantViolation
from critters.simulation.ledger import PopulationLedger


def test_empty_ledger():
    ledger = PopulationLedger()
    assert ledger.counts() == {}
    assert ledger.total() == 0
    assert ledger.leader() is None
    assert ledger.get("Bear") == 0


def test_counts_are_sorted_by_name():
    ledger = PopulationLedger()
    for name in ("Tiger", "Bear", "Tiger", "NinjaCat"):
        ledger.increment(name)

    assert list(ledger.counts().items()) == [("Bear", 1), ("NinjaCat", 1), ("Tiger", 2)]
    assert ledger.total() == 4


def test_decrement_below_zero_raises():
    ledger = PopulationLedger()
    ledger.increment("Bear")
    ledger.decrement("Bear")

    with pytest.raises(InvariantViolation):
        ledger.decrement("Bear")
    with pytest.raises(InvariantViolation):
        ledger.decrement("Tiger")


def test_extinct_species_keeps_zero_entry():
    ledger = PopulationLedger()
    ledger.increment("Bear")
    ledger.increment("Tiger")
    ledger.decrement("Bear")

    assert ledger.counts() == {"Bear": 0, "Tiger": 1}


def test_leader_breaks_ties_by_name():
    ledger = PopulationLedger()
    for name in ("Tiger", "Tiger", "Bear", "Bear", "NinjaCat"):
        ledger.increment(name)

    assert ledger.leader() == "Bear"

    ledger.increment("Tiger")
    assert ledger.leader() == "Tiger"
