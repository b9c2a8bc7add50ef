"""Tests for SimulationConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from critters.config import SimulationConfig


def test_defaults():
    config = SimulationConfig()

    assert config.world_width == 60
    assert config.world_height == 50
    assert config.hop_advantage == 0.2
    assert config.check_invariants is True
    assert config.species_counts == {"Bear": 30, "Tiger": 30, "WhiteTiger": 30, "NinjaCat": 30}


def test_env_override(monkeypatch):
    monkeypatch.setenv("CRITTERS_HOP_ADVANTAGE", "0.5")
    monkeypatch.setenv("CRITTERS_WORLD_WIDTH", "12")
    monkeypatch.setenv("CRITTERS_SPECIES_COUNTS", '{"Bear": 3}')

    config = SimulationConfig()

    assert config.hop_advantage == 0.5
    assert config.world_width == 12
    assert config.species_counts == {"Bear": 3}


@pytest.mark.parametrize(
    "field,value",
    [
        ("world_width", 0),
        ("world_height", -3),
        ("hop_advantage", 1.5),
        ("hop_advantage", -0.1),
        ("max_ticks", -1),
        ("tick_delay", -0.5),
        ("block_size", 0),
    ],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        SimulationConfig(**{field: value})


def test_hop_advantage_flows_into_engine(make_world):
    world = make_world(3, 3, hop_advantage=0.0)
    assert world.engine.hop_advantage == 0.0
