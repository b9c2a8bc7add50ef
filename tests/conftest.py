"""Shared test fixtures for the critters test suite."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from critters.config import SimulationConfig
from critters.simulation.world import World, WorldGuard
from critters.species.registry import SpeciesRegistry


@pytest.fixture
def config() -> SimulationConfig:
    """Deterministic config with invariant checks on."""
    return SimulationConfig(seed=42, check_invariants=True)


@pytest.fixture
def guard() -> WorldGuard:
    """A private active-world guard so tests never contend for the global one."""
    return WorldGuard()


@pytest.fixture
def make_world(config: SimulationConfig, guard: WorldGuard):
    """Factory for worlds that are closed at teardown.

    Each call closes the previous world first, since a guard only allows
    one live world.
    """
    worlds: list[World] = []

    def _make(
        width: int,
        height: int,
        species: SpeciesRegistry | None = None,
        rng: random.Random | None = None,
        **overrides,
    ) -> World:
        for old in worlds:
            old.close()
        cfg = config.model_copy(update=overrides) if overrides else config
        world = World(width, height, config=cfg, species=species, rng=rng, guard=guard)
        worlds.append(world)
        return world

    yield _make

    for world in worlds:
        world.close()


@pytest.fixture
def world(make_world: Callable[..., World]) -> World:
    """A 20x20 world with the built-in species, not yet seeded."""
    return make_world(20, 20)


@pytest.fixture
def seeded_world(world: World) -> World:
    """The 20x20 world with ten of each built-in species."""
    for name in ("Bear", "Tiger", "WhiteTiger", "NinjaCat"):
        world.add_species(10, name)
    return world
