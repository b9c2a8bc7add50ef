"""Agent registry: manages agent lifecycle (seed, spawn, removal, lookup)."""

from __future__ import annotations

import itertools
import logging
import random

from critters.errors import CapacityError, ConfigurationError, InvariantViolation, SpeciesError
from critters.simulation.actions import Direction
from critters.simulation.entities import Agent
from critters.simulation.grid import Grid
from critters.species.base import Species, SpeciesFactory

logger = logging.getLogger(__name__)


class AgentRegistry:
    """Manages agent lifecycle: seeding, spawning, removal, lookup.

    Single source of truth for all live agents. Ids are integer handles that
    are never reused within a run.
    """

    def __init__(self, grid: Grid, rng: random.Random):
        self._grid = grid
        self._rng = rng
        self._agents: dict[int, Agent] = {}
        self._ids = itertools.count(1)

    def seed(self, count: int, species: str, factory: SpeciesFactory) -> list[Agent]:
        """Place `count` new agents on distinct random free cells.

        Cells are drawn uniformly without replacement and each agent gets a
        uniformly random facing. Nothing is placed if there is not enough room
        or if the factory fails for any of the critters.
        """
        if count < 0:
            raise ConfigurationError(f"Cannot seed a negative number of critters ({count})")
        if count == 0:
            return []

        free = self._grid.free_cells()
        if count > len(free):
            raise CapacityError(count, len(free))

        cells = self._rng.sample(free, count)
        critters = [self._build(species, factory) for _ in cells]

        directions = list(Direction)
        return [
            self._insert(species, critter, x, y, self._rng.choice(directions))
            for (x, y), critter in zip(cells, critters)
        ]

    def spawn(self, species: str, critter: Species, x: int, y: int, facing: Direction) -> Agent:
        """Place one agent at an explicit cell."""
        if not self._grid.in_bounds((x, y)):
            raise ConfigurationError(f"Cannot spawn critter at ({x}, {y}): out of bounds")
        if self._grid.occupant_at((x, y)) is not None:
            raise CapacityError(1, 0)
        return self._insert(species, critter, x, y, facing)

    def replace(self, victim_id: int, species: str, factory: SpeciesFactory, facing: Direction) -> Agent:
        """Remove a victim and put a fresh agent of `species` in its cell."""
        victim = self.require(victim_id)
        x, y = victim.position
        self.remove(victim_id)
        critter = self._build(species, factory)
        return self._insert(species, critter, x, y, facing)

    def remove(self, agent_id: int) -> Agent:
        """Remove an agent from the registry and its grid slot."""
        agent = self._agents.pop(agent_id, None)
        if agent is None:
            raise InvariantViolation(f"Agent {agent_id} is not alive")
        if self._grid.occupant_at(agent.position) != agent_id:
            raise InvariantViolation(f"Agent {agent_id} is not in its recorded cell {agent.position}")
        self._grid.clear(agent.position)
        return agent

    def get(self, agent_id: int) -> Agent | None:
        """Look up a living agent by id."""
        return self._agents.get(agent_id)

    def require(self, agent_id: int) -> Agent:
        """Look up a living agent, treating absence as an engine bug."""
        agent = self._agents.get(agent_id)
        if agent is None:
            raise InvariantViolation(f"Grid refers to unknown agent {agent_id}")
        return agent

    def snapshot(self) -> list[int]:
        """Ids of all living agents in a fresh random order."""
        ids = list(self._agents)
        self._rng.shuffle(ids)
        return ids

    def living_agents(self) -> list[Agent]:
        """All living agents, in creation order."""
        return list(self._agents.values())

    def refresh_appearance(self, agent_id: int) -> None:
        """Recompute and cache one agent's color and glyph."""
        agent = self.require(agent_id)
        try:
            agent.color = agent.critter.color()
            agent.glyph = agent.critter.glyph()
        except Exception as e:
            raise SpeciesError(agent.species, "appearance", repr(e)) from e

    def refresh_all(self) -> None:
        """Refresh cached appearance for every living agent."""
        for agent_id in list(self._agents):
            self.refresh_appearance(agent_id)

    @property
    def count_living(self) -> int:
        return len(self._agents)

    def _build(self, species: str, factory: SpeciesFactory) -> Species:
        try:
            return factory(self._rng)
        except Exception as e:
            raise SpeciesError(species, "factory", repr(e)) from e

    def _insert(self, species: str, critter: Species, x: int, y: int, facing: Direction) -> Agent:
        agent = Agent(
            agent_id=next(self._ids),
            species=species,
            critter=critter,
            x=x,
            y=y,
            facing=facing,
        )
        self._grid.place((x, y), agent.agent_id)
        self._agents[agent.agent_id] = agent
        return agent
