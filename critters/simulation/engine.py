"""Step engine: resolves one tick of critter intents into the next grid state.

Each tick visits every live critter once in a fresh random order. Hops and
infections take effect immediately, and a tick-local lock set keeps a critter
that just moved or was just converted from being infected again in the same
tick, which rules out chain conversions.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from critters.errors import InvariantViolation, SpeciesError
from critters.simulation.actions import Action
from critters.simulation.entities import Agent
from critters.simulation.grid import Grid
from critters.simulation.ledger import PopulationLedger
from critters.simulation.registry import AgentRegistry
from critters.simulation.sensors import SensorSystem, View
from critters.species.registry import SpeciesRegistry

logger = logging.getLogger(__name__)

HOP_ADVANTAGE = 0.2


@dataclass
class Infection:
    """One successful conversion."""

    actor_id: int
    victim_id: int
    new_id: int
    position: tuple[int, int]
    species: str  # actor's species, now also the new agent's
    victim_species: str


@dataclass
class TickRecord:
    """Record of a single simulation tick."""

    tick: int
    hops: int = 0
    turns: int = 0
    blocked_hops: int = 0
    failed_infections: int = 0
    infections: list[Infection] = field(default_factory=list)


class StepEngine:
    """Core simulation engine.

    Exclusively owns the grid, the agent registry and the population ledger.
    Not safe to call concurrently; one ``step()`` is the unit of atomicity.
    """

    def __init__(
        self,
        width: int,
        height: int,
        species: SpeciesRegistry,
        rng: random.Random,
        hop_advantage: float = HOP_ADVANTAGE,
        check_invariants: bool = True,
    ):
        self.grid = Grid(width, height)
        self.rng = rng
        self.species = species
        self.registry = AgentRegistry(self.grid, rng)
        self.ledger = PopulationLedger()
        self.sensors = SensorSystem(self.grid, self.registry)
        self.hop_advantage = hop_advantage
        self.check_invariants = check_invariants
        self.tick = 0

    def step(self) -> TickRecord:
        """Execute one tick for all live agents.

        Process:
        1. Advance the tick counter
        2. Snapshot live ids in random order
        3. For each agent still alive: sense, decide, apply
        4. Refresh cached appearance for everyone
        """
        self.tick += 1
        record = TickRecord(tick=self.tick)
        locked: set[int] = set()

        for agent_id in self.registry.snapshot():
            agent = self.registry.get(agent_id)
            if agent is None:
                continue  # infected earlier this tick

            was_hopped = agent.hopped
            agent.hopped = False
            view = self.sensors.sense(agent)
            action = self._decide(agent, view)
            self._apply(agent, action, was_hopped, locked, record)

        self.registry.refresh_all()
        if self.check_invariants:
            self.verify()

        logger.debug(
            f"Tick {self.tick}: {record.hops} hops, {record.turns} turns, "
            f"{len(record.infections)} infections, {record.failed_infections} failed"
        )
        return record

    def _decide(self, agent: Agent, view: View) -> Action:
        try:
            action = agent.critter.decide(view)
        except Exception as e:
            raise SpeciesError(agent.species, "decide", repr(e)) from e
        if not isinstance(action, Action):
            raise SpeciesError(agent.species, "decide", f"returned {action!r}, not an Action")
        return action

    def _apply(
        self,
        agent: Agent,
        action: Action,
        was_hopped: bool,
        locked: set[int],
        record: TickRecord,
    ) -> None:
        match action:
            case Action.TURN_LEFT:
                agent.turn(3)
                record.turns += 1
            case Action.TURN_RIGHT:
                agent.turn(1)
                record.turns += 1
            case Action.HOP:
                self._hop(agent, locked, record)
            case Action.INFECT:
                self._infect(agent, was_hopped, locked, record)

    def _hop(self, agent: Agent, locked: set[int], record: TickRecord) -> None:
        target = agent.ahead()
        if not self.grid.in_bounds(target) or self.grid.occupant_at(target) is not None:
            record.blocked_hops += 1
            return
        self.grid.move(agent.position, target)
        agent.x, agent.y = target
        agent.hopped = True
        locked.add(agent.agent_id)
        record.hops += 1

    def _infect(self, agent: Agent, was_hopped: bool, locked: set[int], record: TickRecord) -> None:
        target = agent.ahead()
        victim_id = self.grid.occupant_at(target)
        if victim_id is None or victim_id in locked:
            record.failed_infections += 1
            return
        victim = self.registry.require(victim_id)
        if victim.species == agent.species:
            record.failed_infections += 1
            return
        # Only draw when the hop advantage does not already guarantee success.
        if not was_hopped and self.rng.random() < self.hop_advantage:
            record.failed_infections += 1
            return

        self.ledger.decrement(victim.species)
        factory = self.species.get(agent.species)
        newborn = self.registry.replace(victim_id, agent.species, factory, agent.facing)
        locked.add(newborn.agent_id)
        self.ledger.increment(agent.species)

        record.infections.append(
            Infection(
                actor_id=agent.agent_id,
                victim_id=victim_id,
                new_id=newborn.agent_id,
                position=target,
                species=agent.species,
                victim_species=victim.species,
            )
        )

    def verify(self) -> None:
        """Check that grid, registry and ledger agree.

        Raises InvariantViolation on the first mismatch found.
        """
        agents = self.registry.living_agents()
        for agent in agents:
            if self.grid.occupant_at(agent.position) != agent.agent_id:
                raise InvariantViolation(
                    f"Agent {agent.agent_id} recorded at {agent.position} but grid holds "
                    f"{self.grid.occupant_at(agent.position)}"
                )

        occupied = 0
        for pos, agent_id in self.grid.occupied():
            occupied += 1
            if self.registry.require(agent_id).position != pos:
                raise InvariantViolation(f"Grid cell {pos} holds agent {agent_id} recorded elsewhere")
        if occupied != len(agents):
            raise InvariantViolation(f"{occupied} occupied cells but {len(agents)} live agents")

        if self.ledger.total() != len(agents):
            raise InvariantViolation(
                f"Ledger counts {self.ledger.total()} critters but {len(agents)} are alive"
            )
        for species, count in self.ledger.counts().items():
            actual = sum(1 for a in agents if a.species == species)
            if actual != count:
                raise InvariantViolation(f"Ledger has {count} {species} but {actual} are alive")
