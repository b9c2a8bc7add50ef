"""Sensor system: what a critter perceives before it acts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from critters.simulation.actions import Direction, NeighborKind

if TYPE_CHECKING:
    from critters.simulation.entities import Agent
    from critters.simulation.grid import Grid
    from critters.simulation.registry import AgentRegistry

# Scan order relative to facing: front, right, back, left.
FRONT, RIGHT, BACK, LEFT = range(4)


@dataclass(frozen=True)
class View:
    """The four adjacent cells as seen by one critter, plus threat flags.

    Built fresh before every decision and discarded afterwards.
    """

    facing: Direction
    neighbors: tuple[NeighborKind, NeighborKind, NeighborKind, NeighborKind]
    threats: tuple[bool, bool, bool, bool]

    @property
    def front(self) -> NeighborKind:
        return self.neighbors[FRONT]

    @property
    def right(self) -> NeighborKind:
        return self.neighbors[RIGHT]

    @property
    def back(self) -> NeighborKind:
        return self.neighbors[BACK]

    @property
    def left(self) -> NeighborKind:
        return self.neighbors[LEFT]

    @property
    def front_threat(self) -> bool:
        return self.threats[FRONT]

    @property
    def right_threat(self) -> bool:
        return self.threats[RIGHT]

    @property
    def back_threat(self) -> bool:
        return self.threats[BACK]

    @property
    def left_threat(self) -> bool:
        return self.threats[LEFT]


class SensorSystem:
    """Classifies the cells around an agent relative to its species."""

    def __init__(self, grid: Grid, registry: AgentRegistry):
        self._grid = grid
        self._registry = registry

    def sense(self, agent: Agent) -> View:
        """Build a View for this agent.

        Scans four directions starting at the agent's facing and advancing one
        place around the direction cycle each time (front, right, back, left).
        A neighbor of another species is flagged as a threat when its facing
        equals the direction being scanned.
        """
        neighbors: list[NeighborKind] = []
        threats: list[bool] = []
        direction = agent.facing
        for _ in range(4):
            kind, threat = self._classify(agent, direction)
            neighbors.append(kind)
            threats.append(threat)
            direction = direction.rotate(1)

        return View(
            facing=agent.facing,
            neighbors=(neighbors[0], neighbors[1], neighbors[2], neighbors[3]),
            threats=(threats[0], threats[1], threats[2], threats[3]),
        )

    def _classify(self, agent: Agent, direction: Direction) -> tuple[NeighborKind, bool]:
        pos = direction.ahead(agent.x, agent.y)
        if not self._grid.in_bounds(pos):
            return NeighborKind.WALL, False
        occupant_id = self._grid.occupant_at(pos)
        if occupant_id is None:
            return NeighborKind.EMPTY, False
        occupant = self._registry.require(occupant_id)
        if occupant.species == agent.species:
            return NeighborKind.SAME, False
        # Two half-turns compose to the identity, so this compares the
        # neighbor's facing with the scanned direction itself.
        threat = occupant.facing.rotate(2).rotate(2) == direction
        return NeighborKind.OTHER, threat
