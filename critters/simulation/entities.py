"""Entities in the simulation: the Agent and its per-tick flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from critters.simulation.actions import Direction

if TYPE_CHECKING:
    from critters.species.base import Species


@dataclass
class Agent:
    """One critter on the grid.

    The engine owns position, facing and the hop flag. The species instance
    only decides; it never sees or mutates this record.
    """

    agent_id: int
    species: str  # ledger key, e.g. "Bear"
    critter: Species
    x: int
    y: int
    facing: Direction = Direction.NORTH
    color: str = "black"  # cached, refreshed at tick end
    glyph: str = "?"  # cached, refreshed at tick end
    hopped: bool = False  # hopped successfully on the previous tick

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def ahead(self) -> tuple[int, int]:
        """The cell directly in front of the agent."""
        return self.facing.ahead(self.x, self.y)

    def turn(self, steps: int) -> None:
        """Advance facing `steps` places around the direction cycle."""
        self.facing = self.facing.rotate(steps)
