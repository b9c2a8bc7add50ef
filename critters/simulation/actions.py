"""Directions, neighbor kinds and actions for the critter simulation.

These are the only vocabulary shared between the engine and the species:
a species sees NeighborKinds and a Direction, and answers with an Action.
"""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Cardinal directions, each carrying its unit step.

    Rotation walks the cycle NORTH, SOUTH, EAST, WEST in declaration order,
    so one right turn from NORTH faces SOUTH. This is not compass order.
    """

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    def rotate(self, steps: int) -> Direction:
        """Advance `steps` places around the direction cycle (negative goes back)."""
        return _CYCLE[(_CYCLE.index(self) + steps) % 4]

    def ahead(self, x: int, y: int) -> tuple[int, int]:
        """The cell one step from (x, y) in this direction."""
        dx, dy = self.value
        return (x + dx, y + dy)

    @property
    def indicator(self) -> str:
        """Arrow-like glyph used in debug display."""
        return _INDICATORS[self]


_CYCLE: tuple[Direction, ...] = tuple(Direction)

_INDICATORS = {
    Direction.NORTH: "^",
    Direction.SOUTH: "v",
    Direction.EAST: ">",
    Direction.WEST: "<",
}


class NeighborKind(enum.Enum):
    """What occupies an adjacent cell, relative to the observer's species."""

    WALL = "wall"
    EMPTY = "empty"
    SAME = "same"
    OTHER = "other"


class Action(enum.Enum):
    """All mutations an agent may request in one tick."""

    HOP = "hop"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    INFECT = "infect"
