"""Tiger and its descendants: WhiteTiger and NinjaCat.

All three share the tiger's movement rule and differ only in appearance.
"""

from __future__ import annotations

import random

from critters.simulation.actions import Action, NeighborKind
from critters.simulation.sensors import View

TIGER_COLORS = ("red", "green", "blue")


class Tiger:
    """Hops around walls, turns away from kin, infects anything else.

    Changes color every third move, never picking the color it already has.
    """

    def __init__(self, rng: random.Random):
        self._rng = rng
        self.color_moves = 0
        self._color: str | None = None
        self.color()

    def color(self) -> str:
        if self.color_moves % 3 == 0:
            choices = [c for c in TIGER_COLORS if c != self._color]
            self._color = self._rng.choice(choices)
        assert self._color is not None
        return self._color

    def glyph(self) -> str:
        return "TGR"

    def decide(self, view: View) -> Action:
        self.color_moves += 1
        if view.front == NeighborKind.OTHER:
            return Action.INFECT
        if view.front == NeighborKind.WALL or view.right == NeighborKind.WALL:
            return Action.TURN_LEFT
        if view.front == NeighborKind.SAME:
            return Action.TURN_RIGHT
        return Action.HOP


class WhiteTiger(Tiger):
    """A pale tiger that shows its stripes (uppercase) once it has met prey."""

    def __init__(self, rng: random.Random):
        self.has_infected = False
        super().__init__(rng)

    def color(self) -> str:
        return "white"

    def glyph(self) -> str:
        return super().glyph() if self.has_infected else "tgr"

    def decide(self, view: View) -> Action:
        if view.front == NeighborKind.OTHER:
            self.has_infected = True
        return super().decide(view)


class NinjaCat(Tiger):
    """Orange and lowercase until it first faces prey, then magenta and loud."""

    def __init__(self, rng: random.Random):
        self.has_infected = False
        super().__init__(rng)

    def color(self) -> str:
        return "magenta" if self.has_infected else "dark_orange"

    def glyph(self) -> str:
        return "Z" if self.has_infected else "z"

    def decide(self, view: View) -> Action:
        if view.front == NeighborKind.OTHER:
            self.has_infected = True
        return super().decide(view)
