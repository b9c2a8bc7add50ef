"""Bear: charges straight ahead, infecting whatever it bumps into."""

from __future__ import annotations

import random

from critters.simulation.actions import Action, NeighborKind
from critters.simulation.sensors import View


class Bear:
    """A bear is either polar (white) or grizzly (black), chosen at birth."""

    def __init__(self, polar: bool):
        self.polar = polar
        self.moves = 0

    @classmethod
    def spawn(cls, rng: random.Random) -> Bear:
        """Factory: polar with probability 0.5."""
        return cls(polar=rng.random() < 0.5)

    def color(self) -> str:
        return "white" if self.polar else "black"

    def glyph(self) -> str:
        return "/" if self.moves % 2 == 0 else "\\"

    def decide(self, view: View) -> Action:
        self.moves += 1
        if view.front == NeighborKind.OTHER:
            return Action.INFECT
        if view.front == NeighborKind.EMPTY:
            return Action.HOP
        return Action.TURN_LEFT
