"""Shared test doubles for the critter test suites.

These are plain-class test doubles, not unittest.mock.
"""

from __future__ import annotations

import random

from critters.simulation.actions import Action, Direction, NeighborKind
from critters.simulation.sensors import View
from critters.species.registry import SpeciesRegistry


class Scripted:
    """A species that plays back a fixed list of actions.

    Once the plan runs out the last action repeats forever.
    """

    def __init__(self, plan: list[Action], color: str = "white", glyph: str = "S"):
        self.plan = list(plan) or [Action.TURN_LEFT]
        self.views: list[View] = []
        self._color = color
        self._glyph = glyph

    def decide(self, view: View) -> Action:
        self.views.append(view)
        idx = min(len(self.views) - 1, len(self.plan) - 1)
        return self.plan[idx]

    def color(self) -> str:
        return self._color

    def glyph(self) -> str:
        return self._glyph


class Exploding:
    """A species whose decision always raises."""

    def decide(self, view: View) -> Action:
        raise RuntimeError("boom")

    def color(self) -> str:
        return "red"

    def glyph(self) -> str:
        return "!"


class Confused:
    """A species that answers with something that is not an Action."""

    def decide(self, view: View):
        return "hop"

    def color(self) -> str:
        return "red"

    def glyph(self) -> str:
        return "?"


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns ``draw``.

    Integer draws (shuffle, sample, choice) stay genuinely random.
    """

    draw = 0.5

    def random(self) -> float:
        return self.draw

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


def fixed_random(draw: float, seed: int = 0) -> FixedRandom:
    rng = FixedRandom(seed)
    rng.draw = draw
    return rng


def scripted_registry(plans: dict[str, list[Action]]) -> SpeciesRegistry:
    """A registry where each species name plays back its own plan."""
    registry = SpeciesRegistry()
    for name, plan in plans.items():
        registry.add(name, lambda rng, plan=plan: Scripted(plan))
    return registry


def make_view(
    front: NeighborKind = NeighborKind.EMPTY,
    right: NeighborKind = NeighborKind.EMPTY,
    back: NeighborKind = NeighborKind.EMPTY,
    left: NeighborKind = NeighborKind.EMPTY,
    facing: Direction = Direction.NORTH,
) -> View:
    """A View with no threats, for driving species directly."""
    return View(
        facing=facing,
        neighbors=(front, right, back, left),
        threats=(False, False, False, False),
    )
