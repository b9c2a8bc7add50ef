"""Base protocol that every species implements."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from critters.simulation.actions import Action

if TYPE_CHECKING:
    from critters.simulation.sensors import View


@runtime_checkable
class Species(Protocol):
    """Protocol that any critter species must implement.

    The engine only ever calls these three methods. A species may keep
    private counters between calls but has no other way to affect the world.
    """

    def decide(self, view: View) -> Action:
        """Given what the critter senses, what does it do this tick?"""
        ...

    def color(self) -> str:
        """Display color (a rich color name)."""
        ...

    def glyph(self) -> str:
        """Display symbol."""
        ...


# Builds a fresh instance; the world RNG lets a factory pick a sub-variant.
SpeciesFactory = Callable[[random.Random], Species]
