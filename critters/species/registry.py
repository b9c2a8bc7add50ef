"""Species registry: maps a species tag to the factory that builds it.

Each world holds its own registry instance, so tests and shells can add
species without touching global state.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from critters.errors import ConfigurationError
from critters.species.base import Species, SpeciesFactory

logger = logging.getLogger(__name__)


class SpeciesRegistry:
    """Tag-to-factory map for every species a world can seed."""

    def __init__(self) -> None:
        self._factories: dict[str, SpeciesFactory] = {}

    def register(self, name: str):
        """Decorator to register a species factory.

        Usage:
            @registry.register("Rock")
            def make_rock(rng: random.Random) -> Species:
                return Rock()

        A class whose constructor takes the RNG can be decorated directly.
        """

        def decorator(factory: Callable) -> Callable:
            self.add(name, factory)
            return factory

        return decorator

    def add(self, name: str, factory: SpeciesFactory) -> None:
        """Register a factory under `name`, overriding any previous one."""
        if not name:
            raise ConfigurationError("Species name must be non-empty")
        if name in self._factories:
            logger.warning(f"Species '{name}' already registered, overriding")
        self._factories[name] = factory
        logger.debug(f"Registered species: {name}")

    def create(self, name: str, rng: random.Random) -> Species:
        """Build a fresh instance of a registered species."""
        factory = self.get(name)
        return factory(rng)

    def get(self, name: str) -> SpeciesFactory:
        """Look up a factory, failing loudly on unknown names."""
        try:
            return self._factories[name]
        except KeyError:
            known = ", ".join(sorted(self._factories)) or "(none)"
            raise ConfigurationError(f"Unknown species '{name}'. Known: {known}") from None

    def names(self) -> list[str]:
        """All registered species names, sorted."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def default_registry() -> SpeciesRegistry:
    """A registry preloaded with the built-in species."""
    from critters.species.bear import Bear
    from critters.species.tiger import NinjaCat, Tiger, WhiteTiger

    registry = SpeciesRegistry()
    registry.add("Bear", Bear.spawn)
    registry.add("Tiger", Tiger)
    registry.add("WhiteTiger", WhiteTiger)
    registry.add("NinjaCat", NinjaCat)
    return registry
