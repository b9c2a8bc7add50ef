"""The critter world: the caller-owned facade over the step engine.

A shell constructs one World, seeds it with ``add_species``, then calls
``step`` and reads ``occupant_at``/``counts``/``tick_number`` between ticks.
Only one live world may exist per ``WorldGuard``; the module-level
``ACTIVE_WORLD`` guard is the default, so a process gets one world unless
a caller passes its own guard.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from critters.config import SimulationConfig
from critters.errors import ConfigurationError, EngineStateError
from critters.simulation.actions import Direction
from critters.simulation.engine import StepEngine, TickRecord
from critters.species.registry import SpeciesRegistry, default_registry

logger = logging.getLogger(__name__)


class WorldGuard:
    """Records which world, if any, is currently live."""

    def __init__(self) -> None:
        self._active: World | None = None

    @property
    def active(self) -> World | None:
        return self._active

    def acquire(self, world: World) -> None:
        if self._active is not None:
            raise ConfigurationError("Only one critter world may be live at a time")
        self._active = world

    def release(self, world: World) -> None:
        if self._active is world:
            self._active = None


ACTIVE_WORLD = WorldGuard()


@dataclass(frozen=True)
class Occupant:
    """Read-only view of one occupied cell, for display."""

    species: str
    color: str
    glyph: str
    facing: Direction


class World:
    """A width x height grid of critters and the engine that moves them."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        config: SimulationConfig | None = None,
        species: SpeciesRegistry | None = None,
        rng: random.Random | None = None,
        guard: WorldGuard | None = None,
    ):
        """Initialize a new world.

        Args:
            width: Number of columns, must be positive
            height: Number of rows, must be positive
            config: Engine settings (hop advantage, seed, invariant checks)
            species: Species available for seeding; defaults to the built-ins
            rng: Random source for every draw in this world; built from
                config.seed when omitted
            guard: Active-world guard to claim; defaults to ACTIVE_WORLD
        """
        # bool is an int subclass; World(True, 1) is a mistake, not a 1x1 world.
        if any(not isinstance(d, int) or isinstance(d, bool) for d in (width, height)):
            raise ConfigurationError(f"World dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"World dimensions must be positive, got {width}x{height}")

        self.config = config or SimulationConfig()
        registry = species or default_registry()
        self._guard = guard if guard is not None else ACTIVE_WORLD
        self._guard.acquire(self)

        self.width = width
        self.height = height
        self.debug_mode = self.config.debug_mode
        self.rng = rng or random.Random(self.config.seed)
        self.engine = StepEngine(
            width,
            height,
            species=registry,
            rng=self.rng,
            hop_advantage=self.config.hop_advantage,
            check_invariants=self.config.check_invariants,
        )
        self._closed = False
        logger.info(f"Created {width}x{height} critter world")

    # --- Lifecycle ---

    def close(self) -> None:
        """Release the active-world guard so another world can be built."""
        if not self._closed:
            self._closed = True
            self._guard.release(self)

    def __enter__(self) -> World:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Population seeding ---

    def add_species(self, count: int, species_id: str) -> None:
        """Seed `count` critters of a registered species at random free cells.

        Must be called before the first step. Either every critter is placed
        or, on CapacityError or SpeciesError, none are.
        """
        self._require_unstarted("add_species")
        if count < 0:
            raise ConfigurationError(f"Critter count must be non-negative, got {count}")
        factory = self.engine.species.get(species_id)
        if count == 0:
            return

        agents = self.engine.registry.seed(count, species_id, factory)
        for agent in agents:
            self.engine.ledger.increment(species_id)
            self.engine.registry.refresh_appearance(agent.agent_id)
        logger.info(f"Seeded {count} {species_id} ({self.total()} critters total)")

    def spawn(self, species_id: str, x: int, y: int, facing: Direction) -> int:
        """Place one critter at an exact cell and return its id."""
        self._require_unstarted("spawn")
        critter = self.engine.species.create(species_id, self.rng)
        agent = self.engine.registry.spawn(species_id, critter, x, y, facing)
        self.engine.ledger.increment(species_id)
        self.engine.registry.refresh_appearance(agent.agent_id)
        return agent.agent_id

    # --- Stepping ---

    def step(self) -> TickRecord:
        """Advance the simulation by one tick."""
        if self._closed:
            raise EngineStateError("World has been closed")
        return self.engine.step()

    def advance_to_multiple(self, n: int) -> list[TickRecord]:
        """Step at least once, then until the tick number is a multiple of `n`.

        Tick 0 and every block boundary are already multiples of `n`, so
        stopping there without stepping would make repeated calls (the
        shell's block mode) run nothing at all.
        """
        if n <= 0:
            raise ConfigurationError(f"Step multiple must be positive, got {n}")
        records = [self.step()]
        while self.tick_number % n != 0:
            records.append(self.step())
        return records

    # --- Query surface ---

    @property
    def tick_number(self) -> int:
        return self.engine.tick

    def occupant_at(self, pos: tuple[int, int]) -> Occupant | None:
        """What a shell should draw at a cell, or None if empty."""
        agent_id = self.engine.grid.occupant_at(pos)
        if agent_id is None:
            return None
        agent = self.engine.registry.require(agent_id)
        glyph = agent.facing.indicator if self.debug_mode else agent.glyph
        return Occupant(species=agent.species, color=agent.color, glyph=glyph, facing=agent.facing)

    def counts(self) -> dict[str, int]:
        """Live critters per species, ordered by species name."""
        return self.engine.ledger.counts()

    def total(self) -> int:
        return self.engine.ledger.total()

    def leader(self) -> str | None:
        return self.engine.ledger.leader()

    def toggle_debug(self) -> bool:
        """Switch glyphs between species symbols and facing indicators."""
        self.debug_mode = not self.debug_mode
        return self.debug_mode

    def _require_unstarted(self, operation: str) -> None:
        if self._closed:
            raise EngineStateError("World has been closed")
        if self.engine.tick > 0:
            raise EngineStateError(f"{operation}() is only allowed before the first step")
