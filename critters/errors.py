"""Structured error hierarchy for the critter simulation."""


class CritterError(Exception):
    """Base for all critter simulation errors."""

    pass


class ConfigurationError(CritterError):
    """Invalid world construction or seeding parameters."""

    pass


class CapacityError(CritterError):
    """More agents requested than there are free cells."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(f"Cannot place {requested} critters: only {available} free cells")


class InvariantViolation(CritterError):
    """Engine bookkeeping broke. Not recoverable."""

    pass


class SpeciesError(CritterError):
    """A species' decision or appearance call misbehaved."""

    def __init__(self, species: str, operation: str, detail: str = ""):
        self.species = species
        self.operation = operation
        message = f"Species {species} failed in {operation}()"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class EngineStateError(CritterError):
    """Engine in invalid state for requested operation."""

    pass
