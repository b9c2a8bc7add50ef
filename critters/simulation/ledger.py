"""Population ledger: live counts per species."""

from __future__ import annotations

from critters.errors import InvariantViolation


class PopulationLedger:
    """Per-species live counts, updated only alongside grid changes.

    A species whose count drops to zero keeps its entry so displays can
    still show it as extinct.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def increment(self, species: str) -> None:
        self._counts[species] = self._counts.get(species, 0) + 1

    def decrement(self, species: str) -> None:
        current = self._counts.get(species, 0)
        if current <= 0:
            raise InvariantViolation(f"Population of {species} would drop below zero")
        self._counts[species] = current - 1

    def counts(self) -> dict[str, int]:
        """Species to count, ordered by species name."""
        return {name: self._counts[name] for name in sorted(self._counts)}

    def total(self) -> int:
        return sum(self._counts.values())

    def get(self, species: str) -> int:
        return self._counts.get(species, 0)

    def leader(self) -> str | None:
        """The most populous species (first by name on ties), or None if empty."""
        best: str | None = None
        for name, count in self.counts().items():
            if best is None or count > self._counts[best]:
                best = name
        return best
