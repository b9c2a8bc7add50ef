"""Occupancy grid: one slot per cell, each holding at most one agent id."""

from __future__ import annotations

from collections.abc import Iterator

from critters.errors import InvariantViolation

AgentID = int
Position = tuple[int, int]


class Grid:
    """Fixed-size 2D array of occupancy slots.

    Owns no behavior beyond bounds-checked slot access. Slots are indexed
    ``[y][x]`` internally; callers always pass ``(x, y)``.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._slots: list[list[AgentID | None]] = [[None] * width for _ in range(height)]

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a position lies inside the grid."""
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def occupant_at(self, pos: Position) -> AgentID | None:
        """Get the agent id at a position, or None if empty or out of bounds."""
        if not self.in_bounds(pos):
            return None
        x, y = pos
        return self._slots[y][x]

    def place(self, pos: Position, agent_id: AgentID) -> None:
        """Store an agent id in an empty slot."""
        self._require_in_bounds(pos)
        x, y = pos
        current = self._slots[y][x]
        if current is not None:
            raise InvariantViolation(f"Cell {pos} already holds agent {current}")
        self._slots[y][x] = agent_id

    def clear(self, pos: Position) -> None:
        """Empty a slot."""
        self._require_in_bounds(pos)
        x, y = pos
        self._slots[y][x] = None

    def move(self, src: Position, dst: Position) -> None:
        """Move whatever occupies `src` into the empty slot `dst`."""
        agent_id = self.occupant_at(src)
        if agent_id is None:
            raise InvariantViolation(f"No agent to move at {src}")
        self.place(dst, agent_id)
        self.clear(src)

    def free_cells(self) -> list[Position]:
        """All empty positions, in row-major order."""
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self._slots[y][x] is None
        ]

    def occupied(self) -> Iterator[tuple[Position, AgentID]]:
        """Yield (position, agent id) for every occupied slot."""
        for y, row in enumerate(self._slots):
            for x, agent_id in enumerate(row):
                if agent_id is not None:
                    yield (x, y), agent_id

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def _require_in_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise InvariantViolation(f"Cell {pos} is outside the {self.width}x{self.height} grid")
