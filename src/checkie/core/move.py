"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: relocate the piece on *start* to *end*."""

    start: Position
    end: Position

    @classmethod
    def of(cls, start: tuple[int, int], end: tuple[int, int]) -> Move:
        """Build from plain ``(row, cell)`` pairs."""
        return cls(Position(*start), Position(*end))

    @property
    def row_delta(self) -> int:
        return self.end.row - self.start.row

    @property
    def cell_delta(self) -> int:
        return self.end.cell - self.start.cell

    @property
    def is_diagonal(self) -> bool:
        return abs(self.row_delta) == abs(self.cell_delta) != 0

    @property
    def distance(self) -> int:
        """Number of rows travelled."""
        return abs(self.row_delta)

    @property
    def midpoint(self) -> Position:
        return self.start.midpoint(self.end)

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"
