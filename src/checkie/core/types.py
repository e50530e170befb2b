"""Board coordinates and geometry helpers.

Board layout (row-major, ``(row, cell)``)::

    row 0  . w . w . w . w     <- WHITE back rank
    row 1  w . w . w . w .
    ...
    row 7  r . r . r . r .     <- RED back rank

Only dark squares, where ``row + cell`` is odd, are playable.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8

# Diagonal steps as (row, cell) deltas.
DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A board square. Off-board values are representable on purpose."""

    row: int
    cell: int

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.cell < BOARD_SIZE

    @property
    def is_dark(self) -> bool:
        """Playable square: ``row + cell`` is odd."""
        return (self.row + self.cell) % 2 == 1

    def offset(self, drow: int, dcell: int) -> Position:
        return Position(self.row + drow, self.cell + dcell)

    def midpoint(self, other: Position) -> Position:
        """Square halfway to *other* (integer division, meaningful for jumps)."""
        return Position((self.row + other.row) // 2, (self.cell + other.cell) // 2)

    def flipped(self) -> Position:
        """Same square seen from the opposite side of the board."""
        return Position(BOARD_SIZE - 1 - self.row, BOARD_SIZE - 1 - self.cell)

    def __str__(self) -> str:
        return f"({self.row},{self.cell})"


def dark_squares() -> Iterator[Position]:
    """Every playable square, row by row."""
    for row in range(BOARD_SIZE):
        for cell in range(BOARD_SIZE):
            if (row + cell) % 2 == 1:
                yield Position(row, cell)
