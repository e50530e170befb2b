"""Board - piece placement on an 8x8 checkers board."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from checkie.core.enums import Color, Rank
from checkie.core.errors import BoardInvariantError, OutOfBoundsError
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Position, dark_squares

Snapshot = tuple[tuple[Piece | None, ...], ...]

_START_ROWS: dict[Color, range] = {
    Color.WHITE: range(0, 3),
    Color.RED: range(5, 8),
}


class Board:
    """Mutable 8x8 grid of optional pieces.

    The grid only ever changes through :meth:`place`, :meth:`apply_relocation`,
    :meth:`remove` and :meth:`promote`; readers get copies, never the rows.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @staticmethod
    def _check_bounds(pos: Position) -> None:
        if not pos.is_on_board:
            raise OutOfBoundsError(f"Square {pos} is off the board")

    # -- Element access -----------------------------------------------------

    def piece_at(self, pos: Position) -> Piece | None:
        self._check_bounds(pos)
        return self._grid[pos.row][pos.cell]

    def __getitem__(self, pos: Position) -> Piece | None:
        return self.piece_at(pos)

    def is_empty(self, pos: Position) -> bool:
        return self.piece_at(pos) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Position]:
        """Squares occupied by *color*, row by row."""
        return [
            pos
            for pos in dark_squares()
            if (p := self._grid[pos.row][pos.cell]) is not None and p.color == color
        ]

    def count(self, color: Color, rank: Rank | None = None) -> int:
        return sum(
            1
            for row in self._grid
            for p in row
            if p is not None and p.color == color and (rank is None or p.rank == rank)
        )

    # -- Mutation -----------------------------------------------------------

    def place(self, pos: Position, piece: Piece | None) -> None:
        """Put *piece* on *pos* (``None`` clears it)."""
        self._check_bounds(pos)
        if piece is not None and not pos.is_dark:
            raise BoardInvariantError(f"Cannot place {piece} on light square {pos}")
        self._grid[pos.row][pos.cell] = piece

    def apply_relocation(self, start: Position, end: Position) -> None:
        """Move whatever stands on *start* to *end*.

        No rule checking: the caller has validated the move already. Only
        grid corruption is refused.
        """
        self._check_bounds(start)
        self._check_bounds(end)
        piece = self._grid[start.row][start.cell]
        if piece is None:
            raise BoardInvariantError(f"No piece on {start} to relocate")
        if self._grid[end.row][end.cell] is not None:
            raise BoardInvariantError(f"Relocation onto occupied square {end}")
        if not end.is_dark:
            raise BoardInvariantError(f"Relocation onto light square {end}")
        self._grid[end.row][end.cell] = piece
        self._grid[start.row][start.cell] = None

    def remove(self, pos: Position) -> None:
        """Clear *pos*; no-op if already empty."""
        self._check_bounds(pos)
        self._grid[pos.row][pos.cell] = None

    def promote(self, pos: Position) -> bool:
        """Crown the man on *pos* if it stands on its crowning row.

        Returns ``True`` only when a crowning actually happened.
        """
        piece = self.piece_at(pos)
        if piece is None or piece.is_king:
            return False
        if pos.row != piece.color.crowning_row:
            return False
        self._grid[pos.row][pos.cell] = piece.crowned()
        return True

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def check_invariants(self) -> None:
        """Raise :class:`BoardInvariantError` if a light square holds a piece."""
        for row in range(BOARD_SIZE):
            for cell in range(BOARD_SIZE):
                piece = self._grid[row][cell]
                if piece is not None and (row + cell) % 2 == 0:
                    raise BoardInvariantError(
                        f"{piece} found on light square {Position(row, cell)}"
                    )

    # -- Read-only projections ----------------------------------------------

    def snapshot(self, flipped: bool = False) -> Snapshot:
        """Immutable copy of the grid, optionally rotated by 180°."""
        if flipped:
            return tuple(
                tuple(
                    self.piece_at(Position(row, cell).flipped())
                    for cell in range(BOARD_SIZE)
                )
                for row in range(BOARD_SIZE)
            )
        return tuple(tuple(row) for row in self._grid)

    def view_for(self, color: Color) -> Snapshot:
        """Grid as *color* sees it, with its own back rank at the bottom."""
        return self.snapshot(flipped=color == Color.WHITE)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: 12 men per side."""
        b = cls()
        for color, rows in _START_ROWS.items():
            for pos in dark_squares():
                if pos.row in rows:
                    b._grid[pos.row][pos.cell] = Piece(color, Rank.MAN)
        return b

    @classmethod
    def from_pieces(
        cls, pieces: Mapping[Position, Piece] | Iterable[tuple[Position, Piece]]
    ) -> Board:
        """Custom layout from ``{position: piece}``."""
        b = cls()
        items = pieces.items() if isinstance(pieces, Mapping) else pieces
        for pos, piece in items:
            b.place(pos, piece)
        return b

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Custom layout from eight text rows, row 0 first.

        ``.`` is empty; ``r``/``w`` are men, ``R``/``W`` kings. Spaces are
        ignored, so they can separate squares for readability.
        """
        lines = [line.replace(" ", "") for line in rows]
        if len(lines) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in lines):
            raise ValueError("Board layout needs 8 rows of 8 squares")
        b = cls()
        for row, line in enumerate(lines):
            for cell, char in enumerate(line):
                if char != ".":
                    b.place(Position(row, cell), Piece.from_char(char))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            rows.append(f"{row_idx} {' '.join(str(p) if p else '.' for p in row)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
