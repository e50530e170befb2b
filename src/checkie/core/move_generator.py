"""Legal move generation.

Candidates are filtered through :class:`MoveValidator`, so the generator can
never disagree with the validator about what is legal.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.ruleset import RuleSet
from checkie.core.types import DIAGONALS, Position
from checkie.core.validator import MoveValidator


class MoveGenerator:
    """Generates the moves *color* may legally make on *board*."""

    __slots__ = ("_board", "_color", "_validator")

    def __init__(
        self, board: Board, color: Color, ruleset: RuleSet | None = None
    ) -> None:
        self._board = board
        self._color = color
        self._validator = MoveValidator(ruleset)

    def moves_from(self, pos: Position) -> list[Move]:
        """Legal moves of the piece on *pos*."""
        moves: list[Move] = []
        for drow, dcell in DIAGONALS:
            for dist in (1, 2):
                end = pos.offset(drow * dist, dcell * dist)
                if not end.is_on_board:
                    continue
                move = Move(pos, end)
                verdict = self._validator.validate(self._board, self._color, move)
                if verdict.is_accepted:
                    moves.append(move)
        return moves

    def generate_legal_moves(self) -> list[Move]:
        moves: list[Move] = []
        for pos in self._board.pieces(self._color):
            moves.extend(self.moves_from(pos))
        return moves

    def generate_jumps(self) -> list[Move]:
        return [m for m in self.generate_legal_moves() if m.distance == 2]

    def has_legal_move(self) -> bool:
        return any(self.moves_from(pos) for pos in self._board.pieces(self._color))
