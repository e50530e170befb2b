"""High-level checkers rules: win detection."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.errors import BoardInvariantError
from checkie.core.move_generator import MoveGenerator
from checkie.core.ruleset import RuleSet

_WIN_FOR: dict[Color, GameResult] = {
    Color.RED: GameResult.RED_WINS,
    Color.WHITE: GameResult.WHITE_WINS,
}


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_eliminated(board: Board, color: Color) -> bool:
        return board.count(color) == 0

    @staticmethod
    def is_blocked(
        board: Board, color: Color, ruleset: RuleSet | None = None
    ) -> bool:
        """*color* still has pieces but none of them can move."""
        if Rules.is_eliminated(board, color):
            return False
        return not MoveGenerator(board, color, ruleset).has_legal_move()

    @staticmethod
    def game_result(
        board: Board, side_to_move: Color, ruleset: RuleSet | None = None
    ) -> GameResult:
        """Determine the current game result.

        A board with no pieces at all cannot arise from play and raises
        :class:`BoardInvariantError`.
        """
        if all(Rules.is_eliminated(board, color) for color in Color):
            raise BoardInvariantError("No pieces on the board")
        for color in Color:
            if Rules.is_eliminated(board, color):
                return _WIN_FOR[color.opposite]

        if Rules.is_blocked(board, side_to_move, ruleset):
            return _WIN_FOR[side_to_move.opposite]

        return GameResult.IN_PROGRESS
