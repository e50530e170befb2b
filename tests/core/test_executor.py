"""Tests for MoveExecutor: relocation, capture, crowning, chain continuation."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color, MoveKind, Rank, RejectReason, TurnStatus
from checkie.core.errors import BoardInvariantError
from checkie.core.executor import MoveExecutor, Outcome
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.ruleset import RuleSet
from checkie.core.types import Position
from checkie.core.validator import Accepted, MoveValidator, Rejected


def _play(
    board: Board, color: Color, move: Move, ruleset: RuleSet | None = None
) -> Outcome:
    verdict = MoveValidator(ruleset).validate(board, color, move)
    assert isinstance(verdict, Accepted), verdict
    return MoveExecutor(ruleset).execute(board, color, move, verdict)


class TestSimpleMove:
    def test_opening_move(self, initial_board: Board) -> None:
        outcome = _play(initial_board, Color.RED, Move.of((5, 0), (4, 1)))
        assert outcome.status == TurnStatus.TURN_ENDS
        assert outcome.turn_ends
        assert initial_board[Position(5, 0)] is None
        assert initial_board[Position(4, 1)] == Piece(Color.RED, Rank.MAN)
        assert outcome.message.text == "Move accepted."

    def test_promotion(self, make_board) -> None:
        board = make_board({(1, 2): "r"})
        outcome = _play(board, Color.RED, Move.of((1, 2), (0, 1)))
        assert board.piece_at(Position(0, 1)).rank == Rank.KING
        assert outcome.crowned
        assert outcome.message.text == "Move accepted. Crowned!"

    def test_white_promotes_on_row_seven(self, make_board) -> None:
        board = make_board({(6, 3): "w"})
        _play(board, Color.WHITE, Move.of((6, 3), (7, 4)))
        assert board[Position(7, 4)] == Piece(Color.WHITE, Rank.KING)


class TestJump:
    def test_capture_removes_piece(self, make_board) -> None:
        board = make_board({(3, 2): "r", (2, 3): "w"})
        outcome = _play(board, Color.RED, Move.of((3, 2), (1, 4)))
        assert board[Position(2, 3)] is None
        assert board[Position(3, 2)] is None
        assert board[Position(1, 4)] == Piece(Color.RED)
        assert outcome == Outcome(TurnStatus.TURN_ENDS, captured=Position(2, 3))
        assert outcome.message.text == "Piece captured."

    def test_multi_jump_must_continue(self, make_board) -> None:
        board = make_board({(5, 2): "r", (4, 3): "w", (2, 5): "w"})
        first = _play(board, Color.RED, Move.of((5, 2), (3, 4)))
        assert first.status == TurnStatus.MUST_CONTINUE
        assert first.continue_from == Position(3, 4)
        assert first.message.text == "Jump again!"

        assert first.continue_from is not None
        second = _play(board, Color.RED, Move(first.continue_from, Position(1, 6)))
        assert second.status == TurnStatus.TURN_ENDS
        assert board.count(Color.WHITE) == 0
        assert board[Position(1, 6)] == Piece(Color.RED)

    def test_crowned_mid_chain_continues_as_king(self, make_board) -> None:
        board = make_board({(2, 1): "r", (1, 2): "w", (1, 4): "w"})
        outcome = _play(board, Color.RED, Move.of((2, 1), (0, 3)))
        assert outcome.crowned
        assert outcome.status == TurnStatus.MUST_CONTINUE
        assert outcome.continue_from == Position(0, 3)
        assert outcome.message.text == "Jump again! Crowned!"

    def test_crowning_ends_turn_under_tournament_rules(self, make_board) -> None:
        board = make_board({(2, 1): "r", (1, 2): "w", (1, 4): "w"})
        outcome = _play(
            board, Color.RED, Move.of((2, 1), (0, 3)), RuleSet.tournament()
        )
        assert outcome.crowned
        assert outcome.status == TurnStatus.TURN_ENDS
        assert board[Position(0, 3)] == Piece(Color.RED, Rank.KING)


class TestExecutorContract:
    def test_rejected_verdict_raises(self, initial_board: Board) -> None:
        before = initial_board.copy()
        with pytest.raises(TypeError, match="Rejected"):
            MoveExecutor().execute(
                initial_board,
                Color.RED,
                Move.of((5, 0), (4, 1)),
                Rejected(RejectReason.JUMP_REQUIRED),
            )
        assert initial_board == before

    def test_trusts_prefabricated_verdict(self, make_board) -> None:
        # A man moving backward is illegal, but the executor does not re-check.
        board = make_board({(3, 2): "r"})
        outcome = MoveExecutor().execute(
            board, Color.RED, Move.of((3, 2), (4, 3)), Accepted(MoveKind.SIMPLE)
        )
        assert outcome.turn_ends
        assert board[Position(4, 3)] == Piece(Color.RED)

    def test_prefabricated_jump(self, make_board) -> None:
        board = make_board({(3, 2): "r", (2, 3): "w"})
        MoveExecutor().execute(
            board,
            Color.RED,
            Move.of((3, 2), (1, 4)),
            Accepted(MoveKind.JUMP, captured=Position(2, 3)),
        )
        assert board.count(Color.WHITE) == 0

    def test_corrupting_verdict_fails_loudly(self, initial_board: Board) -> None:
        with pytest.raises(BoardInvariantError):
            MoveExecutor().execute(
                initial_board,
                Color.RED,
                Move.of((5, 0), (6, 1)),
                Accepted(MoveKind.SIMPLE),
            )
