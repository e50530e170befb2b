"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Color, Move, RulesEngine

    board = Board.initial()
    engine = RulesEngine()
    report = engine.submit(board, Color.RED, Move.of((5, 0), (4, 1)))
    print(report.message)
"""

from checkie.core.board import Board, Snapshot
from checkie.core.engine import MoveReport, RulesEngine
from checkie.core.enums import (
    CaptureRule,
    Color,
    GameResult,
    MessageType,
    MoveKind,
    Rank,
    RejectReason,
    TurnStatus,
)
from checkie.core.errors import BoardInvariantError, CheckersError, OutOfBoundsError
from checkie.core.executor import MoveExecutor, Outcome
from checkie.core.message import Message
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.ruleset import RuleSet
from checkie.core.types import BOARD_SIZE, Position, dark_squares
from checkie.core.validator import (
    Accepted,
    MoveValidator,
    Rejected,
    Verdict,
    any_jump_available,
    can_jump,
    directions_for,
    jump_targets,
)

__all__ = [
    # Enums
    "CaptureRule",
    "Color",
    "GameResult",
    "MessageType",
    "MoveKind",
    "Rank",
    "RejectReason",
    "TurnStatus",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "Snapshot",
    "dark_squares",
    # Errors
    "BoardInvariantError",
    "CheckersError",
    "OutOfBoundsError",
    # Domain objects
    "Board",
    "Message",
    "Move",
    "Piece",
    "RuleSet",
    # Validation / execution
    "Accepted",
    "MoveExecutor",
    "MoveValidator",
    "Outcome",
    "Rejected",
    "Verdict",
    "any_jump_available",
    "can_jump",
    "directions_for",
    "jump_targets",
    # Higher level
    "MoveGenerator",
    "MoveReport",
    "Rules",
    "RulesEngine",
]
