"""Move validation: decide whether one candidate move is legal.

The validator only reads the board. Every rule violation comes back as a
:class:`Rejected` verdict; nothing here raises for an illegal move.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from checkie.core.board import Board
from checkie.core.enums import CaptureRule, Color, MoveKind, Rank, RejectReason
from checkie.core.message import Message
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.ruleset import RuleSet
from checkie.core.types import Position

_LOGGER = logging.getLogger(__name__)

_CELL_STEPS: tuple[int, int] = (-1, 1)


# ── Verdicts ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Accepted:
    """Legal move. ``captured`` is set for jumps only."""

    kind: MoveKind
    captured: Position | None = None

    @property
    def is_accepted(self) -> bool:
        return True

    @property
    def is_jump(self) -> bool:
        return self.kind == MoveKind.JUMP

    @property
    def message(self) -> Message:
        return Message.info("Move accepted.")


@dataclass(frozen=True, slots=True)
class Rejected:
    """Illegal move and the reason it was refused."""

    reason: RejectReason

    @property
    def is_accepted(self) -> bool:
        return False

    @property
    def message(self) -> Message:
        return Message.error(self.reason.text)


Verdict: TypeAlias = Accepted | Rejected

SIMPLE = Accepted(MoveKind.SIMPLE)


# ── Jump probes ──────────────────────────────────────────────────────────────


def directions_for(piece: Piece) -> tuple[int, ...]:
    """Row steps *piece* may travel in."""
    if piece.rank == Rank.KING:
        return (-1, 1)
    return (piece.color.forward,)


def jump_targets(board: Board, pos: Position) -> list[Position]:
    """Landing squares of every jump the piece on *pos* can make right now."""
    piece = board.piece_at(pos)
    if piece is None:
        return []
    targets: list[Position] = []
    for drow in directions_for(piece):
        for dcell in _CELL_STEPS:
            land = pos.offset(2 * drow, 2 * dcell)
            if not land.is_on_board or not board.is_empty(land):
                continue
            victim = board.piece_at(pos.offset(drow, dcell))
            if victim is not None and victim.color != piece.color:
                targets.append(land)
    return targets


def can_jump(board: Board, pos: Position, color: Color) -> bool:
    """Whether *color*'s piece on *pos* has a jump available."""
    piece = board.piece_at(pos)
    if piece is None or piece.color != color:
        return False
    return bool(jump_targets(board, pos))


def any_jump_available(board: Board, color: Color) -> bool:
    """Whether any piece of *color* can jump."""
    return any(jump_targets(board, pos) for pos in board.pieces(color))


# ── Validator ────────────────────────────────────────────────────────────────


class MoveValidator:
    """Decides legality of a move for one acting color against one board.

    Checks run in a fixed order and stop at the first failure: bounds,
    source, destination, square colour, shape, then the simple-move or jump
    specific rules.
    """

    __slots__ = ("_ruleset",)

    def __init__(self, ruleset: RuleSet | None = None) -> None:
        self._ruleset = ruleset if ruleset is not None else RuleSet.casual()

    @property
    def ruleset(self) -> RuleSet:
        return self._ruleset

    def validate(self, board: Board, color: Color, move: Move) -> Verdict:
        verdict = self._classify(board, color, move)
        if isinstance(verdict, Rejected):
            _LOGGER.debug("Rejected %s for %s: %s", move, color, verdict.reason.name)
        return verdict

    def _classify(self, board: Board, color: Color, move: Move) -> Verdict:
        start, end = move.start, move.end

        if not (start.is_on_board and end.is_on_board):
            return Rejected(RejectReason.OUT_OF_BOUNDS)

        piece = board.piece_at(start)
        if piece is None:
            return Rejected(RejectReason.EMPTY_SOURCE)
        if piece.color != color:
            return Rejected(RejectReason.WRONG_OWNER)

        if not board.is_empty(end):
            return Rejected(RejectReason.DESTINATION_OCCUPIED)

        if not end.is_dark:
            return Rejected(RejectReason.ILLEGAL_SQUARE)

        if not self._has_legal_shape(piece, move):
            return Rejected(RejectReason.ILLEGAL_SHAPE)

        if move.distance == 1:
            if self._jump_pending(board, start, color):
                return Rejected(RejectReason.JUMP_REQUIRED)
            return SIMPLE

        if move.distance == 2:
            victim = board.piece_at(move.midpoint)
            if victim is None:
                return Rejected(RejectReason.NO_PIECE_TO_CAPTURE)
            if victim.color == color:
                return Rejected(RejectReason.CANNOT_CAPTURE_OWN_PIECE)
            return Accepted(MoveKind.JUMP, captured=move.midpoint)

        _LOGGER.error("Unresolved move %s for %s on\n%r", move, color, board)
        return Rejected(RejectReason.UNRESOLVED)

    @staticmethod
    def _has_legal_shape(piece: Piece, move: Move) -> bool:
        if not move.is_diagonal or move.distance not in (1, 2):
            return False
        step = 1 if move.row_delta > 0 else -1
        return step in directions_for(piece)

    def _jump_pending(self, board: Board, start: Position, color: Color) -> bool:
        if can_jump(board, start, color):
            return True
        if self._ruleset.capture_rule == CaptureRule.GLOBAL:
            return any_jump_available(board, color)
        return False
