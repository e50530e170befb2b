"""Move execution: apply an accepted verdict to the board."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Color, MoveKind, TurnStatus
from checkie.core.message import Message
from checkie.core.move import Move
from checkie.core.ruleset import RuleSet
from checkie.core.types import Position
from checkie.core.validator import Accepted, Verdict, can_jump

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of an executed move.

    ``continue_from`` is the square the same color must jump from next when
    ``status`` is :attr:`TurnStatus.MUST_CONTINUE`.
    """

    status: TurnStatus
    continue_from: Position | None = None
    captured: Position | None = None
    crowned: bool = False

    @property
    def turn_ends(self) -> bool:
        return self.status == TurnStatus.TURN_ENDS

    @property
    def message(self) -> Message:
        if self.status == TurnStatus.MUST_CONTINUE:
            text = "Jump again!"
        elif self.captured is not None:
            text = "Piece captured."
        else:
            text = "Move accepted."
        if self.crowned:
            text += " Crowned!"
        return Message.info(text)


class MoveExecutor:
    """Mutates the board for a validated move and reports turn continuation.

    The executor trusts the verdict it is given and never re-validates.
    """

    __slots__ = ("_ruleset",)

    def __init__(self, ruleset: RuleSet | None = None) -> None:
        self._ruleset = ruleset if ruleset is not None else RuleSet.casual()

    def execute(
        self, board: Board, color: Color, move: Move, verdict: Verdict
    ) -> Outcome:
        if not isinstance(verdict, Accepted):
            raise TypeError(f"Cannot execute a {type(verdict).__name__} verdict")

        board.apply_relocation(move.start, move.end)

        if verdict.kind == MoveKind.SIMPLE:
            crowned = self._promote(board, move.end)
            _LOGGER.debug("%s moved %s", color, move)
            return Outcome(TurnStatus.TURN_ENDS, crowned=crowned)

        captured = verdict.captured
        if captured is None:
            raise TypeError("Jump verdict carries no captured square")
        board.remove(captured)
        crowned = self._promote(board, move.end)
        _LOGGER.debug("%s jumped %s, capturing %s", color, move, captured)

        if crowned and self._ruleset.crowning_ends_turn:
            return Outcome(TurnStatus.TURN_ENDS, captured=captured, crowned=True)

        # Crowning already happened, so a new king probes both directions.
        if can_jump(board, move.end, color):
            _LOGGER.debug("%s must continue jumping from %s", color, move.end)
            return Outcome(
                TurnStatus.MUST_CONTINUE,
                continue_from=move.end,
                captured=captured,
                crowned=crowned,
            )
        return Outcome(TurnStatus.TURN_ENDS, captured=captured, crowned=crowned)

    @staticmethod
    def _promote(board: Board, pos: Position) -> bool:
        crowned = board.promote(pos)
        if crowned:
            _LOGGER.info("Crowned %s on %s", board.piece_at(pos), pos)
        return crowned
