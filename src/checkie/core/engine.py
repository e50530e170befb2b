"""RulesEngine — validate, execute and report one move."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.executor import MoveExecutor, Outcome
from checkie.core.message import Message
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules
from checkie.core.ruleset import RuleSet
from checkie.core.validator import Accepted, MoveValidator, Verdict

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveReport:
    """Everything the caller needs after submitting a move."""

    verdict: Verdict
    outcome: Outcome | None
    message: Message

    @property
    def accepted(self) -> bool:
        return self.outcome is not None


class RulesEngine:
    """Front door for callers that own a board and a turn owner.

    The engine keeps no game state: every call works on the board it is
    handed, and callers must not interleave calls on the same board.
    """

    __slots__ = ("_ruleset", "_validator", "_executor")

    def __init__(self, ruleset: RuleSet | None = None) -> None:
        self._ruleset = ruleset if ruleset is not None else RuleSet.casual()
        self._validator = MoveValidator(self._ruleset)
        self._executor = MoveExecutor(self._ruleset)

    @property
    def ruleset(self) -> RuleSet:
        return self._ruleset

    def validate(self, board: Board, color: Color, move: Move) -> Verdict:
        return self._validator.validate(board, color, move)

    def submit(self, board: Board, color: Color, move: Move) -> MoveReport:
        """Validate *move* and, if legal, apply it to *board*."""
        verdict = self._validator.validate(board, color, move)
        if not isinstance(verdict, Accepted):
            return MoveReport(verdict, None, verdict.message)

        outcome = self._executor.execute(board, color, move, verdict)
        _LOGGER.debug("%s played %s: %s", color, move, outcome.status.name)
        return MoveReport(verdict, outcome, outcome.message)

    def legal_moves(self, board: Board, color: Color) -> list[Move]:
        return MoveGenerator(board, color, self._ruleset).generate_legal_moves()

    def result(self, board: Board, side_to_move: Color) -> GameResult:
        return Rules.game_result(board, side_to_move, self._ruleset)
