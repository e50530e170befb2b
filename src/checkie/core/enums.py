"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color.

    RED starts on rows 5-7 and advances toward row 0; WHITE starts on rows
    0-2 and advances toward row 7.
    """

    RED = 0
    WHITE = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a man of this color."""
        return -1 if self is Color.RED else 1

    @property
    def crowning_row(self) -> int:
        """Row on which a man of this color is promoted."""
        return 0 if self is Color.RED else 7

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank."""

    MAN = 1
    KING = 2


class MoveKind(IntEnum):
    """Classification of an accepted move."""

    SIMPLE = 1
    JUMP = 2


class RejectReason(IntEnum):
    """Why a candidate move was refused."""

    OUT_OF_BOUNDS = auto()
    EMPTY_SOURCE = auto()
    WRONG_OWNER = auto()
    DESTINATION_OCCUPIED = auto()
    ILLEGAL_SQUARE = auto()
    ILLEGAL_SHAPE = auto()
    JUMP_REQUIRED = auto()
    NO_PIECE_TO_CAPTURE = auto()
    CANNOT_CAPTURE_OWN_PIECE = auto()
    UNRESOLVED = auto()

    @property
    def text(self) -> str:
        """User-facing message for this reason."""
        return _REJECT_TEXT[self]


_REJECT_TEXT: dict[RejectReason, str] = {
    RejectReason.OUT_OF_BOUNDS: "That square is off the board!",
    RejectReason.EMPTY_SOURCE: "There is no piece there!",
    RejectReason.WRONG_OWNER: "That is not your piece!",
    RejectReason.DESTINATION_OCCUPIED: "That square is already occupied!",
    RejectReason.ILLEGAL_SQUARE: "Pieces may only move to dark squares!",
    RejectReason.ILLEGAL_SHAPE: (
        "Pieces may only move diagonally, one or two squares!"
    ),
    RejectReason.JUMP_REQUIRED: "Jump required!",
    RejectReason.NO_PIECE_TO_CAPTURE: "There is no piece to jump!",
    RejectReason.CANNOT_CAPTURE_OWN_PIECE: "You cannot jump your own piece!",
    RejectReason.UNRESOLVED: "That move could not be resolved.",
}


class TurnStatus(IntEnum):
    """What happens after an executed move."""

    TURN_ENDS = 1
    MUST_CONTINUE = 2


class MessageType(IntEnum):
    """Tag of a caller-facing message."""

    INFO = 1
    ERROR = 2

    def __str__(self) -> str:
        return self.name


class CaptureRule(IntEnum):
    """Scope of the forced-capture rule."""

    PER_PIECE = 1  # only the moving piece must jump if it can
    GLOBAL = 2  # any jump available to the side forbids quiet moves


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    RED_WINS = 1
    WHITE_WINS = 2
