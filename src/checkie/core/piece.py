"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, Rank

# Text character <-> (Color, Rank)
_CHAR_MAP: dict[str, tuple[Color, Rank]] = {
    "r": (Color.RED, Rank.MAN),
    "R": (Color.RED, Rank.KING),
    "w": (Color.WHITE, Rank.MAN),
    "W": (Color.WHITE, Rank.KING),
}

_TEXT_CHARS: dict[tuple[Color, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checker."""

    color: Color
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def crowned(self) -> Piece:
        """The king this piece becomes on promotion."""
        if self.rank == Rank.KING:
            return self
        return Piece(self.color, Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Board character (lowercase = man, uppercase = king)."""
        return _TEXT_CHARS[(self.color, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a board character, e.g. 'W' → white king."""
        try:
            color, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, rank)
