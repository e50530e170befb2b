"""Rule variations the engine can be configured with."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import CaptureRule


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable rule configuration.

    Args:
        capture_rule: Whether forced capture binds only the moving piece or
            every piece of the side to move.
        crowning_ends_turn: Whether a jump that crowns a man ends the turn
            even when the new king could keep jumping.
    """

    capture_rule: CaptureRule = CaptureRule.PER_PIECE
    crowning_ends_turn: bool = False

    # Presets
    @classmethod
    def casual(cls) -> RuleSet:
        return cls()

    @classmethod
    def tournament(cls) -> RuleSet:
        """Standard English draughts: global forced capture, crowning stops."""
        return cls(capture_rule=CaptureRule.GLOBAL, crowning_ends_turn=True)

    def __repr__(self) -> str:
        return (
            f"RuleSet(capture={self.capture_rule.name.lower()}, "
            f"crowning_ends_turn={self.crowning_ends_turn})"
        )
