"""Message — caller-facing outcome text."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import MessageType


@dataclass(frozen=True, slots=True)
class Message:
    """Tagged text forwarded verbatim to whatever presents the game."""

    type: MessageType
    text: str

    @classmethod
    def info(cls, text: str) -> Message:
        return cls(MessageType.INFO, text)

    @classmethod
    def error(cls, text: str) -> Message:
        return cls(MessageType.ERROR, text)

    @property
    def is_error(self) -> bool:
        return self.type == MessageType.ERROR

    def __str__(self) -> str:
        return f"{self.type}: {self.text}"
