"""Data models for the console.

Hides the internal representation of conversation turns.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Who sent a message."""

    USER = "user"
    ASSISTANT = "assistant"

    @property
    def prefix(self) -> str:
        """Label shown before the message text."""
        return "You" if self is Role.USER else "Bot"


@dataclass(frozen=True)
class Message:
    """One conversation turn. Immutable once created."""

    role: Role
    text: str

    def display(self) -> str:
        return f"{self.role.prefix}: {self.text}"


class MessageStore:
    """Ordered log of conversation turns, oldest first.

    Append-only apart from clear(); there is no size cap.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, role: Role, text: str) -> Message:
        """Add a message to the end and return it."""
        message = Message(role=role, text=text)
        self._messages.append(message)
        return message

    def clear(self) -> None:
        """Remove every message."""
        self._messages.clear()

    def iterate(self) -> Iterator[Message]:
        """Iterate messages in insertion order. Each call starts afresh."""
        return iter(tuple(self._messages))

    def last(self, role: Role | None = None) -> Message | None:
        """Most recent message, optionally restricted to one role."""
        for message in reversed(self._messages):
            if role is None or message.role is role:
                return message
        return None

    def __iter__(self) -> Iterator[Message]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._messages)
