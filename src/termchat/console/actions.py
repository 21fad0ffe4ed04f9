"""Key classification.

Hides which keys do what: every terminal event maps to exactly one Action,
and the mapping holds no state.
"""

from dataclasses import dataclass

from textual import events


@dataclass(frozen=True)
class Quit:
    """End the session."""


@dataclass(frozen=True)
class Send:
    """Submit the input buffer as a prompt."""


@dataclass(frozen=True)
class ClearHistory:
    """Empty the message store. The input buffer is kept."""


@dataclass(frozen=True)
class DeleteChar:
    """Remove the last character of the input buffer."""


@dataclass(frozen=True)
class AppendChar:
    """Append one character to the input buffer."""

    char: str


@dataclass(frozen=True)
class Ignore:
    """No state change."""


Action = Quit | Send | ClearHistory | DeleteChar | AppendChar | Ignore

# Chords and editing keys, by Textual key name
KEY_ACTIONS: dict[str, Action] = {
    "ctrl+q": Quit(),
    "ctrl+s": Send(),
    "ctrl+n": ClearHistory(),
    "backspace": DeleteChar(),
    "ctrl+h": DeleteChar(),  # Backspace on terminals that send ^H
}


def classify(event: object) -> Action:
    """Map a terminal event to its Action.

    Total over any input: non-key events and unmapped keys give Ignore.
    """
    if not isinstance(event, events.Key):
        return Ignore()
    action = KEY_ACTIONS.get(event.key)
    if action is not None:
        return action
    if event.is_printable and event.character:
        return AppendChar(event.character)
    return Ignore()
