"""Console configuration.

Centralizes magic numbers, fixed strings and session options for the
console module.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..llm.base import DEFAULT_TIMEOUT


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


class FailurePolicy(str, Enum):
    """What the user sees when a send fails."""

    SILENT = "silent"  # Nothing; the prompt simply stays unanswered
    STATUS = "status"  # Transient indicator in the input border


# Layout (rows include borders)
INPUT_REGION_HEIGHT = 3
HELP_REGION_HEIGHT = 1
MIN_HISTORY_HEIGHT = 2  # Border only

# Region titles and legend
HISTORY_TITLE = "History"
INPUT_TITLE = "Input"
HELP_TEXT = "Ctrl+S:send|Ctrl+Q:quit|Ctrl+N:clear history"

# Status line texts
STATUS_WAITING = "waiting for reply..."
STATUS_BUSY = "still waiting, send ignored"

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


class SessionConfig(BaseModel):
    """Behaviour switches for a console session."""

    model_config = ConfigDict(frozen=True)

    allow_empty: bool = Field(
        default=True,
        description="Send an empty buffer as an empty message instead of ignoring it"
    )
    failure_policy: FailurePolicy = Field(
        default=FailurePolicy.STATUS,
        description="How failed sends are surfaced"
    )
    include_history: bool = Field(
        default=False,
        description="Send earlier turns as context with each prompt"
    )
    system_prompt: str | None = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System prompt prepended to every request"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Seconds to wait for a reply"
    )
