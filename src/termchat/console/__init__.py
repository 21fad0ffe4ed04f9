"""Terminal console module for termchat.

Provides the interactive chat loop.

Module structure (each module hides a design decision):
- models.py: Conversation data (messages, the message store)
- actions.py: Key classification (which key does what)
- render.py: Frame layout (regions, wrapping, cursor placement)
- session.py: State machine (how actions change the conversation)
- config.py: Constants, log levels and session options
- widgets.py: Textual widgets (console view, log panel)
- styles.py: CSS styling (layout decisions)
- app.py: Application orchestration (terminal ownership, background replies)
"""

from .models import Message, MessageStore, Role
from .actions import (
    Action,
    AppendChar,
    ClearHistory,
    DeleteChar,
    Ignore,
    Quit,
    Send,
    classify,
)
from .app import ConsoleApp, ConsoleError, run_console
from .config import FailurePolicy, LogLevel, SessionConfig
from .render import Frame, FrameRenderer
from .session import ChatSession, SessionState
from .widgets import ConsoleView, DebugPanel

__all__ = [
    "Action",
    "AppendChar",
    "ChatSession",
    "ClearHistory",
    "ConsoleApp",
    "ConsoleError",
    "ConsoleView",
    "DebugPanel",
    "DeleteChar",
    "FailurePolicy",
    "Frame",
    "FrameRenderer",
    "Ignore",
    "LogLevel",
    "Message",
    "MessageStore",
    "Quit",
    "Role",
    "Send",
    "SessionConfig",
    "SessionState",
    "classify",
    "run_console",
]
