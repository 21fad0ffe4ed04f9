"""Custom Textual widgets for the console.

Hides widget implementation details:
- How a key press becomes an Action message
- Frame drawing inside the Textual screen
- Log rendering and level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual import events
from textual.message import Message
from textual.widget import Widget
from textual.widgets import RichLog

from .actions import Action, Ignore, classify
from .config import LogLevel
from .render import Frame, FrameRenderer
from .session import ChatSession


class ConsoleView(Widget, can_focus=True):
    """Full-pane view of a ChatSession.

    Draws whatever the session currently holds and turns each key press
    into a Dispatched message. It never changes session state itself.
    """

    class Dispatched(Message):
        """Posted for every key that maps to something other than Ignore."""

        def __init__(self, action: Action) -> None:
            super().__init__()
            self.action = action

    def __init__(
        self,
        session: ChatSession,
        renderer: FrameRenderer | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._session = session
        self._renderer = renderer or FrameRenderer()

    def current_frame(self) -> Frame:
        """Frame for the session's current state at the widget's size."""
        session = self._session
        return self._renderer.render(
            session.store, session.buffer, tuple(self.size), session.status
        )

    def render(self) -> Frame:
        return self.current_frame()

    def on_key(self, event: events.Key) -> None:
        action = classify(event)
        if isinstance(action, Ignore):
            return
        event.prevent_default()
        event.stop()
        self.post_message(self.Dispatched(action))


class DebugPanel(RichLog, can_focus=False):
    """Log panel for real-time session tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by the stylesheet; shown when the app is started with a log level.
    Never takes focus, so every key keeps reaching the console view.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Session": "green",
        "Gateway": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def log_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> bool:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, Gateway)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)

        Returns:
            True if the entry was written
        """
        if level < self._log_level:
            return False

        timestamp = datetime.now().strftime("%H:%M:%S")
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{escape(component)}][/] {escape(message)}"
        )
        return True

    def debug(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()
