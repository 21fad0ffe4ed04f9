"""Main Textual console application.

Hosts a ChatSession: Textual owns the terminal (raw mode, alternate screen,
cursor) for the lifetime of run_async() and restores it on every exit path.
"""

import asyncio
from typing import Any

from textual import work
from textual.app import App, ComposeResult

from .actions import Quit
from .config import LogLevel, SessionConfig
from .models import Message
from .session import ChatSession
from .styles import APP_CSS
from .widgets import ConsoleView, DebugPanel


class ConsoleError(RuntimeError):
    """The console stopped on an unhandled error (terminal or render failure)."""

    def __init__(self, return_code: int) -> None:
        super().__init__(f"console exited with code {return_code}")
        self.return_code = return_code


class ConsoleApp(App):
    """Textual TUI for a single chat session."""

    CSS = APP_CSS
    TITLE = "termchat"
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        session: ChatSession,
        log_level: str | None = None,
        model_name: str | None = None,
    ) -> None:
        super().__init__()
        self._session = session
        self._log_level = log_level
        if model_name:
            self.sub_title = model_name

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield ConsoleView(self._session, id="console")
        yield DebugPanel(id="debug-panel")

    def on_mount(self) -> None:
        """Called when app is mounted."""
        if self._log_level is not None:
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")
            if self.sub_title:
                log_panel.info("TUI", f"Model: {self.sub_title}")

        self._session.set_debug_callback(self._route_debug)
        self.query_one("#console", ConsoleView).focus()

    def on_unmount(self) -> None:
        self._session.set_debug_callback(None)

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route session diagnostics to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.log_entry(component, message, LogLevel.from_string(level))

    def _refresh_console(self) -> None:
        self.query_one("#console", ConsoleView).refresh()

    def on_console_view_dispatched(self, event: ConsoleView.Dispatched) -> None:
        """Apply a classified key press to the session."""
        if isinstance(event.action, Quit):
            self.action_quit()
            return
        prompt = self._session.apply_local(event.action)
        if prompt is not None:
            self._request_reply(prompt)
        self._refresh_console()

    def action_quit(self) -> None:
        """Terminate the session and leave the app.

        Shared by the Ctrl+Q key path and Textual's own quit binding.
        """
        self._session.apply_local(Quit())
        self.exit()

    @work(exclusive=True, group="completion")
    async def _request_reply(self, prompt: Message) -> None:
        """Await the reply in a background worker so the UI keeps drawing."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        try:
            await self._session.complete(prompt)
        except asyncio.CancelledError:
            log_panel.warning("TUI", "Request cancelled")
            raise
        self._refresh_console()


async def run_console(
    llm: Any,
    config: SessionConfig | None = None,
    model: str | None = None,
    log_level: str | None = None,
) -> ChatSession:
    """Run the console until the user quits.

    Args:
        llm: LLM provider instance; closed when the console exits
        config: Session behaviour switches
        model: Model override (None uses the provider's default)
        log_level: Log level for panel (debug/info/warning/error), None to hide

    Returns:
        The finished session, for callers that want the transcript

    Raises:
        ConsoleError: If the app stopped on an unhandled exception. Textual
            has already restored the terminal and printed the traceback.
    """
    from ..llm.gateway import CompletionGateway

    config = config or SessionConfig()
    async with llm:
        gateway = CompletionGateway(
            llm,
            model=model,
            system_prompt=config.system_prompt,
            timeout=config.timeout,
        )
        session = ChatSession(gateway, config)
        app = ConsoleApp(session, log_level=log_level, model_name=gateway.model)
        try:
            await app.run_async()
        except (KeyboardInterrupt, asyncio.CancelledError):
            pass
    if app.return_code:
        raise ConsoleError(app.return_code)
    return session
