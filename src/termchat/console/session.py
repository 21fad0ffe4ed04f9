"""Console session state machine.

Owns the message store and the input buffer and applies Actions to them.
It knows nothing about the terminal: the Textual app feeds it Actions and
redraws from its state, and tests drive it directly.
"""

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from ..llm.errors import GatewayError
from .actions import (
    Action,
    AppendChar,
    ClearHistory,
    DeleteChar,
    Quit,
    Send,
)
from .config import STATUS_BUSY, STATUS_WAITING, FailurePolicy, SessionConfig
from .models import Message, MessageStore, Role

if TYPE_CHECKING:
    from ..llm.gateway import Gateway

DebugCallback = Callable[[str, str, str], None]  # (level, component, message)


class SessionState(str, Enum):
    RUNNING = "running"
    TERMINATING = "terminating"


class ChatSession:
    """Conversation state plus the rules for changing it.

    Send is split in two so a UI can run the round-trip in the background:
    submit() drains the buffer synchronously, complete() awaits the reply.
    apply() does both in sequence.

    Example:
        session = ChatSession(gateway)
        for char in "ping":
            await session.apply(AppendChar(char))
        await session.apply(Send())
        [m.text for m in session.store]  # ["ping", "pong"]
    """

    def __init__(
        self,
        gateway: "Gateway",
        config: SessionConfig | None = None,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._gateway = gateway
        self._config = config or SessionConfig()
        self._debug_callback = debug_callback
        self.store = MessageStore()
        self.buffer = ""
        self.state = SessionState.RUNNING
        self.status: str | None = None
        self._pending = False
        self._context: tuple[Message, ...] = ()
        # Bumped by ClearHistory so late replies to cleared prompts are dropped
        self._generation = 0
        self._submitted_generation = 0

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def pending(self) -> bool:
        """True while a reply is outstanding."""
        return self._pending

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the callback that receives diagnostic messages."""
        self._debug_callback = callback

    def _log(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Session", message)

    async def apply(self, action: Action) -> SessionState:
        """Apply an action end to end, awaiting any reply it triggers."""
        prompt = self.apply_local(action)
        if prompt is not None:
            await self.complete(prompt)
        return self.state

    def apply_local(self, action: Action) -> Message | None:
        """Apply the synchronous part of an action.

        Returns:
            The submitted prompt when the action was a Send that went out,
            otherwise None
        """
        if not self.running:
            return None

        if isinstance(action, Quit):
            self.state = SessionState.TERMINATING
            self._log("info", "Quit requested")
        elif isinstance(action, Send):
            return self.submit()
        elif isinstance(action, ClearHistory):
            self.store.clear()
            self._generation += 1
            if not self._pending:
                self.status = None
            self._log("info", "History cleared")
        elif isinstance(action, DeleteChar):
            self.buffer = self.buffer[:-1]
            self._clear_failure()
        elif isinstance(action, AppendChar):
            self.buffer += action.char
            self._clear_failure()
        return None

    def _clear_failure(self) -> None:
        if not self._pending:
            self.status = None

    def submit(self) -> Message | None:
        """Drain the buffer into a new user message.

        Returns None (and leaves the buffer alone) when a reply is still
        pending, or when the buffer is empty and empty sends are rejected.
        """
        if self._pending:
            self.status = STATUS_BUSY
            self._log("debug", "Send ignored: reply pending")
            return None
        if not self.buffer and not self._config.allow_empty:
            self._log("debug", "Send ignored: empty input")
            return None

        text, self.buffer = self.buffer, ""
        self._context = tuple(self.store) if self._config.include_history else ()
        prompt = self.store.append(Role.USER, text)
        self._pending = True
        self._submitted_generation = self._generation
        self.status = STATUS_WAITING
        self._log("info", f"Sending prompt ({len(text)} chars, {len(self._context)} context)")
        return prompt

    async def complete(self, prompt: Message) -> Message | None:
        """Await the reply to ``prompt`` and store it.

        Gateway failures never reach the caller: the prompt stays
        unanswered and, under FailurePolicy.STATUS, the status line says why.

        Returns:
            The stored assistant message, or None if nothing was stored
        """
        try:
            reply = await self._gateway.complete(prompt, self._context)
        except GatewayError as e:
            self._log("warning", f"Send failed ({e.kind}): {e}")
            if self._config.failure_policy is FailurePolicy.STATUS:
                self.status = f"send failed ({e.kind})"
            else:
                self.status = None
            return None
        finally:
            self._pending = False
            self._context = ()

        self.status = None
        if self._submitted_generation != self._generation:
            self._log("debug", "Reply dropped: history was cleared")
            return None
        message = self.store.append(Role.ASSISTANT, reply.text)
        self._log("info", f"Reply received ({len(reply.text)} chars)")
        return message
