"""Completion gateway: the boundary between the console and a provider.

Hides how a console Message becomes a provider request (system prompt,
prior turns, model id) and bounds every round-trip with a timeout.
"""

import asyncio
from collections.abc import Sequence
from typing import Protocol

from ..console.models import Message, Role
from .base import DEFAULT_TIMEOUT, LLMProvider
from .errors import GatewayTimeoutError
from .models import ChatMessage



class Gateway(Protocol):
    """Anything that turns a prompt into one assistant reply."""

    async def complete(
        self, prompt: Message, context: Sequence[Message] = ()
    ) -> Message: ...


class CompletionGateway:
    """Sends a prompt (plus optional context) through an LLMProvider.

    Example:
        async with create_llm_provider("openai", api_key=key) as llm:
            gateway = CompletionGateway(llm, system_prompt="Be brief.")
            reply = await gateway.complete(Message(role=Role.USER, text="hi"))
    """

    def __init__(
        self,
        llm: LLMProvider,
        *,
        model: str | None = None,
        system_prompt: str | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        temperature: float = 0.7,
    ) -> None:
        self._llm = llm
        self._model = model
        self._system_prompt = system_prompt
        self._timeout = timeout
        self._temperature = temperature

    @property
    def model(self) -> str:
        """Model identifier sent with each request."""
        return self._model or self._llm.model

    def build_messages(
        self, prompt: Message, context: Sequence[Message] = ()
    ) -> list[ChatMessage]:
        """Build the provider message list: system, prior turns, prompt."""
        messages: list[ChatMessage] = []
        if self._system_prompt:
            messages.append(ChatMessage(role="system", content=self._system_prompt))
        for msg in (*context, prompt):
            messages.append(ChatMessage(role=msg.role.value, content=msg.text))
        return messages

    async def complete(
        self, prompt: Message, context: Sequence[Message] = ()
    ) -> Message:
        """Request one reply for ``prompt``.

        Args:
            prompt: The user's message
            context: Earlier turns to send before the prompt, oldest first

        Returns:
            A single assistant Message holding the full reply

        Raises:
            GatewayError: Any provider failure, including the timeout
        """
        request = self._llm.chat_completion(
            self.build_messages(prompt, context),
            model=self.model,
            temperature=self._temperature,
        )
        try:
            response = await asyncio.wait_for(request, timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise GatewayTimeoutError(
                f"no reply within {self._timeout:g}s", provider=self._llm.name
            ) from e
        return Message(role=Role.ASSISTANT, text=response.content)
