"""Pytest configuration and shared fixtures."""
import os
from collections.abc import Sequence

import pytest
from textual import events

from termchat.console import ChatSession, Message, Role, SessionConfig
from termchat.llm import GatewayConnectionError, GatewayError, LLMProvider, LLMResponse


class StubGateway:
    """Gateway that answers every prompt with a fixed reply."""

    def __init__(self, reply: str = "pong") -> None:
        self.reply = reply
        self.calls: list[tuple[Message, tuple[Message, ...]]] = []

    async def complete(
        self, prompt: Message, context: Sequence[Message] = ()
    ) -> Message:
        self.calls.append((prompt, tuple(context)))
        return Message(role=Role.ASSISTANT, text=self.reply)


class FailingGateway:
    """Gateway that always raises the given GatewayError."""

    def __init__(self, error: GatewayError | None = None) -> None:
        self.error = error or GatewayConnectionError("connection refused")
        self.calls = 0

    async def complete(
        self, prompt: Message, context: Sequence[Message] = ()
    ) -> Message:
        self.calls += 1
        raise self.error


class StubProvider(LLMProvider):
    """In-memory LLMProvider that records requests."""

    name = "stub"
    default_model = "stub-model"

    def __init__(self, content: str = "pong") -> None:
        self.content = content
        self.requests: list[dict] = []
        self.closed = False

    @property
    def model(self) -> str:
        return self.default_model

    async def chat_completion(self, messages, model=None, temperature=0.7, max_tokens=None, **kwargs):
        self.requests.append({"messages": list(messages), "model": model, "temperature": temperature})
        return LLMResponse(content=self.content, model=model or self.default_model)

    async def close(self) -> None:
        self.closed = True


def key(name: str, character: str | None = None) -> events.Key:
    """Build a Textual key event; single characters carry themselves."""
    if character is None and len(name) == 1:
        character = name
    return events.Key(name, character)


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
        "deepseek": os.getenv("DEEPSEEK_API_KEY"),
        "anthropic": os.getenv("ANTHROPIC_API_KEY"),
    }


@pytest.fixture
def stub_gateway():
    return StubGateway("pong")


@pytest.fixture
def failing_gateway():
    return FailingGateway()


@pytest.fixture
def session(stub_gateway):
    """Session answering 'pong' with default configuration."""
    return ChatSession(stub_gateway)


@pytest.fixture
def failing_session(failing_gateway):
    """Session whose every send fails with a network error."""
    return ChatSession(failing_gateway, SessionConfig())
