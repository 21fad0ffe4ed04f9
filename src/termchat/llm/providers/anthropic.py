"""Anthropic Claude LLM provider implementation.

Uses the official Anthropic Python SDK for async chat completions.
Reference: https://github.com/anthropics/anthropic-sdk-python
"""

from typing import Any

import anthropic
from anthropic import AsyncAnthropic

from ..base import LLMProvider
from ..errors import (
    GatewayConnectionError,
    GatewayResponseError,
    GatewayTimeoutError,
)
from ..models import ChatMessage, LLMResponse

DEFAULT_MAX_TOKENS = 4096  # Messages API requires an explicit limit


class AnthropicProvider(LLMProvider):
    """Anthropic Claude LLM provider implementation.

    Hidden design decisions:
    - Anthropic API client initialization
    - System prompt travels outside the message list
    - Mapping of SDK exceptions onto GatewayError
    """

    name = "anthropic"
    default_model = "claude-sonnet-4-20250514"

    def __init__(
        self,
        api_key: str,
        model: str = default_model,
        base_url: str | None = None,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize Anthropic provider.

        Args:
            api_key: Anthropic API key
            model: Default model to use (default: claude-sonnet-4-20250514)
            base_url: Optional custom API base URL
            timeout: Per-request timeout in seconds (None keeps the SDK default)
            **client_kwargs: Additional kwargs for AsyncAnthropic client
        """
        self._model = model
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = AsyncAnthropic(
            api_key=api_key,
            base_url=base_url,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion using Anthropic Claude.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate (default: 4096)
            **kwargs: Additional Anthropic-specific parameters

        Returns:
            LLMResponse with generated content
        """
        system_parts = [msg.content for msg in messages if msg.role == "system"]
        request_params: dict[str, Any] = {
            "model": model or self._model,
            "messages": [
                {"role": msg.role, "content": msg.content}
                for msg in messages
                if msg.role != "system"
            ],
            "temperature": temperature,
            "max_tokens": max_tokens or DEFAULT_MAX_TOKENS,
            **kwargs
        }
        if system_parts:
            request_params["system"] = "\n\n".join(system_parts)

        try:
            response = await self._client.messages.create(**request_params)
        except anthropic.APITimeoutError as e:
            raise GatewayTimeoutError(str(e), provider=self.name) from e
        except anthropic.APIConnectionError as e:
            raise GatewayConnectionError(str(e), provider=self.name) from e
        except anthropic.APIStatusError as e:
            raise GatewayResponseError(
                str(e), provider=self.name, status_code=e.status_code
            ) from e
        except anthropic.APIError as e:
            raise GatewayResponseError(str(e), provider=self.name) from e

        # Multiple content blocks are concatenated; non-text blocks are skipped
        content = "".join(
            block.text for block in response.content if hasattr(block, "text")
        )

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.input_tokens,
                "completion_tokens": response.usage.output_tokens,
                "total_tokens": response.usage.input_tokens + response.usage.output_tokens
            }

        return LLMResponse(content=content, model=response.model, usage=usage)

    async def close(self) -> None:
        """Close the Anthropic client."""
        await self._client.close()
