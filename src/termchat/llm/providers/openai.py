from typing import Any

import openai
from openai import AsyncOpenAI

from ..base import LLMProvider
from ..errors import (
    GatewayConnectionError,
    GatewayResponseError,
    GatewayTimeoutError,
)
from ..models import ChatMessage, LLMResponse


class OpenAIProvider(LLMProvider):
    """OpenAI Chat Completions provider.

    Also serves any OpenAI-compatible endpoint through ``base_url``.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Mapping of SDK exceptions onto GatewayError
    - Authentication mechanism
    """

    name = "openai"
    default_model = "gpt-4o-mini"

    def __init__(
        self,
        api_key: str,
        model: str = default_model,
        base_url: str | None = None,
        organization: str | None = None,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default model to use
            base_url: Optional custom API base URL
            organization: Optional organization ID
            timeout: Per-request timeout in seconds (None keeps the SDK default)
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
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
        """Generate a chat completion.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            **kwargs: Additional OpenAI-specific parameters

        Returns:
            LLMResponse with generated content
        """
        request_params: dict[str, Any] = {
            "model": model or self._model,
            "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
            "temperature": temperature,
            **kwargs
        }
        if max_tokens is not None:
            request_params["max_tokens"] = max_tokens

        try:
            completion = await self._client.chat.completions.create(**request_params)
        except openai.APITimeoutError as e:
            raise GatewayTimeoutError(str(e), provider=self.name) from e
        except openai.APIConnectionError as e:
            raise GatewayConnectionError(str(e), provider=self.name) from e
        except openai.APIStatusError as e:
            raise GatewayResponseError(
                str(e), provider=self.name, status_code=e.status_code
            ) from e
        except openai.APIError as e:
            raise GatewayResponseError(str(e), provider=self.name) from e

        if not completion.choices:
            raise GatewayResponseError("response contained no choices", provider=self.name)

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }

        return LLMResponse(
            content=completion.choices[0].message.content or "",
            model=completion.model,
            usage=usage
        )

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
