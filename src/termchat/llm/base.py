from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse

DEFAULT_TIMEOUT = 60.0  # Seconds before a pending request is abandoned


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which completion service is used.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Translating SDK exceptions into the GatewayError hierarchy

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_completion(messages)
        # Automatically cleaned up
    """

    #: Short identifier used in error messages and the CLI.
    name: str = "unknown"
    #: Model used when none is configured.
    default_model: str = ""

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model identifier sent with each request."""

    @abstractmethod
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
            messages: List of chat messages forming the conversation history
            model: Model to use (None uses provider's default)
            temperature: Sampling temperature (0.0 to 2.0)
            max_tokens: Maximum tokens to generate
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing generated content and metadata

        Raises:
            GatewayConnectionError: The service could not be reached
            GatewayTimeoutError: The request exceeded the client timeout
            GatewayResponseError: Error status or unusable payload
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
