from .base import DEFAULT_TIMEOUT, LLMProvider
from .errors import (
    GatewayConnectionError,
    GatewayError,
    GatewayResponseError,
    GatewayTimeoutError,
)
from .factory import PROVIDER_CLASSES, SUPPORTED_PROVIDERS, create_llm_provider
from .gateway import CompletionGateway, Gateway
from .models import ChatMessage, LLMResponse
from .providers import AnthropicProvider, DeepSeekProvider, OpenAIProvider

__all__ = [
    "DEFAULT_TIMEOUT",
    "PROVIDER_CLASSES",
    "SUPPORTED_PROVIDERS",
    "AnthropicProvider",
    "ChatMessage",
    "CompletionGateway",
    "DeepSeekProvider",
    "Gateway",
    "GatewayConnectionError",
    "GatewayError",
    "GatewayResponseError",
    "GatewayTimeoutError",
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "create_llm_provider",
]
