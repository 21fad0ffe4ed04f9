from typing import Any

from .openai import OpenAIProvider


class DeepSeekProvider(OpenAIProvider):
    """DeepSeek provider over its OpenAI-compatible API.

    Only the defaults differ from OpenAIProvider.
    """

    name = "deepseek"
    default_model = "deepseek-chat"

    def __init__(
        self,
        api_key: str,
        model: str = default_model,
        base_url: str = "https://api.deepseek.com",
        **client_kwargs: Any
    ):
        """Initialize DeepSeek provider.

        Args:
            api_key: DeepSeek API key
            model: Default model to use ('deepseek-chat' or 'deepseek-reasoner')
            base_url: DeepSeek API base URL (default: https://api.deepseek.com)
            **client_kwargs: Passed through to OpenAIProvider
        """
        super().__init__(api_key=api_key, model=model, base_url=base_url, **client_kwargs)
