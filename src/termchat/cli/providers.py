"""Provider factory functions for CLI.

Centralizes creation of the LLM provider from options and environment
variables. Hides configuration details from command implementations.
"""

import os
from dataclasses import dataclass

from rich.console import Console

from ..llm import LLMProvider, create_llm_provider

# Default console for output
_console = Console()

DEFAULT_PROVIDER = "openai"


@dataclass(frozen=True)
class ProviderEnv:
    """Environment variables read for one provider."""

    api_key: str
    model: str
    base_url: str


PROVIDER_ENV = {
    "openai": ProviderEnv("OPENAI_API_KEY", "OPENAI_CHAT_MODEL", "OPENAI_BASE_URL"),
    "deepseek": ProviderEnv("DEEPSEEK_API_KEY", "DEEPSEEK_MODEL", "DEEPSEEK_BASE_URL"),
    "anthropic": ProviderEnv("ANTHROPIC_API_KEY", "ANTHROPIC_MODEL", "ANTHROPIC_BASE_URL"),
}

PROVIDER_ALIASES = {"claude": "anthropic"}


def resolve_provider_name(provider: str | None = None) -> str:
    """Normalize a provider name, falling back to $LLM_PROVIDER then openai."""
    name = (provider or os.getenv("LLM_PROVIDER") or DEFAULT_PROVIDER).lower()
    return PROVIDER_ALIASES.get(name, name)


def get_llm(
    provider: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
    console: Console | None = None,
) -> LLMProvider | None:
    """Create LLM provider from options, then environment variables.

    Explicit arguments win over the environment.

    Args:
        provider: Provider name (openai, deepseek, anthropic)
        api_key: API key
        model: Default model for the session
        base_url: Custom endpoint URL
        timeout: Client timeout in seconds
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        LLM_PROVIDER: Provider type (default: openai)
        OPENAI_API_KEY / OPENAI_CHAT_MODEL / OPENAI_BASE_URL
        DEEPSEEK_API_KEY / DEEPSEEK_MODEL / DEEPSEEK_BASE_URL
        ANTHROPIC_API_KEY / ANTHROPIC_MODEL / ANTHROPIC_BASE_URL
    """
    con = console or _console
    name = resolve_provider_name(provider)

    env = PROVIDER_ENV.get(name)
    if env is None:
        con.print(f"[red]Error: Unknown LLM provider: {name}[/red]")
        return None

    key = api_key or os.getenv(env.api_key)
    if not key:
        con.print(f"[yellow]Warning: {env.api_key} not set and no --api-key given[/yellow]")
        return None

    config: dict[str, object] = {"api_key": key, "timeout": timeout}
    model = model or os.getenv(env.model)
    if model:
        config["model"] = model
    base_url = base_url or os.getenv(env.base_url)
    if base_url:
        config["base_url"] = base_url

    return create_llm_provider(name, **config)


def require_llm(console: Console | None = None, **options: object) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Args:
        console: Optional Rich console for output
        **options: Forwarded to get_llm

    Returns:
        LLM provider instance

    Raises:
        SystemExit: If LLM provider is not configured
    """
    import typer

    con = console or _console
    llm = get_llm(console=con, **options)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm
