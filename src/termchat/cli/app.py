"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..console import ConsoleError, FailurePolicy, SessionConfig, run_console
from ..console.config import DEFAULT_SYSTEM_PROMPT
from ..llm import DEFAULT_TIMEOUT, PROVIDER_CLASSES
from .providers import PROVIDER_ENV, require_llm, resolve_provider_name

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="termchat",
    help="Interactive terminal chat with LLM completion services",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

LOG_LEVELS = ("debug", "info", "warning", "error")


@app.command()
def chat(
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="Completion service: openai, deepseek or anthropic (default: $LLM_PROVIDER or openai)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (default: provider's model env var, then its built-in default)"
    ),
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        help="API key (default: provider's key env var)"
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Custom endpoint for OpenAI-compatible servers"
    ),
    system_prompt: str = typer.Option(
        DEFAULT_SYSTEM_PROMPT,
        "--system-prompt",
        "-s",
        help="System prompt sent with every request (empty string to omit)"
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT,
        "--timeout",
        "-t",
        help="Seconds to wait for a reply"
    ),
    allow_empty: bool = typer.Option(
        True,
        "--allow-empty/--reject-empty",
        help="Whether Ctrl+S on an empty input sends an empty message"
    ),
    failure_policy: FailurePolicy = typer.Option(
        FailurePolicy.STATUS,
        "--failure-policy",
        help="How failed sends are shown: silent or status"
    ),
    history: bool = typer.Option(
        False,
        "--history/--no-history",
        help="Send earlier turns as context with each prompt"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level: debug, info, warning or error"
    ),
):
    """Open the interactive chat console."""
    if log_level is not None and log_level.lower() not in LOG_LEVELS:
        console.print(f"[red]Error: Invalid log level '{log_level}'. Choose from: {', '.join(LOG_LEVELS)}[/red]")
        raise typer.Exit(code=1)

    try:
        config = SessionConfig(
            allow_empty=allow_empty,
            failure_policy=failure_policy,
            include_history=history,
            system_prompt=system_prompt or None,
            timeout=timeout,
        )
    except ValidationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    llm = require_llm(
        console,
        provider=provider,
        api_key=api_key,
        model=model,
        base_url=base_url,
        timeout=timeout,
    )
    try:
        asyncio.run(run_console(llm, config=config, log_level=log_level))
    except ConsoleError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=e.return_code)


@app.command()
def providers():
    """List supported completion services and their settings."""
    active = resolve_provider_name()

    table = Table(title="Providers")
    table.add_column("Provider", style="cyan")
    table.add_column("Default model", style="magenta")
    table.add_column("Key variable", style="green")

    for name, provider_cls in PROVIDER_CLASSES.items():
        env = PROVIDER_ENV[name]
        label = f"{name} [bold](active)[/bold]" if name == active else name
        table.add_row(label, provider_cls.default_model, env.api_key)

    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
