"""
termchat: an interactive terminal client for LLM chat completions.

Each subpackage hides one design decision: ``console`` how the
conversation is shown and edited, ``llm`` which completion service
answers, ``cli`` how the program is configured and launched.
"""

__version__ = "0.1.0"

from .console import ChatSession, Message, MessageStore, Role, run_console
from .llm import CompletionGateway, GatewayError, create_llm_provider

__all__ = [
    "ChatSession",
    "CompletionGateway",
    "GatewayError",
    "Message",
    "MessageStore",
    "Role",
    "create_llm_provider",
    "run_console",
]
