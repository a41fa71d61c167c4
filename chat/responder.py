"""Reply policies for the chat responder.

The route only depends on the ``Responder`` protocol, so the echo policy
below can be replaced by a retrieval/generation backend without changing
the ``/api/chat`` request/reply contract.
"""

from typing import Protocol
import structlog

from config import get_settings

logger = structlog.get_logger()


class Responder(Protocol):
    """Maps a user message to a reply string."""

    async def reply(self, message: str) -> str:
        ...


class EchoResponder:
    """Placeholder policy: echo back a truncated copy of the message."""

    def __init__(self, prefix: str = "Echo: ", max_chars: int = 100):
        if not prefix:
            raise ValueError("prefix must be a non-empty string")
        if max_chars < 0:
            raise ValueError(f"max_chars must be non-negative, got {max_chars}")
        self.prefix = prefix
        self.max_chars = max_chars

    async def reply(self, message: str) -> str:
        """Return the prefix followed by at most ``max_chars`` characters of the message."""
        reply = f"{self.prefix}{message[:self.max_chars]}"
        logger.debug("echo_reply_built", message_length=len(message), truncated=len(message) > self.max_chars)
        return reply


# Dependency injection helper
def get_responder() -> Responder:
    """FastAPI dependency for the active reply policy."""
    settings = get_settings()
    return EchoResponder(prefix=settings.echo_prefix, max_chars=settings.echo_max_chars)
