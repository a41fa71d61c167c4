"""Terminal front-end for a chat session."""

import asyncio
from typing import Awaitable, Callable, Iterable, Optional
import structlog

from chat.client import ChatApiClient
from chat.models import Message
from chat.session import ChatSession

logger = structlog.get_logger()

EMPTY_TRANSCRIPT_TEXT = "No messages yet. Start the conversation."
QUIT_COMMAND = "/quit"

ROLE_LABELS = {
    "user": "You",
    "assistant": "DiveBuddy",
    "system": "System",
}


def render_message(message: Message) -> str:
    """Render one transcript line."""
    label = ROLE_LABELS[message.role]
    line = f"[{message.timestamp}] {label}: {message.text}"
    if message.role == "user":
        line = f"  {line}"
    if message.pending:
        line += " (pending)"
    return line


def render_transcript(messages: Iterable[Message]) -> str:
    """Render a transcript, or the neutral prompt when it is empty."""
    lines = [render_message(m) for m in messages]
    if not lines:
        return EMPTY_TRANSCRIPT_TEXT
    return "\n".join(lines)


async def _read_line(prompt: str) -> Optional[str]:
    try:
        return await asyncio.to_thread(input, prompt)
    except EOFError:
        return None


async def run_console(
    session: Optional[ChatSession] = None,
    read_line: Callable[[str], Awaitable[Optional[str]]] = _read_line,
    write: Callable[[str], None] = print,
) -> ChatSession:
    """Read lines, submit them to the session and print the transcript.

    Stops on end of input or ``/quit``. Returns the session so callers can
    inspect the final transcript.
    """
    client: Optional[ChatApiClient] = None
    if session is None:
        client = ChatApiClient()
        session = ChatSession(client)

    write(render_transcript(session.transcript))
    try:
        while True:
            line = await read_line("> ")
            if line is None or line.strip() == QUIT_COMMAND:
                break
            session.set_input(line)
            if not session.can_send:
                continue
            await session.submit()
            write(render_transcript(session.transcript))
    finally:
        if client is not None:
            await client.close()

    logger.info("console_closed", messages=len(session.transcript))
    return session


def main() -> None:
    """Console script entry point."""
    asyncio.run(run_console())


if __name__ == "__main__":
    main()
