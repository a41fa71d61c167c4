"""In-memory chat session that drives round trips to the chat responder."""

import asyncio
from datetime import datetime
from typing import Callable, Optional, Protocol
import structlog

from chat.client import ChatTransportError
from chat.models import Message, Role

logger = structlog.get_logger()

PLACEHOLDER_TEXT = "Thinking..."
TRANSPORT_ERROR_TEXT = "Error: could not reach chat API."

Transcript = tuple[Message, ...]
Subscriber = Callable[[Transcript], None]


class ChatTransport(Protocol):
    """Anything that can deliver a message and return the reply text."""

    async def send(self, message: str) -> str:
        ...


def format_timestamp(moment: datetime) -> str:
    """Display format used for message timestamps."""
    return moment.strftime("%H:%M")


class ChatSession:
    """Owns the transcript of one chat session.

    The session is the only writer of the transcript. Readers get immutable
    snapshots through ``transcript`` or by subscribing to changes.

    Only one exchange may be in flight: ``submit`` is a no-op while
    ``loading`` is set, which keeps at most one pending message in the
    transcript.
    """

    def __init__(
        self,
        transport: ChatTransport,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.transport = transport
        self._clock = clock
        self._messages: list[Message] = []
        self._subscribers: list[Subscriber] = []
        self.input_text = ""
        self.loading = False

    @property
    def transcript(self) -> Transcript:
        """Snapshot of the transcript."""
        return tuple(self._messages)

    @property
    def can_send(self) -> bool:
        """Whether the send affordance should be enabled."""
        return not self.loading and bool(self.input_text.strip())

    def set_input(self, text: str) -> None:
        """Replace the input buffer."""
        self.input_text = text

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for transcript changes; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def submit(self, text: Optional[str] = None) -> Optional[Message]:
        """Send ``text`` (or the input buffer) and wait for the reply.

        Returns the assistant message that resolved the exchange, or None when
        nothing was sent (blank input, or an exchange already in flight).
        """
        content = (self.input_text if text is None else text).strip()
        if not content or self.loading:
            return None

        self._append(self._message("user", content))
        self.input_text = ""
        self._append(self._message("assistant", PLACEHOLDER_TEXT, pending=True))
        self.loading = True

        try:
            try:
                reply = await self.transport.send(content)
            except ChatTransportError as e:
                logger.warning("chat_session_transport_failed", error=str(e))
                reply = TRANSPORT_ERROR_TEXT
            except Exception as e:
                logger.error("chat_session_send_failed", error=str(e))
                reply = TRANSPORT_ERROR_TEXT
            except asyncio.CancelledError:
                logger.warning("chat_session_send_cancelled")
                self._resolve_pending(self._message("assistant", TRANSPORT_ERROR_TEXT))
                raise

            resolved = self._message("assistant", reply)
            self._resolve_pending(resolved)
        finally:
            self.loading = False
        return resolved

    def _message(self, role: Role, text: str, pending: bool = False) -> Message:
        return Message(
            role=role,
            text=text,
            timestamp=format_timestamp(self._clock()),
            pending=pending
        )

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        self._notify()

    def _resolve_pending(self, message: Message) -> None:
        """Replace the first pending message, or append if there is none."""
        index = next(
            (i for i, m in enumerate(self._messages) if m.pending),
            None
        )
        if index is None:
            logger.warning("chat_session_pending_missing")
            self._messages.append(message)
        else:
            self._messages[index] = message
        self._notify()

    def _notify(self) -> None:
        snapshot = self.transcript
        for callback in list(self._subscribers):
            callback(snapshot)
