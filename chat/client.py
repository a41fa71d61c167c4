"""HTTP client for the chat responder API."""

from typing import Optional
import httpx
import structlog

from config import get_settings

logger = structlog.get_logger()


class ChatTransportError(Exception):
    """The chat API could not be reached or its response could not be decoded."""


class ChatApiClient:
    """Async client that posts messages to ``/api/chat``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = base_url or settings.chat_api_base_url
        self.timeout = timeout if timeout is not None else settings.chat_request_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json"
                },
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "ChatApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def send(self, message: str) -> str:
        """Post a message and return the reply text.

        Any body carrying a string ``reply`` counts as a reply, including the
        apology the service sends with a 500 status. Everything else raises
        ``ChatTransportError``.
        """
        client = await self._get_client()
        try:
            response = await client.post("/api/chat", json={"message": message})
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("chat_transport_failed", error=str(e))
            raise ChatTransportError(str(e)) from e

        reply = payload.get("reply") if isinstance(payload, dict) else None
        if not isinstance(reply, str):
            logger.warning("chat_reply_missing", status_code=response.status_code)
            raise ChatTransportError(
                f"Response from chat API has no reply (status {response.status_code})"
            )
        if response.status_code >= 400:
            logger.warning("chat_api_error_reply", status_code=response.status_code)
        return reply
