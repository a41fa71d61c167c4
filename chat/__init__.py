"""DiveBuddy chat feature."""

from .models import ChatRequest, ChatReply, Message
from .responder import Responder, EchoResponder, get_responder
from .client import ChatApiClient, ChatTransportError
from .session import ChatSession
from .routes import router

__all__ = [
    "ChatRequest", "ChatReply", "Message",
    "Responder", "EchoResponder", "get_responder",
    "ChatApiClient", "ChatTransportError", "ChatSession", "router"
]
