"""Chat API routes."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import structlog

from config import get_settings
from chat.models import ChatRequest, ChatReply
from chat.responder import Responder, get_responder

logger = structlog.get_logger()

router = APIRouter()

APOLOGY = "Sorry, something went wrong."


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Read the request body, refusing anything over ``limit`` bytes.

    A declared Content-Length above the limit is rejected before any of the
    body is read; otherwise the stream is consumed until it passes the limit.
    """
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise ValueError(f"Request body too large: {declared} bytes declared")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise ValueError(f"Request body too large: over {limit} bytes")
    return bytes(body)


def _failure_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ChatReply(reply=APOLOGY).model_dump()
    )


@router.post("", response_model=ChatReply)
async def chat(
    request: Request,
    responder: Responder = Depends(get_responder)
):
    """Send a message to DiveBuddy and get a reply.

    The body is decoded by hand rather than through a request model so that
    every decoding problem (bad JSON, missing ``message``, oversized body)
    produces the same apology reply with a 500 status instead of a 422.
    """
    settings = get_settings()
    try:
        raw = await read_limited_body(request, settings.chat_max_body_bytes)
        chat_request = ChatRequest.model_validate_json(raw)
        reply = await responder.reply(chat_request.message)
        logger.info("chat_replied", message_length=len(chat_request.message))
        return ChatReply(reply=reply)
    except Exception as e:
        logger.error("chat_request_malformed", error=str(e))
        return _failure_response()
