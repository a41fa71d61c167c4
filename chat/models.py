"""Chat data models."""

import json
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

Role = Literal["user", "assistant", "system"]


class ChatRequest(BaseModel):
    """Chat request from user."""
    message: str

    @field_validator("message", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> str:
        """Accept any JSON value, using its JSON text when it isn't a string."""
        if isinstance(value, str):
            return value
        return json.dumps(value, ensure_ascii=False)


class ChatReply(BaseModel):
    """Reply produced by the chat responder."""
    reply: str = Field(..., min_length=1)


class Message(BaseModel):
    """A single turn in a chat transcript."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str
    timestamp: str
    pending: bool = False
