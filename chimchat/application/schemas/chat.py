"""Pydantic v2 schemas (DTOs) for the ask endpoints."""

from pydantic import BaseModel, Field

from chimchat.domain.entities import ChatMessage, ChatRequest


class ChatMessageSchema(BaseModel):
    """A single text chat message."""

    role: str = Field(..., pattern=r"^(system|user|assistant)$")
    content: str


class AskRequest(BaseModel):
    """Request schema for the ask endpoints."""

    model: str = Field(..., description="Model identifier, e.g. 'gpt-3.5-turbo'")
    messages: list[ChatMessageSchema] = Field(
        ..., min_length=1, description="Conversation messages"
    )

    def to_domain(self) -> ChatRequest:
        return ChatRequest(
            model=self.model,
            messages=[ChatMessage(role=m.role, content=m.content) for m in self.messages],
        )


class AskResponse(BaseModel):
    """Buffered ask result; ``error`` is set when the provider failed."""

    content: str
    error: str | None = None


class SupportResponse(BaseModel):
    """Token capacity of a model; 0 means unsupported."""

    model: str
    tokens: int
