"""Domain entities for chat requests and responses."""

from dataclasses import dataclass, field
from enum import Enum


class ModelType(str, Enum):
    """Abstract model identifiers understood across all chat providers."""

    GPT3P5_TURBO = "gpt-3.5-turbo"
    GPT3P5_16K = "gpt-3.5-turbo-16k"
    GPT4 = "gpt-4"

    @classmethod
    def parse(cls, value: "ModelType | str") -> "ModelType | None":
        """Return the matching ModelType, or None for unknown identifiers."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ChatMessage:
    """A single message in a chat conversation."""

    role: str  # "system" | "user" | "assistant"
    content: str


@dataclass(frozen=True)
class ChatRequest:
    """An immutable chat request: ordered messages plus the requested model.

    Messages may be passed as any iterable; they are stored as a tuple.
    """

    model: ModelType | str
    messages: tuple[ChatMessage, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))


@dataclass
class ChatResponse:
    """Result of a buffered ask: concatenated fragments and an optional error."""

    content: str = ""
    error: str | None = None
