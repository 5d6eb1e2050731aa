"""Normalized chat stream events shared by every provider adapter."""

from dataclasses import dataclass
from enum import Enum


class EventType(str, Enum):
    MESSAGE = "message"
    DONE = "done"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self is not EventType.MESSAGE


@dataclass(frozen=True)
class MessageData:
    """Payload of a message fragment (or of the completion marker)."""

    content: str = ""


@dataclass(frozen=True)
class ErrorData:
    """Payload of an error event."""

    error: str


@dataclass(frozen=True)
class ChatEvent:
    """A tagged event as observed by a stream consumer."""

    type: EventType
    data: MessageData | ErrorData
