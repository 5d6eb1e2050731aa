from .chat import ChatMessage, ChatRequest, ChatResponse, ModelType
from .events import ChatEvent, ErrorData, EventType, MessageData

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ModelType",
    "ChatEvent",
    "ErrorData",
    "EventType",
    "MessageData",
]
