from .chat import AskRequest, AskResponse, ChatMessageSchema, SupportResponse

__all__ = [
    "AskRequest",
    "AskResponse",
    "ChatMessageSchema",
    "SupportResponse",
]
