"""FastAPI dependency injection — wires infrastructure to application layer."""

from chimchat.config import get_settings
from chimchat.application.interfaces.chat_provider import ChatProvider
from chimchat.infrastructure.chim import ChimClient


def get_chat_provider() -> ChatProvider:
    """Provides the Chim adapter configured from application settings."""
    settings = get_settings()
    return ChimClient(
        api_key=settings.chim_key,
        base_url=settings.chim_base_url,
        proxy=settings.chim_proxy,
        timeout=settings.chim_timeout_seconds,
    )
