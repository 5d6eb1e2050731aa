"""Abstract chat provider interface — port for AI provider adapters.

Each hosted chat API the aggregator talks to implements this interface.
Callers doing provider selection use ``support`` to find an adapter
that can serve a model, then ``ask`` or ``ask_stream`` to run it.
"""

from abc import ABC, abstractmethod

from chimchat.application.services.event_stream import EventStream
from chimchat.domain.entities import ChatRequest, ChatResponse, ModelType


class ChatProvider(ABC):
    """Port — defines what the application layer needs from any chat provider."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'chim')."""
        ...

    @abstractmethod
    def support(self, model: ModelType | str) -> int:
        """Return the token capacity for ``model``, or 0 if unsupported."""
        ...

    @abstractmethod
    async def ask(self, request: ChatRequest) -> ChatResponse:
        """Run a chat request to completion and return the buffered result.

        Never raises for provider failures: the error is reported on
        ``ChatResponse.error`` alongside any partial content.
        """
        ...

    @abstractmethod
    async def ask_stream(self, request: ChatRequest, stream: EventStream) -> None:
        """Run a chat request, writing normalized events into ``stream``.

        Writes zero or more ``message`` events followed by exactly one
        terminal ``done`` or ``error`` event, then closes the stream.
        """
        ...
