"""Ordered in-process channel for normalized chat events."""

import asyncio
import json
from collections.abc import AsyncIterator
from dataclasses import asdict

from chimchat.domain.entities import (
    ChatEvent,
    ChatResponse,
    ErrorData,
    EventType,
    MessageData,
)
from chimchat.domain.exceptions import EventStreamClosedError


class EventStream:
    """Single-producer, single-consumer channel of ChatEvents.

    The producer writes events with ``write`` and must call ``end`` when
    finished. The consumer iterates the stream; iteration stops once the
    stream is closed. Nothing can be written after a terminal event.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: asyncio.Queue[ChatEvent | None] = asyncio.Queue(maxsize)
        self._terminated = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def write(
        self, event_type: EventType, data: MessageData | ErrorData
    ) -> None:
        """Append an event. Blocks while a bounded stream is full."""
        if self._closed or self._terminated:
            raise EventStreamClosedError(
                f"Cannot write '{event_type.value}' event to a finished stream"
            )
        if event_type.is_terminal:
            self._terminated = True
        await self._queue.put(ChatEvent(type=event_type, data=data))

    async def end(self) -> None:
        """Close the stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self._queue.put(None)

    async def events(self) -> AsyncIterator[ChatEvent]:
        """Yield events in write order until the stream is closed."""
        while True:
            event = await self._queue.get()
            if event is None:
                break
            yield event

    def __aiter__(self) -> AsyncIterator[ChatEvent]:
        return self.events()

    async def sse(self) -> AsyncIterator[str]:
        """Yield each event formatted as a Server-Sent Events message."""
        async for event in self.events():
            yield f"event: {event.type.value}\ndata: {json.dumps(asdict(event.data))}\n\n"


async def collect_response(stream: EventStream) -> ChatResponse:
    """Drain ``stream`` into a single ChatResponse.

    Message contents are concatenated in arrival order; the first error
    event is kept on ``ChatResponse.error``.
    """
    result = ChatResponse()
    async for event in stream:
        if event.type is EventType.MESSAGE:
            result.content += event.data.content or ""
        elif event.type is EventType.ERROR and result.error is None:
            result.error = event.data.error
    return result
