"""Unit tests for the EventStream channel and response collection."""

import asyncio

import pytest

from chimchat.application.services.event_stream import EventStream, collect_response
from chimchat.domain.entities import ErrorData, EventType, MessageData
from chimchat.domain.exceptions import EventStreamClosedError


@pytest.mark.asyncio
async def test_events_are_read_in_write_order():
    stream = EventStream()
    await stream.write(EventType.MESSAGE, MessageData(content="a"))
    await stream.write(EventType.MESSAGE, MessageData(content="b"))
    await stream.write(EventType.DONE, MessageData())
    await stream.end()

    events = [event async for event in stream]

    assert [e.type for e in events] == [EventType.MESSAGE, EventType.MESSAGE, EventType.DONE]
    assert [e.data.content for e in events] == ["a", "b", ""]


@pytest.mark.asyncio
async def test_write_after_terminal_event_is_rejected():
    stream = EventStream()
    await stream.write(EventType.ERROR, ErrorData(error="boom"))

    with pytest.raises(EventStreamClosedError):
        await stream.write(EventType.MESSAGE, MessageData(content="late"))


@pytest.mark.asyncio
async def test_write_after_end_is_rejected():
    stream = EventStream()
    await stream.end()

    with pytest.raises(EventStreamClosedError):
        await stream.write(EventType.MESSAGE, MessageData(content="late"))


@pytest.mark.asyncio
async def test_end_is_idempotent():
    stream = EventStream()
    await stream.end()
    await stream.end()

    assert stream.closed
    assert [event async for event in stream] == []


@pytest.mark.asyncio
async def test_consumer_receives_events_as_they_are_written():
    """A bounded stream hands events to a concurrent consumer."""
    stream = EventStream(maxsize=1)

    async def produce() -> None:
        for text in ("x", "y", "z"):
            await stream.write(EventType.MESSAGE, MessageData(content=text))
        await stream.write(EventType.DONE, MessageData())
        await stream.end()

    producer = asyncio.create_task(produce())
    result = await collect_response(stream)
    await producer

    assert result.content == "xyz"
    assert result.error is None


@pytest.mark.asyncio
async def test_collect_response_keeps_partial_content_and_error():
    stream = EventStream()
    await stream.write(EventType.MESSAGE, MessageData(content="par"))
    await stream.write(EventType.ERROR, ErrorData(error="network down"))
    await stream.end()

    result = await collect_response(stream)

    assert result.content == "par"
    assert result.error == "network down"


@pytest.mark.asyncio
async def test_sse_formats_each_event():
    stream = EventStream()
    await stream.write(EventType.MESSAGE, MessageData(content="Hi"))
    await stream.write(EventType.DONE, MessageData())
    await stream.end()

    chunks = [chunk async for chunk in stream.sse()]

    assert chunks == [
        'event: message\ndata: {"content": "Hi"}\n\n',
        'event: done\ndata: {"content": ""}\n\n',
    ]
