"""Chat endpoints — capacity lookup, buffered ask, and streaming ask."""

import asyncio

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from chimchat.application.interfaces.chat_provider import ChatProvider
from chimchat.application.schemas import AskRequest, AskResponse, SupportResponse
from chimchat.application.services import EventStream
from chimchat.infrastructure.dependencies import get_chat_provider

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.get("/support", response_model=SupportResponse)
async def support(
    model: str = Query(..., description="Model identifier"),
    provider: ChatProvider = Depends(get_chat_provider),
) -> SupportResponse:
    """Return the token capacity the provider offers for a model."""
    return SupportResponse(model=model, tokens=provider.support(model))


@router.post("/ask", response_model=AskResponse)
async def ask(
    request: AskRequest,
    provider: ChatProvider = Depends(get_chat_provider),
) -> AskResponse:
    """Run a chat request to completion.

    Provider failures are reported in the ``error`` field rather than as
    an HTTP error, together with any content received before the failure.
    """
    result = await provider.ask(request.to_domain())
    return AskResponse(content=result.content, error=result.error)


@router.post("/ask/stream")
async def ask_stream(
    request: AskRequest,
    provider: ChatProvider = Depends(get_chat_provider),
) -> StreamingResponse:
    """Stream normalized chat events via Server-Sent Events (SSE).

    Emits ``message`` events followed by a single ``done`` or ``error``.
    """
    stream = EventStream()
    producer = asyncio.create_task(provider.ask_stream(request.to_domain(), stream))

    async def event_generator():
        try:
            async for chunk in stream.sse():
                yield chunk
        except (asyncio.CancelledError, GeneratorExit):
            # Client disconnected mid-stream
            producer.cancel()
            raise
        # The producer may still be releasing its connection
        await producer

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
