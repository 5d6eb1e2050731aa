"""Chim API client — implements the ChatProvider interface.

Communicates with the Chim OpenAI-compatible proxy
(https://chimeragpt.adventblocks.cc/v1) using httpx, and re-emits its
SSE streaming response as normalized chat events.
"""

import asyncio
import json
import logging
import re
from collections.abc import AsyncIterator
from typing import Any

import httpx

from chimchat.application.interfaces.chat_provider import ChatProvider
from chimchat.application.services.event_stream import EventStream, collect_response
from chimchat.domain.entities import (
    ChatRequest,
    ChatResponse,
    ErrorData,
    EventType,
    MessageData,
    ModelType,
)
from chimchat.domain.exceptions import (
    ChatProviderError,
    EventStreamClosedError,
    UnsupportedModelError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://chimeragpt.adventblocks.cc/v1"

_MODEL_MAP: dict[ModelType, str] = {
    ModelType.GPT3P5_16K: "gpt-3.5-turbo-16k",
    ModelType.GPT4: "gpt-4",
    ModelType.GPT3P5_TURBO: "gpt-3.5-turbo",
}

_TOKEN_LIMITS: dict[ModelType, int] = {
    ModelType.GPT3P5_16K: 15000,
    ModelType.GPT4: 5000,
    ModelType.GPT3P5_TURBO: 4000,
}

_TEMPERATURE = 1.0

# Events are separated by a blank line
_EVENT_DELIMITER = re.compile(r"\r?\n\r?\n")
_DATA_PREFIX = "data: "
_DONE_SENTINEL = "[DONE]"


class ChimClient(ChatProvider):
    """Infrastructure adapter — connects to the Chim API.

    An injected ``httpx.AsyncClient`` is reused across calls and left open;
    otherwise a client is created for each call and closed afterwards.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        proxy: str | None = None,
        timeout: float = 120.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._proxy = proxy
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "chim"

    def support(self, model: ModelType | str) -> int:
        parsed = ModelType.parse(model)
        if parsed is None:
            return 0
        return _TOKEN_LIMITS.get(parsed, 0)

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, request: ChatRequest) -> dict[str, Any]:
        """Build the request payload for the Chim API."""
        parsed = ModelType.parse(request.model)
        model = _MODEL_MAP.get(parsed) if parsed is not None else None
        if model is None:
            raw = request.model.value if isinstance(request.model, ModelType) else request.model
            raise UnsupportedModelError(self.provider_name, str(raw))

        return {
            "messages": [
                {"role": m.role, "content": m.content} for m in request.messages
            ],
            "temperature": _TEMPERATURE,
            "model": model,
            "stream": True,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout, proxy=self._proxy)

    async def ask(self, request: ChatRequest) -> ChatResponse:
        """Run ``ask_stream`` against a fresh stream and drain it."""
        stream = EventStream()
        producer = asyncio.create_task(self.ask_stream(request, stream))
        try:
            result = await collect_response(stream)
        finally:
            await producer
        return result

    async def ask_stream(self, request: ChatRequest, stream: EventStream) -> None:
        """Send a streaming chat completion to Chim.

        Fragments are written as ``message`` events in arrival order.
        Completion is signalled when the response body closes, not by the
        provider's ``finish_reason``; any failure to set up or read the
        stream becomes a single ``error`` event. The stream is always
        closed on return.
        """
        client: httpx.AsyncClient | None = None
        should_close = self._http_client is None

        try:
            payload = self._build_payload(request)
            url = f"{self._base_url}/chat/completions"
            client = await self._get_client()

            async with client.stream(
                "POST", url, headers=self._get_headers(), json=payload
            ) as response:
                if not response.is_success:
                    body = await response.aread()
                    self._raise_provider_error_from_bytes(
                        response.status_code, body
                    )

                async for segment in _split_events(response.aiter_text()):
                    data = self._parse_segment(segment)
                    if data is not None:
                        await stream.write(EventType.MESSAGE, data)

            await stream.write(EventType.DONE, MessageData())

        except EventStreamClosedError:
            # Consumer closed the stream; abandon the request
            logger.info("Chim stream closed by consumer, dropping response")

        except Exception as e:
            logger.exception("Chim stream failed: %s", e)
            if not stream.closed:
                await stream.write(EventType.ERROR, ErrorData(error=str(e)))

        finally:
            await stream.end()
            if should_close and client is not None:
                await client.aclose()

    @staticmethod
    def _parse_segment(segment: str) -> MessageData | None:
        """Turn one SSE event into a message fragment, or None to skip it.

        Unparsable payloads are dropped. A ``stop`` finish indicator is
        not emitted; completion comes from the transport closing.
        """
        payload = segment.replace(_DATA_PREFIX, "", 1).strip()
        if not payload or payload == _DONE_SENTINEL:
            return None

        try:
            data = json.loads(payload)
        except json.JSONDecodeError:
            data = {}
        if not isinstance(data, dict):
            return None

        choices = data.get("choices")
        if not choices or not isinstance(choices, list):
            return None

        choice = choices[0] if isinstance(choices[0], dict) else {}
        delta = choice.get("delta") or {}
        if choice.get("finish_reason") == "stop":
            return None

        content = delta.get("content") if isinstance(delta, dict) else None
        return MessageData(content=content or "")

    def _raise_provider_error_from_bytes(
        self, status_code: int, body: bytes
    ) -> None:
        """Raise ChatProviderError from raw response bytes."""
        try:
            data = json.loads(body)
            error = data.get("error", {})
            message = error.get("message", body.decode())
        except Exception:
            message = body.decode(errors="replace")

        raise ChatProviderError(
            provider=self.provider_name,
            status_code=status_code,
            message=message,
        )


async def _split_events(chunks: AsyncIterator[str]) -> AsyncIterator[str]:
    """Re-chunk a decoded text stream on blank-line event boundaries.

    Partial events are buffered across network chunks; whatever is left
    when the body ends is yielded as the final segment.
    """
    buffer = ""
    async for chunk in chunks:
        buffer += chunk
        *complete, buffer = _EVENT_DELIMITER.split(buffer)
        for segment in complete:
            if segment:
                yield segment
    if buffer:
        yield buffer
