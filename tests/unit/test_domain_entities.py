"""Unit tests for chat domain entities."""

import dataclasses

import pytest

from chimchat.domain.entities import ChatMessage, ChatRequest, EventType, ModelType


def test_model_type_parse_known_and_unknown():
    assert ModelType.parse("gpt-4") is ModelType.GPT4
    assert ModelType.parse(ModelType.GPT3P5_16K) is ModelType.GPT3P5_16K
    assert ModelType.parse("llama-2") is None


def test_chat_request_is_immutable():
    request = ChatRequest(
        model=ModelType.GPT4,
        messages=[ChatMessage(role="user", content="Hi")],
    )

    assert request.messages == (ChatMessage(role="user", content="Hi"),)
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.model = ModelType.GPT3P5_TURBO  # type: ignore[misc]


def test_only_done_and_error_are_terminal():
    assert not EventType.MESSAGE.is_terminal
    assert EventType.DONE.is_terminal
    assert EventType.ERROR.is_terminal
