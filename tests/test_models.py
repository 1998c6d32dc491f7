"""Tests for claude-bridge models."""

import pytest
from pydantic import ValidationError

from claude_bridge.models import StreamResult, TokenUsage, ToolCall, ToolCallResult


def test_tool_call_is_immutable():
    call = ToolCall(id="t1", name="ping", arguments={"a": 1})
    with pytest.raises(ValidationError):
        call.name = "pong"


def test_tool_call_arguments_are_read_only():
    source = {"a": 1}
    call = ToolCall(id="t1", name="ping", arguments=source)
    with pytest.raises(TypeError):
        call.arguments["a"] = 2
    source["a"] = 3
    assert call.arguments == {"a": 1}
    assert call.model_dump() == {"id": "t1", "name": "ping", "arguments": {"a": 1}}


def test_tool_call_is_hashable():
    call = ToolCall(id="t1", name="ping", arguments={"a": 1, "b": [1, 2]})
    same = ToolCall(id="t1", name="ping", arguments={"b": [1, 2], "a": 1})
    assert hash(call) == hash(same)
    assert len({call, same}) == 1


def test_tool_call_defaults():
    call = ToolCall(id="t1", name="ping")
    assert call.arguments == {}
    with pytest.raises(TypeError):
        call.arguments["x"] = 1


def test_tool_call_result_requires_a_call():
    with pytest.raises(ValidationError):
        ToolCallResult(content=[])


def test_stream_result_iterates_lazily():
    def chunks():
        yield "a"
        yield "b"

    result = StreamResult(content=chunks())
    assert list(result) == ["a", "b"]


def test_token_usage_defaults():
    u = TokenUsage()
    assert u.prompt_tokens == 0
    assert u.total_tokens == 0
