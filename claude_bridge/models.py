"""Pydantic models for claude-bridge."""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, AsyncIterator, Iterator, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Model(BaseModel):
    name: str


class Claude(Model):
    """A model served by the Anthropic Messages API."""


class ToolCall(BaseModel):
    """A completed tool invocation requested by the model."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    arguments: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("arguments", mode="after")
    @classmethod
    def _freeze_arguments(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("arguments")
    def _serialize_arguments(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def __hash__(self) -> int:
        return hash((self.id, self.name, json.dumps(dict(self.arguments), sort_keys=True, default=str)))


class TextResult(BaseModel):
    """Result of a non-streaming call that produced text."""

    content: str


class ToolCallResult(BaseModel):
    """A batch of tool calls, in the order the model emitted them."""

    content: list[ToolCall] = Field(min_length=1)


# A single element of a streaming result.
Chunk = Union[str, ToolCallResult]


class StreamResult(BaseModel):
    """Lazy sequence of text fragments and tool-call batches.

    ``content`` is a plain iterator for sync conversions and an async
    iterator for async ones; iterate with ``for`` or ``async for``
    accordingly.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    content: Any

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.content)

    def __aiter__(self) -> AsyncIterator[Chunk]:
        return self.content.__aiter__()


class TokenUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    cached_tokens: int = 0
    cache_creation_tokens: int = 0
    total_tokens: int = 0
