"""Reassembly of streamed Messages API events into output chunks.

Text deltas are passed through as soon as they arrive. Tool-use blocks
are buffered until their ``content_block_stop``, then decoded, and all
tool calls of a message are emitted together as one ``ToolCallResult``
when ``message_stop`` arrives.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, AsyncGenerator, AsyncIterable, Generator, Iterable, Optional

from .exceptions import MalformedToolArguments
from .models import Chunk, ToolCall, ToolCallResult

logger = logging.getLogger(__name__)


@dataclass
class PendingToolCall:
    """A tool-use block whose arguments are still arriving."""

    id: str
    name: str
    buffer: str = ""

    def finalize(self) -> ToolCall:
        if not self.buffer:
            return ToolCall(id=self.id, name=self.name, arguments={})
        try:
            arguments = json.loads(self.buffer)
        except json.JSONDecodeError as e:
            raise MalformedToolArguments(
                f"Invalid JSON arguments for tool call {self.name} ({self.id}): {e}",
                buffer=self.buffer,
            ) from e
        if not isinstance(arguments, dict):
            raise MalformedToolArguments(
                f"Arguments for tool call {self.name} ({self.id}) are not a JSON object",
                buffer=self.buffer,
            )
        return ToolCall(id=self.id, name=self.name, arguments=arguments)


class EventStreamReassembler:
    """Turns decoded stream events into text fragments and tool-call batches.

    One instance handles exactly one stream. ``feed`` is the transition
    function; ``stream`` and ``astream`` drive it over a sync or async
    event source, pulling one event at a time.
    """

    def __init__(self) -> None:
        self.pending: Optional[PendingToolCall] = None
        self.batch: list[ToolCall] = []

    def feed(self, event: dict[str, Any]) -> list[Chunk]:
        """Apply one event and return the chunks it produces."""
        event_type = event.get("type", "")
        delta = event.get("delta") or {}

        if event_type == "content_block_delta" and delta.get("text") is not None:
            return [delta["text"]]

        block = event.get("content_block") or {}
        if event_type == "content_block_start" and block.get("type") == "tool_use":
            if self.pending is not None:
                logger.warning(
                    "Tool call %s (%s) started before %s (%s) was closed; discarding the latter",
                    block.get("name"), block.get("id"), self.pending.name, self.pending.id,
                )
            self.pending = PendingToolCall(id=block["id"], name=block["name"])
            return []

        if event_type == "content_block_delta" and delta.get("type") == "input_json_delta":
            if self.pending is None:
                logger.debug("Dropping input_json_delta outside of a tool-use block")
                return []
            self.pending.buffer += delta.get("partial_json") or ""
            return []

        if event_type == "content_block_stop" and self.pending is not None:
            self.batch.append(self.pending.finalize())
            self.pending = None
            return []

        if event_type == "message_stop" and self.batch:
            batch, self.batch = self.batch, []
            return [ToolCallResult(content=batch)]

        logger.debug("Ignoring stream event %r", event_type)
        return []

    def stream(self, events: Iterable[dict[str, Any]]) -> Generator[Chunk, None, None]:
        for event in events:
            yield from self.feed(event)

    async def astream(self, events: AsyncIterable[dict[str, Any]]) -> AsyncGenerator[Chunk, None]:
        async for event in events:
            for chunk in self.feed(event):
                yield chunk
