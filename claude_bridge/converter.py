"""Conversion of raw Messages API responses into results."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .exceptions import EmptyContent, RateLimitExceeded, UnparsableContent, UpstreamError
from .models import Claude, Model, StreamResult, TextResult, ToolCall, ToolCallResult
from .raw import AsyncRawHttpResult, RawHttpResult
from .reassembler import EventStreamReassembler
from .usage import TokenUsageExtractor

logger = logging.getLogger(__name__)

Result = Union[TextResult, ToolCallResult, StreamResult]


def _or_default(mapping: Mapping[str, Any], key: str, default: Any) -> Any:
    value = mapping.get(key)
    return default if value is None else value


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Return the ``retry-after`` header as whole seconds, or None."""
    if not value:
        return None
    try:
        seconds = int(value.strip())
    except ValueError:
        return None
    return seconds or None


def parse_message(data: Mapping[str, Any]) -> Union[TextResult, ToolCallResult]:
    """Parse a decoded, non-streaming Messages API body.

    Tool calls take priority over text: when the content holds any
    ``tool_use`` block, the text blocks are dropped.
    """
    if data.get("type") == "error":
        error = data.get("error") or {}
        raise UpstreamError(
            _or_default(error, "type", "Unknown"),
            _or_default(error, "message", "An unknown error occurred."),
        )

    content = data.get("content")
    if not content:
        raise EmptyContent("Response does not contain any content.")

    tool_calls = [
        ToolCall(id=block["id"], name=block["name"], arguments=block.get("input") or {})
        for block in content
        if block.get("type") == "tool_use"
    ]

    if not tool_calls and content[0].get("text") is None:
        raise UnparsableContent("Response content does not contain any text nor tool calls.")

    if tool_calls:
        return ToolCallResult(content=tool_calls)

    return TextResult(content=content[0]["text"])


class ResultConverter:
    """Turns raw Messages API responses into text, tool-call or stream results.

    ``options`` understands a single key, ``stream``; when true the
    response is read as an event stream and a ``StreamResult`` is
    returned. Every call gets its own ``EventStreamReassembler``.
    """

    def supports(self, model: Model) -> bool:
        return isinstance(model, Claude)

    def get_token_usage_extractor(self) -> TokenUsageExtractor:
        return TokenUsageExtractor()

    def convert(self, result: RawHttpResult, options: Optional[Mapping[str, Any]] = None) -> Result:
        options = options or {}
        self._check_rate_limit(result)

        if options.get("stream", False):
            return StreamResult(content=EventStreamReassembler().stream(result.get_data_stream()))

        return parse_message(result.get_data())

    async def aconvert(self, result: AsyncRawHttpResult, options: Optional[Mapping[str, Any]] = None) -> Result:
        options = options or {}
        self._check_rate_limit(result)

        if options.get("stream", False):
            return StreamResult(content=EventStreamReassembler().astream(result.aget_data_stream()))

        return parse_message(await result.get_data())

    @staticmethod
    def _check_rate_limit(result: Union[RawHttpResult, AsyncRawHttpResult]) -> None:
        if result.status_code != 429:
            return
        retry_after = parse_retry_after(result.headers.get("retry-after"))
        logger.info("Rate limited by upstream, retry after %s", retry_after)
        raise RateLimitExceeded(retry_after)
