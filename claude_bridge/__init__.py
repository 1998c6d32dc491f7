"""claude-bridge — Anthropic Messages API responses as typed results."""

__version__ = "0.1.0"

from .client import ClaudeClient, AsyncClaudeClient
from .converter import ResultConverter, parse_message
from .models import (
    Model, Claude, ToolCall, TextResult, ToolCallResult, StreamResult, TokenUsage,
)
from .raw import RawHttpResult, AsyncRawHttpResult
from .reassembler import EventStreamReassembler
from .usage import TokenUsageExtractor
from .exceptions import (
    ClaudeBridgeError, AuthenticationError, RateLimitExceeded, UpstreamError,
    EmptyContent, UnparsableContent, MalformedToolArguments,
)

__all__ = [
    "ClaudeClient",
    "AsyncClaudeClient",
    "ResultConverter",
    "parse_message",
    "EventStreamReassembler",
    "TokenUsageExtractor",
    "RawHttpResult",
    "AsyncRawHttpResult",
    "Model",
    "Claude",
    "ToolCall",
    "TextResult",
    "ToolCallResult",
    "StreamResult",
    "TokenUsage",
    "ClaudeBridgeError",
    "AuthenticationError",
    "RateLimitExceeded",
    "UpstreamError",
    "EmptyContent",
    "UnparsableContent",
    "MalformedToolArguments",
]
