"""Exceptions for claude-bridge."""

from __future__ import annotations

from typing import Optional


class ClaudeBridgeError(RuntimeError):
    """Base exception for claude-bridge."""


class AuthenticationError(ClaudeBridgeError):
    """Raised on 401 responses."""


class RateLimitExceeded(ClaudeBridgeError):
    """Raised on 429 responses."""

    def __init__(self, retry_after: Optional[int] = None):
        if retry_after is None:
            message = "Rate limit exceeded."
        else:
            message = f"Rate limit exceeded. Retry after {retry_after} seconds."
        super().__init__(message)
        self.retry_after = retry_after


class UpstreamError(ClaudeBridgeError):
    """Raised when the API answers with an error envelope."""

    def __init__(self, error_type: str, error_message: str):
        super().__init__(f'API Error [{error_type}]: "{error_message}"')
        self.error_type = error_type
        self.error_message = error_message


class EmptyContent(ClaudeBridgeError):
    """Raised when a response has no content blocks."""


class UnparsableContent(ClaudeBridgeError):
    """Raised when a response has neither text nor tool calls."""


class MalformedToolArguments(ClaudeBridgeError):
    """Raised when streamed tool-call arguments do not decode to a JSON object."""

    def __init__(self, message: str, buffer: str = ""):
        super().__init__(message)
        self.buffer = buffer
