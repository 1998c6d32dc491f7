"""Token usage extraction from Messages API responses."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .models import TokenUsage


class TokenUsageExtractor:
    """Reads the ``usage`` block of a non-streaming response body.

    Streaming responses report usage across ``message_start`` and
    ``message_delta`` events, which the reassembler does not surface, so
    extraction returns ``None`` for them.
    """

    def extract(self, data: Mapping[str, Any], options: Optional[Mapping[str, Any]] = None) -> Optional[TokenUsage]:
        if options and options.get("stream", False):
            return None
        usage = data.get("usage")
        if not usage:
            return None
        prompt = usage.get("input_tokens") or 0
        completion = usage.get("output_tokens") or 0
        return TokenUsage(
            prompt_tokens=prompt,
            completion_tokens=completion,
            cached_tokens=usage.get("cache_read_input_tokens") or 0,
            cache_creation_tokens=usage.get("cache_creation_input_tokens") or 0,
            total_tokens=prompt + completion,
        )
