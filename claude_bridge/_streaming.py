"""SSE stream parser for httpx responses.

The Messages API sends each event as an ``event:`` line followed by a
``data:`` line holding the JSON payload. The payload repeats the event
name in its ``type`` field, so only ``data:`` lines are decoded.
"""

from __future__ import annotations

import json
from typing import Any, Generator, AsyncGenerator

import httpx


def _decode_line(line: str) -> dict[str, Any] | None:
    if not line.startswith("data:"):
        return None
    data = line[5:].strip()
    if not data:
        return None
    return json.loads(data)


def iter_sse_events(response: httpx.Response) -> Generator[dict[str, Any], None, None]:
    """Yield parsed SSE data events from an httpx streaming response."""
    for line in response.iter_lines():
        event = _decode_line(line)
        if event is not None:
            yield event


async def aiter_sse_events(response: httpx.Response) -> AsyncGenerator[dict[str, Any], None]:
    """Yield parsed SSE data events from an async httpx streaming response."""
    async for line in response.aiter_lines():
        event = _decode_line(line)
        if event is not None:
            yield event
