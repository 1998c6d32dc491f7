"""Raw HTTP results handed to the converter."""

from __future__ import annotations

from typing import Any, AsyncGenerator, Generator

import httpx

from ._streaming import iter_sse_events, aiter_sse_events


class RawHttpResult:
    """Wraps an httpx response read synchronously."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    def get_data(self) -> dict[str, Any]:
        return self._response.json()

    def get_data_stream(self) -> Generator[dict[str, Any], None, None]:
        return iter_sse_events(self._response)


class AsyncRawHttpResult:
    """Wraps an httpx response read from an ``AsyncClient``."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    async def get_data(self) -> dict[str, Any]:
        await self._response.aread()
        return self._response.json()

    def aget_data_stream(self) -> AsyncGenerator[dict[str, Any], None]:
        return aiter_sse_events(self._response)
