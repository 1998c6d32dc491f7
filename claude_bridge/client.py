"""claude-bridge sync and async clients."""

from __future__ import annotations

import os
from typing import Any, AsyncGenerator, Generator, cast

import httpx

from . import __version__
from .converter import Result, ResultConverter, parse_message
from .exceptions import AuthenticationError, ClaudeBridgeError
from .models import Chunk, StreamResult
from .raw import AsyncRawHttpResult, RawHttpResult

_USER_AGENT = f"claude-bridge-python/{__version__}"
_DEFAULT_BASE_URL = "https://api.anthropic.com"
_DEFAULT_VERSION = "2023-06-01"


def _check_response(resp: httpx.Response) -> None:
    """Raise for error statuses other than 429, which the converter owns.

    The body must already be read.
    """
    if resp.status_code == 401:
        raise AuthenticationError(f"Authentication failed: {resp.text}")
    if resp.status_code < 400 or resp.status_code == 429:
        return
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("type") == "error":
        parse_message(data)
    raise ClaudeBridgeError(f"HTTP {resp.status_code}: {resp.text}")


def _build_body(
    messages: list[dict[str, Any]],
    model: str,
    max_tokens: int,
    stream: bool,
    tools: list[dict[str, Any]] | None,
    system: str | None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "model": model,
        "messages": messages,
        "max_tokens": max_tokens,
    }
    if stream:
        body["stream"] = True
    if tools:
        body["tools"] = tools
    if system:
        body["system"] = system
    return body


def _build_headers(api_key: str | None, anthropic_version: str) -> dict[str, str]:
    api_key = api_key or os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        raise ValueError("api_key is required (or set ANTHROPIC_API_KEY)")
    return {
        "x-api-key": api_key,
        "anthropic-version": anthropic_version,
        "User-Agent": _USER_AGENT,
    }


class ClaudeClient:
    """Synchronous Messages API client."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = _DEFAULT_BASE_URL,
        timeout: float = 600.0,
        anthropic_version: str = _DEFAULT_VERSION,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._converter = ResultConverter()
        self._client = httpx.Client(
            base_url=self._base_url,
            headers=_build_headers(api_key, anthropic_version),
            timeout=timeout,
        )

    def messages(
        self,
        messages: list[dict[str, Any]],
        model: str,
        max_tokens: int = 1024,
        tools: list[dict[str, Any]] | None = None,
        system: str | None = None,
    ) -> Result:
        """Send a conversation and return a text or tool-call result."""
        body = _build_body(messages, model, max_tokens, False, tools, system)
        resp = self._client.post("/v1/messages", json=body)
        _check_response(resp)
        return self._converter.convert(RawHttpResult(resp))

    def stream(
        self,
        messages: list[dict[str, Any]],
        model: str,
        max_tokens: int = 1024,
        tools: list[dict[str, Any]] | None = None,
        system: str | None = None,
    ) -> Generator[Chunk, None, None]:
        """Stream a conversation as text fragments and tool-call batches."""
        body = _build_body(messages, model, max_tokens, True, tools, system)
        with self._client.stream("POST", "/v1/messages", json=body) as resp:
            if resp.status_code >= 400:
                resp.read()
            _check_response(resp)
            result = cast(StreamResult, self._converter.convert(RawHttpResult(resp), {"stream": True}))
            yield from result

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class AsyncClaudeClient:
    """Asynchronous Messages API client."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = _DEFAULT_BASE_URL,
        timeout: float = 600.0,
        anthropic_version: str = _DEFAULT_VERSION,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._converter = ResultConverter()
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=_build_headers(api_key, anthropic_version),
            timeout=timeout,
        )

    async def messages(
        self,
        messages: list[dict[str, Any]],
        model: str,
        max_tokens: int = 1024,
        tools: list[dict[str, Any]] | None = None,
        system: str | None = None,
    ) -> Result:
        body = _build_body(messages, model, max_tokens, False, tools, system)
        resp = await self._client.post("/v1/messages", json=body)
        _check_response(resp)
        return await self._converter.aconvert(AsyncRawHttpResult(resp))

    async def stream(
        self,
        messages: list[dict[str, Any]],
        model: str,
        max_tokens: int = 1024,
        tools: list[dict[str, Any]] | None = None,
        system: str | None = None,
    ) -> AsyncGenerator[Chunk, None]:
        body = _build_body(messages, model, max_tokens, True, tools, system)
        async with self._client.stream("POST", "/v1/messages", json=body) as resp:
            if resp.status_code >= 400:
                await resp.aread()
            _check_response(resp)
            result = cast(StreamResult, await self._converter.aconvert(AsyncRawHttpResult(resp), {"stream": True}))
            async for chunk in result:
                yield chunk

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()
