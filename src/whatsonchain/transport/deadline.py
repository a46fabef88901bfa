"""Per-attempt deadline: caps the total time of one request/response exchange.

httpx timeouts bound each individual connect, read, write or pool wait,
so a server trickling bytes can hold an attempt open indefinitely.
:class:`DeadlineTransport` runs the wrapped transport *and* drains the
response body inside a single ``asyncio.timeout`` window. An expired
window surfaces as ``httpx.ReadTimeout``, which :class:`RetryTransport`
treats like any other transport failure.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from whatsonchain.config import defaults

logger = logging.getLogger(__name__)

_REENCODED_HEADERS = frozenset({"content-encoding", "content-length", "transfer-encoding"})


class DeadlineTransport(httpx.AsyncBaseTransport):
    """Async transport enforcing a wall-clock limit on each attempt."""

    def __init__(self, wrapped: httpx.AsyncBaseTransport, timeout: float) -> None:
        self._wrapped = wrapped
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        try:
            async with asyncio.timeout(self._timeout):
                response = await self._wrapped.handle_async_request(request)
                try:
                    body = await _drain(request, response, defaults.MAX_RESPONSE_SIZE)
                finally:
                    await response.aclose()
        except TimeoutError as exc:
            msg = f"attempt exceeded {self._timeout}s"
            raise httpx.ReadTimeout(msg, request=request) from exc

        # The body is decoded now, so the wire encoding and length no longer apply
        headers = [
            (name, value)
            for name, value in response.headers.multi_items()
            if name.lower() not in _REENCODED_HEADERS
        ]
        return httpx.Response(
            response.status_code,
            headers=headers,
            content=body,
            extensions=response.extensions,
        )

    async def aclose(self) -> None:
        await self._wrapped.aclose()


async def _drain(request: httpx.Request, response: httpx.Response, limit: int) -> bytes:
    """Read the decoded body, stopping at *limit* bytes."""
    chunks: list[bytes] = []
    size = 0
    async for chunk in response.aiter_bytes():
        if size + len(chunk) > limit:
            chunks.append(chunk[: limit - size])
            logger.warning("Response from %s exceeded %d bytes; truncating", request.url, limit)
            break
        chunks.append(chunk)
        size += len(chunk)
    return b"".join(chunks)
