"""Retrying httpx transport: replays the request with exponential backoff.

Wraps any ``httpx.AsyncBaseTransport``. A request is attempted up to
``retry_count + 1`` times; an attempt is retried when the wrapped
transport raises ``httpx.TransportError`` or answers with one of
:data:`RETRYABLE_STATUS_CODES`. The final attempt is returned (or raises)
as-is.

The request body is drained once before the first attempt and every
attempt gets a fresh ``httpx.Request`` over those bytes, so POST bodies
are byte-identical across retries.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from whatsonchain.config import defaults
from whatsonchain.transport.backoff import ExponentialBackoff

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class RetryTransport(httpx.AsyncBaseTransport):
    """Async transport that retries transient failures of a wrapped transport."""

    def __init__(
        self,
        wrapped: httpx.AsyncBaseTransport | None = None,
        *,
        retry_count: int = defaults.DEFAULT_REQUEST_RETRY_COUNT,
        backoff: ExponentialBackoff | None = None,
    ) -> None:
        self._wrapped = wrapped or httpx.AsyncHTTPTransport()
        self._retry_count = max(retry_count, 0)
        self._backoff = backoff or ExponentialBackoff(
            initial=defaults.DEFAULT_BACKOFF_INITIAL_TIMEOUT,
            maximum=defaults.DEFAULT_BACKOFF_MAX_TIMEOUT,
            factor=defaults.DEFAULT_BACKOFF_EXPONENT_FACTOR,
            max_jitter=defaults.DEFAULT_BACKOFF_MAX_JITTER,
        )

    @property
    def retry_count(self) -> int:
        return self._retry_count

    @property
    def backoff(self) -> ExponentialBackoff:
        return self._backoff

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        attempts = self._retry_count + 1

        for attempt in range(self._retry_count):
            try:
                response = await self._wrapped.handle_async_request(_replay(request, body))
            except httpx.TransportError as exc:
                logger.warning(
                    "%s %s failed: %s (attempt %d/%d)",
                    request.method,
                    request.url,
                    exc,
                    attempt + 1,
                    attempts,
                )
            else:
                if response.status_code not in RETRYABLE_STATUS_CODES:
                    return response
                logger.warning(
                    "%s %s returned %d (attempt %d/%d)",
                    request.method,
                    request.url,
                    response.status_code,
                    attempt + 1,
                    attempts,
                )
                await response.aclose()
            await asyncio.sleep(self._backoff.next_interval(attempt))

        return await self._wrapped.handle_async_request(_replay(request, body))

    async def aclose(self) -> None:
        await self._wrapped.aclose()


def _replay(request: httpx.Request, body: bytes) -> httpx.Request:
    """Build a fresh request carrying the original headers, body and extensions."""
    return httpx.Request(
        request.method,
        request.url,
        headers=request.headers,
        content=body,
        extensions=request.extensions,
    )
