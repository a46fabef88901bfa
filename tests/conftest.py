"""Shared test fixtures for py-whatsonchain test suite."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from whatsonchain import new_client, with_http_client

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from whatsonchain import Client, ClientOption


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep WHATS_ON_CHAIN_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.upper().startswith("WHATS_ON_CHAIN_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
async def make_client() -> AsyncIterator[Callable[..., Client]]:
    """Build clients whose HTTP traffic is answered by *handler*.

    Usage: ``client = make_client(handler, with_chain("btc"))``.
    """
    opened: list[httpx.AsyncClient] = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        *options: ClientOption,
    ) -> Client:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        opened.append(http)
        return new_client(with_http_client(http), *options)

    yield factory
    for http in opened:
        await http.aclose()


@pytest.fixture
def unreachable() -> Callable[[httpx.Request], httpx.Response]:
    """A handler that fails the test if any request reaches it."""

    def handler(request: httpx.Request) -> httpx.Response:
        pytest.fail(f"unexpected request: {request.method} {request.url}")

    return handler


@pytest.fixture
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record asyncio.sleep delays instead of waiting."""
    delays: list[float] = []

    async def fake_sleep(delay: float, *args: object) -> None:
        delays.append(delay)

    monkeypatch.setattr("asyncio.sleep", fake_sleep)
    return delays
