"""Tests for the per-attempt deadline: mock streams and a real trickling server."""

from __future__ import annotations

import asyncio
import gzip

import httpx
import pytest

from whatsonchain import new_client, with_backoff, with_request_retry_count, with_request_timeout
from whatsonchain.config import defaults
from whatsonchain.transport.backoff import ExponentialBackoff
from whatsonchain.transport.deadline import DeadlineTransport
from whatsonchain.transport.retry import RetryTransport

_URL = "https://api.whatsonchain.com/v1/bsv/main/chain/info"


async def _trickle(data: bytes, delay: float):
    for i in range(len(data)):
        await asyncio.sleep(delay)
        yield data[i : i + 1]


# ---------------------------------------------------------------------------
# Mock transport
# ---------------------------------------------------------------------------


class TestDeadlineTransport:
    @pytest.mark.asyncio
    async def test_fast_response_passes_through(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, headers={"X-Node": "n1"}, json={"ok": True})

        transport = DeadlineTransport(httpx.MockTransport(handler), 1.0)
        async with httpx.AsyncClient(transport=transport) as http:
            response = await http.get(_URL)
        assert response.status_code == 201
        assert response.headers["X-Node"] == "n1"
        assert response.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_trickling_body_times_out(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=_trickle(b'"abcdef"', 0.05))

        transport = DeadlineTransport(httpx.MockTransport(handler), 0.15)
        loop = asyncio.get_running_loop()
        started = loop.time()
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(httpx.ReadTimeout, match="attempt exceeded"):
                await http.get(_URL)
        assert loop.time() - started < 0.4

    @pytest.mark.asyncio
    async def test_slow_headers_time_out(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(200)

        transport = DeadlineTransport(httpx.MockTransport(handler), 0.05)
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(httpx.ReadTimeout):
                await http.get(_URL)

    @pytest.mark.asyncio
    async def test_encoded_body_decoded_once(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                content=gzip.compress(b'{"blocks":7}'),
            )

        transport = DeadlineTransport(httpx.MockTransport(handler), 1.0)
        async with httpx.AsyncClient(transport=transport) as http:
            response = await http.get(_URL)
        assert "content-encoding" not in response.headers
        assert response.json() == {"blocks": 7}

    @pytest.mark.asyncio
    async def test_timed_out_attempt_is_retried(self) -> None:
        attempts: list[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(1)
            if len(attempts) == 1:
                return httpx.Response(200, content=_trickle(b"slow-body", 0.1))
            return httpx.Response(200, text="fast")

        transport = RetryTransport(
            DeadlineTransport(httpx.MockTransport(handler), 0.15),
            retry_count=1,
            backoff=ExponentialBackoff(initial=0.0, maximum=0.0, factor=2.0),
        )
        async with httpx.AsyncClient(transport=transport) as http:
            response = await http.get(_URL)
        assert response.text == "fast"
        assert len(attempts) == 2


# ---------------------------------------------------------------------------
# Real socket
# ---------------------------------------------------------------------------


@pytest.fixture
async def trickling_server(monkeypatch: pytest.MonkeyPatch):
    """Local HTTP server sending a 6-byte body one byte every 0.3s.

    Yields the list of accepted connections; API URLs point at it.
    """
    connections: list[int] = []

    async def serve(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        connections.append(1)
        try:
            await reader.readuntil(b"\r\n\r\n")
            writer.write(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: 6\r\n\r\n"
            )
            for byte in b'"abcd"':
                writer.write(bytes([byte]))
                await writer.drain()
                await asyncio.sleep(0.3)
        except (ConnectionError, asyncio.IncompleteReadError):
            pass
        finally:
            writer.close()

    server = await asyncio.start_server(serve, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    monkeypatch.setattr(defaults, "API_ENDPOINT_BASE", f"http://127.0.0.1:{port}/v1/")
    async with server:
        yield connections


class TestTricklingServer:
    @pytest.mark.asyncio
    async def test_attempt_capped_by_request_timeout(self, trickling_server) -> None:
        loop = asyncio.get_running_loop()
        async with new_client(with_request_timeout(0.5), with_request_retry_count(0)) as client:
            started = loop.time()
            with pytest.raises(httpx.ReadTimeout):
                await client.get_health()
            elapsed = loop.time() - started
        assert elapsed < 1.2
        assert client.last_request.status_code == 0
        assert trickling_server == [1]

    @pytest.mark.asyncio
    async def test_timed_out_attempt_retried(self, trickling_server) -> None:
        options = (
            with_request_timeout(0.4),
            with_request_retry_count(1),
            with_backoff(0.0, 0.0, 2.0, 0.0),
        )
        async with new_client(*options) as client:
            with pytest.raises(httpx.ReadTimeout):
                await client.get_health()
        assert len(trickling_server) == 2
