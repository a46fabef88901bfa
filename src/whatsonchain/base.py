"""Client core: option snapshots, URL builder, request engine and decoders.

Endpoint groups in :mod:`whatsonchain.endpoints` are mixins over
:class:`BaseClient`; each endpoint is one ``build_url`` call followed by
one of the ``_request_*`` helpers.

Locking: every option group (core, backoff, dialer, transport) has its own
``threading.Lock`` guarding an immutable snapshot, so setters may run on
any thread while requests are in flight on the event loop. No lock is
held across I/O.
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, Self, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, BeforeValidator, TypeAdapter

from whatsonchain.config import defaults
from whatsonchain.config.settings import (
    BackoffConfig,
    Chain,
    ClientOptions,
    DialerConfig,
    Network,
    TransportConfig,
)
from whatsonchain.errors.definitions import (
    InvalidChainError,
    InvalidNetworkError,
    NotFoundError,
    RequestFailedError,
)
from whatsonchain.guards import chunked
from whatsonchain.models.base import unwrap_result
from whatsonchain.transport.http import build_http_client

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence
    from types import TracebackType

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")

# RFC 3986 pchar sub-delimiters left as-is inside a path segment
_PATH_SEGMENT_SAFE = "!$&'()*+,;=:@"


@dataclass(frozen=True)
class LastRequest:
    """Diagnostic record of the most recent HTTP exchange.

    ``status_code`` is the status of the final attempt, or 0 when no
    response was received.
    """

    method: str = ""
    url: str = ""
    post_data: str = ""
    status_code: int = 0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_chain(value: Chain | str) -> Chain:
    try:
        return Chain(str(value).lower())
    except ValueError as exc:
        raise InvalidChainError from exc


def parse_network(value: Network | str) -> Network:
    try:
        return Network(str(value).lower())
    except ValueError as exc:
        raise InvalidNetworkError from exc


def escape_path_arg(arg: Any) -> str:
    """Format one URL template argument; strings are percent-escaped."""
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, str):
        return quote(arg, safe=_PATH_SEGMENT_SAFE)
    return str(arg)


@functools.lru_cache(maxsize=None)
def model_adapter(model: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(model)


@functools.lru_cache(maxsize=None)
def _list_adapter(item: type[Any]) -> TypeAdapter[Any]:
    list_type = Annotated[list[item], BeforeValidator(unwrap_result)]  # type: ignore[valid-type]
    return TypeAdapter(list_type)


def encode_payload(data: Any) -> bytes:
    """Serialise a request body as compact JSON."""
    return json.dumps(data, separators=(",", ":")).encode("utf-8")


async def _read_capped(response: httpx.Response, limit: int) -> bytes:
    chunks: list[bytes] = []
    size = 0
    async for chunk in response.aiter_bytes():
        remaining = limit - size
        if len(chunk) > remaining:
            chunks.append(chunk[:remaining])
            logger.warning(
                "Response from %s exceeded %d bytes; truncating",
                response.request.url,
                limit,
            )
            break
        chunks.append(chunk)
        size += len(chunk)
    return b"".join(chunks)


# ---------------------------------------------------------------------------
# Client core
# ---------------------------------------------------------------------------


class BaseClient:
    """Configuration, lifecycle and request plumbing shared by all endpoints."""

    def __init__(
        self,
        options: ClientOptions,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._core_lock = threading.Lock()
        self._backoff_lock = threading.Lock()
        self._dialer_lock = threading.Lock()
        self._transport_lock = threading.Lock()
        self._http_lock = threading.Lock()
        self._last_request_lock = threading.Lock()

        self._core = options
        self._backoff = options.backoff
        self._dialer = options.dialer
        self._transport = options.transport

        self._custom_http = http_client is not None
        self._http: httpx.AsyncClient | None = (
            http_client if http_client is not None else build_http_client(options)
        )
        # Executors replaced by setters; closed with the client
        self._retired: list[httpx.AsyncClient] = []
        self._last_request = LastRequest()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the managed HTTP client(s). A custom client is left open."""
        with self._http_lock:
            to_close = list(self._retired)
            if self._http is not None and not self._custom_http:
                to_close.append(self._http)
            self._http = None
            self._retired = []
        for http in to_close:
            await http.aclose()

    @property
    def is_connected(self) -> bool:
        """Whether the client can still issue requests."""
        return self._http is not None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _ensure_connected(self) -> httpx.AsyncClient:
        with self._http_lock:
            http = self._http
        if http is None:
            msg = "Client is not connected: it has been closed"
            raise RuntimeError(msg)
        return http

    def _rebuild_http(self) -> None:
        """Swap in a freshly built executor after a transport-level setter.

        Options are read and the executor built and swapped under one
        ``_http_lock`` hold, so the last rebuild to finish always reflects
        the latest options. Building an ``AsyncClient`` performs no I/O.
        """
        if self._custom_http:
            return
        with self._http_lock:
            if self._http is None:
                return
            http = build_http_client(self.options)
            self._retired.append(self._http)
            self._http = http
        logger.debug("Rebuilt HTTP executor")

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    @property
    def options(self) -> ClientOptions:
        """Snapshot of every option, assembled from the group snapshots."""
        with self._core_lock:
            core = self._core
        with self._backoff_lock:
            backoff = self._backoff
        with self._dialer_lock:
            dialer = self._dialer
        with self._transport_lock:
            transport = self._transport
        return core.model_copy(
            update={"backoff": backoff, "dialer": dialer, "transport": transport}
        )

    @property
    def chain(self) -> Chain:
        with self._core_lock:
            return self._core.chain

    @property
    def network(self) -> Network:
        with self._core_lock:
            return self._core.network

    @property
    def api_key(self) -> str:
        with self._core_lock:
            return self._core.api_key

    @property
    def user_agent(self) -> str:
        with self._core_lock:
            return self._core.user_agent

    @property
    def rate_limit(self) -> int:
        with self._core_lock:
            return self._core.rate_limit

    @property
    def request_timeout(self) -> float:
        with self._core_lock:
            return self._core.request_timeout

    @property
    def request_retry_count(self) -> int:
        with self._core_lock:
            return self._core.request_retry_count

    @property
    def backoff(self) -> BackoffConfig:
        with self._backoff_lock:
            return self._backoff

    @property
    def dialer(self) -> DialerConfig:
        with self._dialer_lock:
            return self._dialer

    @property
    def transport(self) -> TransportConfig:
        with self._transport_lock:
            return self._transport

    @property
    def last_request(self) -> LastRequest:
        with self._last_request_lock:
            return self._last_request

    @property
    def uses_custom_http_client(self) -> bool:
        return self._custom_http

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def _update_core(self, **changes: Any) -> None:
        with self._core_lock:
            self._core = self._core.model_copy(update=changes)

    def set_chain(self, chain: Chain | str) -> None:
        """Switch chains. Rejected while the network is ``stn`` and *chain* is btc."""
        parsed = parse_chain(chain)
        with self._core_lock:
            if parsed is Chain.BTC and self._core.network is Network.STN:
                msg = f"{InvalidChainError.default_message} (stn network requires bsv)"
                raise InvalidChainError(msg)
            self._core = self._core.model_copy(update={"chain": parsed})

    def set_network(self, network: Network | str) -> None:
        """Switch networks. ``stn`` is rejected on the btc chain."""
        parsed = parse_network(network)
        with self._core_lock:
            if parsed is Network.STN and self._core.chain is Chain.BTC:
                msg = f"{InvalidNetworkError.default_message} (stn is only available on bsv)"
                raise InvalidNetworkError(msg)
            self._core = self._core.model_copy(update={"network": parsed})

    def set_api_key(self, api_key: str) -> None:
        self._update_core(api_key=api_key)

    def set_user_agent(self, user_agent: str) -> None:
        self._update_core(user_agent=user_agent)

    def set_rate_limit(self, rate_limit: int) -> None:
        self._update_core(rate_limit=rate_limit)

    def set_request_timeout(self, timeout: float) -> None:
        self._update_core(request_timeout=timeout)
        self._rebuild_http()

    def set_request_retry_count(self, count: int) -> None:
        self._update_core(request_retry_count=max(count, 0))
        self._rebuild_http()

    def set_backoff(
        self,
        initial_timeout: float,
        max_timeout: float,
        exponent_factor: float,
        max_jitter: float,
    ) -> None:
        backoff = BackoffConfig(
            initial_timeout=initial_timeout,
            max_timeout=max_timeout,
            exponent_factor=exponent_factor,
            max_jitter=max_jitter,
        )
        with self._backoff_lock:
            self._backoff = backoff
        self._rebuild_http()

    def set_dialer(self, keep_alive: float, timeout: float) -> None:
        dialer = DialerConfig(keep_alive=keep_alive, timeout=timeout)
        with self._dialer_lock:
            self._dialer = dialer
        self._rebuild_http()

    def set_transport(
        self,
        idle_timeout: float,
        tls_handshake_timeout: float,
        expect_continue_timeout: float,
        max_idle_connections: int,
    ) -> None:
        transport = TransportConfig(
            idle_timeout=idle_timeout,
            tls_handshake_timeout=tls_handshake_timeout,
            expect_continue_timeout=expect_continue_timeout,
            max_idle_connections=max_idle_connections,
        )
        with self._transport_lock:
            self._transport = transport
        self._rebuild_http()

    # ------------------------------------------------------------------
    # URL builder
    # ------------------------------------------------------------------

    def build_url(self, path: str, *args: Any) -> str:
        """Return ``BASE + chain + "/" + network + path`` with *args* substituted.

        *path* uses ``{}`` placeholders. String arguments are percent-escaped
        as path segments; query strings written into *path* are kept as-is.
        """
        with self._core_lock:
            chain, network = self._core.chain, self._core.network
        if args:
            path = path.format(*(escape_path_arg(arg) for arg in args))
        return f"{defaults.API_ENDPOINT_BASE}{chain}/{network}{path}"

    def site_url(self, path: str, *args: Any) -> str:
        """URL on the ``<network>.whatsonchain.com`` site (statements, receipts)."""
        network = self.network
        if args:
            path = path.format(*(escape_path_arg(arg) for arg in args))
        return f"https://{network}.whatsonchain.com{path}"

    # ------------------------------------------------------------------
    # Request engine
    # ------------------------------------------------------------------

    def _record(self, record: LastRequest) -> None:
        with self._last_request_lock:
            self._last_request = record

    async def _request(
        self,
        url: str,
        method: str = "GET",
        payload: bytes | None = None,
    ) -> bytes:
        """Perform one API call and return the raw response body.

        Raises:
            RequestFailedError: the final attempt answered with a non-2xx status.
            httpx.RequestError: no complete response could be obtained.
        """
        http = self._ensure_connected()
        with self._core_lock:
            user_agent, api_key = self._core.user_agent, self._core.api_key

        headers = {"User-Agent": user_agent}
        if api_key:
            headers[defaults.API_KEY_HEADER] = api_key
        content: bytes | None = None
        post_data = ""
        if method in ("POST", "PUT"):
            headers["Content-Type"] = "application/json"
            content = payload
            post_data = payload.decode("utf-8", errors="replace") if payload else ""

        request = http.build_request(method, url, headers=headers, content=content)
        logger.debug("%s %s", method, url)
        try:
            response = await http.send(request, stream=True)
            try:
                body = await _read_capped(response, defaults.MAX_RESPONSE_SIZE)
            finally:
                await response.aclose()
        except httpx.RequestError as exc:
            # No complete response: covers send failures and broken body streams
            self._record(LastRequest(method, url, post_data, 0))
            logger.error("%s %s failed: %s", method, url, exc)
            raise

        self._record(LastRequest(method, url, post_data, response.status_code))
        logger.debug("%s %s returned %d (%d bytes)", method, url, response.status_code, len(body))
        if not response.is_success:
            raise RequestFailedError(response.status_code, body.decode("utf-8", errors="replace"))
        return body

    async def _fetch(
        self,
        url: str,
        method: str,
        payload: bytes | None,
        not_found: type[NotFoundError] | None,
    ) -> bytes:
        try:
            return await self._request(url, method, payload)
        except RequestFailedError as exc:
            if not_found is not None and exc.status_code == 404:
                raise not_found from exc
            raise

    # ------------------------------------------------------------------
    # Decoders
    # ------------------------------------------------------------------

    async def _request_model(
        self,
        url: str,
        model: type[M],
        not_found: type[NotFoundError],
        *,
        method: str = "GET",
        payload: bytes | None = None,
    ) -> M:
        """Decode a JSON object into *model*; an empty body raises *not_found*."""
        body = await self._fetch(url, method, payload, not_found)
        if not body:
            raise not_found
        if body.strip() == b"null":
            return model()
        return model_adapter(model).validate_json(body)

    async def _request_list(
        self,
        url: str,
        item: type[T],
        not_found: type[NotFoundError],
        *,
        method: str = "GET",
        payload: bytes | None = None,
    ) -> list[T]:
        """Decode a JSON array (or ``result`` envelope) into a list of *item*."""
        body = await self._fetch(url, method, payload, not_found)
        if not body:
            raise not_found
        return _list_adapter(item).validate_json(body)

    async def _request_text(
        self,
        url: str,
        not_found: type[NotFoundError] | None = None,
        *,
        method: str = "GET",
        payload: bytes | None = None,
    ) -> str:
        """Return the body as text without parsing."""
        body = await self._fetch(url, method, payload, not_found)
        return body.decode("utf-8", errors="replace")

    async def _request_bytes(self, url: str, not_found: type[NotFoundError] | None = None) -> bytes:
        """Return the body as opaque bytes (PDF and binary endpoints)."""
        return await self._fetch(url, "GET", None, not_found)

    # ------------------------------------------------------------------
    # Chunked processors
    # ------------------------------------------------------------------

    async def _process_in_chunks(
        self,
        items: Sequence[str],
        size: int,
        fetch: Callable[[list[str]], Awaitable[list[T]]],
    ) -> list[T]:
        """Run *fetch* per chunk of *size*, concatenating results in order.

        Sleeps one second after every ``rate_limit`` chunks (never after the
        last one); ``rate_limit <= 0`` disables the pause. The first failing
        chunk aborts the whole batch.
        """
        results: list[T] = []
        batches = chunked(items, size)
        rate_limit = self.rate_limit
        for index, batch in enumerate(batches, start=1):
            results.extend(await fetch(batch))
            if rate_limit > 0 and index % rate_limit == 0 and index < len(batches):
                await asyncio.sleep(1.0)
        return results
