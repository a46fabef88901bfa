"""Managed httpx executor built from the dialer, transport and retry options."""

from __future__ import annotations

import socket
from typing import TYPE_CHECKING

import httpx

from whatsonchain.transport.backoff import ExponentialBackoff
from whatsonchain.transport.deadline import DeadlineTransport
from whatsonchain.transport.retry import RetryTransport

if TYPE_CHECKING:
    from whatsonchain.config.settings import ClientOptions, DialerConfig


def keepalive_socket_options(dialer: DialerConfig) -> list[tuple[int, int, int]]:
    """TCP keep-alive socket options; a non-positive interval disables them."""
    if dialer.keep_alive <= 0:
        return []
    interval = max(int(dialer.keep_alive), 1)
    opts = [(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)]
    # Not every platform exposes the per-socket tuning knobs
    if hasattr(socket, "TCP_KEEPIDLE"):
        opts.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, interval))
    if hasattr(socket, "TCP_KEEPINTVL"):
        opts.append((socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, interval))
    return opts


def build_timeout(options: ClientOptions) -> httpx.Timeout:
    """Per-attempt timeouts: connect covers TCP dial plus TLS handshake."""
    request_timeout = options.request_timeout if options.request_timeout > 0 else None
    connect = options.dialer.timeout + options.transport.tls_handshake_timeout
    return httpx.Timeout(request_timeout, connect=connect if connect > 0 else None)


def build_transport(options: ClientOptions) -> httpx.AsyncBaseTransport:
    """Pooled base transport, layered as retry -> per-attempt deadline -> pool.

    Each layer is skipped when its option is off (no retries, no timeout).
    """
    base: httpx.AsyncBaseTransport = httpx.AsyncHTTPTransport(
        limits=httpx.Limits(
            max_keepalive_connections=options.transport.max_idle_connections,
            keepalive_expiry=options.transport.idle_timeout,
        ),
        socket_options=keepalive_socket_options(options.dialer),
    )
    if options.request_timeout > 0:
        base = DeadlineTransport(base, options.request_timeout)
    if options.request_retry_count == 0:
        return base
    return RetryTransport(
        base,
        retry_count=options.request_retry_count,
        backoff=ExponentialBackoff.from_config(options.backoff),
    )


def build_http_client(options: ClientOptions) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` a client owns when none is injected."""
    return httpx.AsyncClient(
        transport=build_transport(options),
        timeout=build_timeout(options),
        follow_redirects=True,
    )
