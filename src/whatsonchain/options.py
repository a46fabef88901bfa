"""Functional options for :func:`whatsonchain.new_client`.

Each ``with_*`` function returns a :data:`ClientOption` that records one
override. Options are applied in order, so a later option wins over an
earlier one touching the same setting.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    import httpx

    from whatsonchain.config.settings import Chain, Network


@dataclass
class PendingOptions:
    """Overrides collected from option functions before validation."""

    values: dict[str, Any] = field(default_factory=dict)
    http_client: httpx.AsyncClient | None = None


ClientOption = Callable[[PendingOptions], None]


def _set(key: str, value: Any) -> ClientOption:
    def apply(pending: PendingOptions) -> None:
        pending.values[key] = value

    return apply


def with_chain(chain: Chain | str) -> ClientOption:
    """Select the ``bsv`` or ``btc`` API namespace."""
    return _set("chain", str(chain).lower())


def with_network(network: Network | str) -> ClientOption:
    """Select ``main``, ``test`` or (BSV only) ``stn``."""
    return _set("network", str(network).lower())


def with_api_key(api_key: str) -> ClientOption:
    """Authenticate with a WhatsOnChain API key (sent as ``woc-api-key``)."""
    return _set("api_key", api_key)


def with_user_agent(user_agent: str) -> ClientOption:
    return _set("user_agent", user_agent)


def with_rate_limit(rate_limit: int) -> ClientOption:
    """Requests per second the key tier allows; paces chunked processors only."""
    return _set("rate_limit", rate_limit)


def with_request_timeout(timeout: float) -> ClientOption:
    """Per-attempt timeout in seconds."""
    return _set("request_timeout", timeout)


def with_request_retry_count(count: int) -> ClientOption:
    """Retries after the first attempt; negative values mean no retries."""
    return _set("request_retry_count", count)


def with_backoff(
    initial_timeout: float,
    max_timeout: float,
    exponent_factor: float,
    max_jitter: float,
) -> ClientOption:
    """Backoff between retries, all durations in seconds."""
    return _set(
        "backoff",
        {
            "initial_timeout": initial_timeout,
            "max_timeout": max_timeout,
            "exponent_factor": exponent_factor,
            "max_jitter": max_jitter,
        },
    )


def with_dialer(keep_alive: float, timeout: float) -> ClientOption:
    """TCP keep-alive interval and dial timeout, in seconds."""
    return _set("dialer", {"keep_alive": keep_alive, "timeout": timeout})


def with_transport(
    idle_timeout: float,
    tls_handshake_timeout: float,
    expect_continue_timeout: float,
    max_idle_connections: int,
) -> ClientOption:
    """Connection pool settings; durations in seconds."""
    return _set(
        "transport",
        {
            "idle_timeout": idle_timeout,
            "tls_handshake_timeout": tls_handshake_timeout,
            "expect_continue_timeout": expect_continue_timeout,
            "max_idle_connections": max_idle_connections,
        },
    )


def with_http_client(http_client: httpx.AsyncClient) -> ClientOption:
    """Use a caller-owned ``httpx.AsyncClient`` instead of the managed one.

    The client is used as-is: retries and timeouts become the caller's
    responsibility, and :meth:`~whatsonchain.Client.close` leaves it open.
    """

    def apply(pending: PendingOptions) -> None:
        pending.http_client = http_client

    return apply


def with_config_file(path: str | Path) -> ClientOption:
    """Read defaults from a YAML file; options and env vars still override it."""
    return _set("config_path", str(path))
