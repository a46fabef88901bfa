"""Preconditions checked before any network activity.

- Chain gate: :func:`bsv_only` / :func:`btc_only` decorate endpoint
  methods that exist on a single chain.
- Bulk guard: :func:`check_bulk` and :func:`check_broadcast` enforce the
  WhatsOnChain per-request limits.
- :func:`chunked` splits oversized inputs for the "processor" variants.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, TypeVar, cast

from whatsonchain.config import defaults
from whatsonchain.config.settings import Chain
from whatsonchain.errors.definitions import (
    BadRequestError,
    BSVChainRequiredError,
    BTCChainRequiredError,
    LimitExceededError,
    MaxPayloadSizeExceededError,
    MaxTransactionsExceededError,
    MaxTransactionSizeExceededError,
    MissingRequestError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

T = TypeVar("T")
F = TypeVar("F", bound="Callable[..., Awaitable[Any]]")

# ---------------------------------------------------------------------------
# Chain gate
# ---------------------------------------------------------------------------


def requires_chain(chain: Chain) -> Callable[[F], F]:
    """Reject calls unless the client's chain is *chain*.

    The check runs before the URL is built, so a rejected call leaves
    ``last_request`` untouched.
    """
    error = BSVChainRequiredError if chain is Chain.BSV else BTCChainRequiredError

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            if self.chain is not chain:
                raise error
            return await func(self, *args, **kwargs)

        return cast("F", wrapper)

    return decorator


bsv_only = requires_chain(Chain.BSV)
btc_only = requires_chain(Chain.BTC)

# ---------------------------------------------------------------------------
# Bulk guard
# ---------------------------------------------------------------------------


def check_bulk(
    items: Sequence[str],
    limit: int,
    error: type[LimitExceededError],
    noun: str,
) -> None:
    """Require a non-empty list of at most *limit* entries."""
    check_not_empty_list(items, noun)
    if len(items) > limit:
        msg = f"{error.default_message}: {len(items)} {noun} requested, max is {limit}"
        raise error(msg)


def check_broadcast(raw_txs: Sequence[str]) -> None:
    """Enforce count, joined payload size and per-transaction size limits."""
    check_not_empty_list(raw_txs, "transactions")
    if len(raw_txs) > defaults.MAX_BROADCAST_TRANSACTIONS:
        msg = (
            f"{MaxTransactionsExceededError.default_message}: {len(raw_txs)} transactions, "
            f"max is {defaults.MAX_BROADCAST_TRANSACTIONS}"
        )
        raise MaxTransactionsExceededError(msg)
    payload_size = len(",".join(raw_txs))
    if payload_size > defaults.MAX_COMBINED_TRANSACTION_SIZE:
        msg = (
            f"{MaxPayloadSizeExceededError.default_message}: payload size {payload_size} bytes, "
            f"max is {defaults.MAX_COMBINED_TRANSACTION_SIZE} bytes"
        )
        raise MaxPayloadSizeExceededError(msg)
    for tx in raw_txs:
        if len(tx) > defaults.MAX_SINGLE_TRANSACTION_SIZE:
            msg = (
                f"{MaxTransactionSizeExceededError.default_message}: transaction size "
                f"{len(tx)} bytes, max is {defaults.MAX_SINGLE_TRANSACTION_SIZE} bytes"
            )
            raise MaxTransactionSizeExceededError(msg)


def check_not_empty_list(items: Sequence[Any], noun: str) -> None:
    if not items:
        msg = f"{MissingRequestError.default_message}: no {noun} given"
        raise MissingRequestError(msg)


def check_non_negative(name: str, value: int) -> None:
    if value < 0:
        msg = f"{BadRequestError.default_message}: {name} must be >= 0, got {value}"
        raise BadRequestError(msg)


def check_not_empty(name: str, value: str) -> None:
    if not value:
        msg = f"{MissingRequestError.default_message}: {name} is required"
        raise MissingRequestError(msg)


# ---------------------------------------------------------------------------
# Chunking
# ---------------------------------------------------------------------------


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    """Split *items* into consecutive lists of *size*; the last may be shorter."""
    if size <= 0 or not items:
        return []
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
