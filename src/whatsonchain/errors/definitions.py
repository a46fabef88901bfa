"""All error kinds raised by the client.

Every kind is a class so it survives wrapping: a not-found error raised
for a 404 keeps the :class:`RequestFailedError` as ``__cause__`` and is
still caught by ``except AddressNotFoundError``.
"""

from __future__ import annotations

from whatsonchain.errors.woc_errors import WoCError

# Characters of a response body quoted in RequestFailedError messages
BODY_PREFIX_LENGTH = 256

# -- Families --------------------------------------------------------------


class NotFoundError(WoCError):
    """The API reported (or implied, with an empty body) a missing resource."""

    default_message = "resource not found"
    default_status_code = 404
    default_code = "not-found"


class LimitExceededError(WoCError):
    """A bulk input exceeded a WhatsOnChain limit; nothing was sent."""

    default_message = "limit exceeded"
    default_status_code = 400
    default_code = "limit-exceeded"


class ChainRequiredError(WoCError):
    """The endpoint does not exist on the client's configured chain."""

    default_message = "operation is not available for this chain"
    default_status_code = 400
    default_code = "chain-required"


# -- Input / precondition --------------------------------------------------


class MissingRequestError(WoCError):
    default_message = "missing request"
    default_status_code = 400
    default_code = "missing-request"


class BadRequestError(WoCError):
    default_message = "bad request"
    default_status_code = 400
    default_code = "bad-request"


class InvalidChainError(WoCError):
    default_message = "invalid chain type: must be one of: bsv, btc"
    default_status_code = 400
    default_code = "invalid-chain"


class InvalidNetworkError(WoCError):
    default_message = "invalid network type: must be one of: main, test, stn"
    default_status_code = 400
    default_code = "invalid-network"


class MaxAddressesExceededError(LimitExceededError):
    default_message = "max limit of addresses exceeded"
    default_code = "max-addresses-exceeded"


class MaxScriptsExceededError(LimitExceededError):
    default_message = "max limit of scripts exceeded"
    default_code = "max-scripts-exceeded"


class MaxTransactionsExceededError(LimitExceededError):
    default_message = "max transactions limit exceeded"
    default_code = "max-transactions-exceeded"


class MaxUTXOsExceededError(LimitExceededError):
    default_message = "max limit of UTXOs exceeded"
    default_code = "max-utxos-exceeded"


class MaxRawTransactionsExceededError(LimitExceededError):
    default_message = "max limit of raw transactions exceeded"
    default_code = "max-raw-transactions-exceeded"


class MaxPayloadSizeExceededError(LimitExceededError):
    default_message = "max overall payload size exceeded"
    default_code = "max-payload-size-exceeded"


class MaxTransactionSizeExceededError(LimitExceededError):
    default_message = "max transaction size exceeded"
    default_code = "max-transaction-size-exceeded"


class BSVChainRequiredError(ChainRequiredError):
    default_message = "operation is only available for BSV chain"
    default_code = "bsv-chain-required"


class BTCChainRequiredError(ChainRequiredError):
    default_message = "operation is only available for BTC chain"
    default_code = "btc-chain-required"


# -- Not found -------------------------------------------------------------


class AddressNotFoundError(NotFoundError):
    default_message = "address not found"
    default_code = "address-not-found"


class BlockNotFoundError(NotFoundError):
    default_message = "block not found"
    default_code = "block-not-found"


class TransactionNotFoundError(NotFoundError):
    default_message = "transaction not found"
    default_code = "transaction-not-found"


class ScriptNotFoundError(NotFoundError):
    default_message = "script not found"
    default_code = "script-not-found"


class ChainInfoNotFoundError(NotFoundError):
    default_message = "chain info not found"
    default_code = "chain-info-not-found"


class ChainTipsNotFoundError(NotFoundError):
    default_message = "chain tips not found"
    default_code = "chain-tips-not-found"


class ExchangeRateNotFoundError(NotFoundError):
    default_message = "exchange rate not found"
    default_code = "exchange-rate-not-found"


class MempoolInfoNotFoundError(NotFoundError):
    default_message = "mempool info not found"
    default_code = "mempool-info-not-found"


class HeadersNotFoundError(NotFoundError):
    default_message = "headers not found"
    default_code = "headers-not-found"


class PeerInfoNotFoundError(NotFoundError):
    default_message = "peer info not found"
    default_code = "peer-info-not-found"


class TokenNotFoundError(NotFoundError):
    default_message = "token not found"
    default_code = "token-not-found"


class StatsNotFoundError(NotFoundError):
    default_message = "stats not found"
    default_code = "stats-not-found"


# -- Transport / HTTP ------------------------------------------------------


class RequestFailedError(WoCError):
    """The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status of the final attempt.
        body: Full response body as text.
    """

    default_message = "API request failed"
    default_status_code = 502
    default_code = "request-failed"

    def __init__(self, status_code: int, body: str = "") -> None:
        message = f"{self.default_message}: HTTP {status_code}"
        if body:
            message = f"{message}: {body[:BODY_PREFIX_LENGTH]}"
        super().__init__(message, status_code=status_code)
        self.body = body


class BroadcastFailedError(WoCError):
    """The node rejected a broadcast; ``body`` holds the node's reason."""

    default_message = "error broadcasting transaction"
    default_status_code = 502
    default_code = "broadcast-failed"

    def __init__(self, body: str = "", *, status_code: int | None = None) -> None:
        message = f"{self.default_message}: {body}" if body else None
        super().__init__(message, status_code=status_code)
        self.body = body
