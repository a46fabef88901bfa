"""Error kinds raised by the WhatsOnChain client."""

from whatsonchain.errors.definitions import (
    AddressNotFoundError,
    BadRequestError,
    BlockNotFoundError,
    BroadcastFailedError,
    BSVChainRequiredError,
    BTCChainRequiredError,
    ChainInfoNotFoundError,
    ChainRequiredError,
    ChainTipsNotFoundError,
    ExchangeRateNotFoundError,
    HeadersNotFoundError,
    InvalidChainError,
    InvalidNetworkError,
    LimitExceededError,
    MaxAddressesExceededError,
    MaxPayloadSizeExceededError,
    MaxRawTransactionsExceededError,
    MaxScriptsExceededError,
    MaxTransactionsExceededError,
    MaxTransactionSizeExceededError,
    MaxUTXOsExceededError,
    MempoolInfoNotFoundError,
    MissingRequestError,
    NotFoundError,
    PeerInfoNotFoundError,
    RequestFailedError,
    ScriptNotFoundError,
    StatsNotFoundError,
    TokenNotFoundError,
    TransactionNotFoundError,
)
from whatsonchain.errors.woc_errors import WoCError

__all__ = [
    "AddressNotFoundError",
    "BSVChainRequiredError",
    "BTCChainRequiredError",
    "BadRequestError",
    "BlockNotFoundError",
    "BroadcastFailedError",
    "ChainInfoNotFoundError",
    "ChainRequiredError",
    "ChainTipsNotFoundError",
    "ExchangeRateNotFoundError",
    "HeadersNotFoundError",
    "InvalidChainError",
    "InvalidNetworkError",
    "LimitExceededError",
    "MaxAddressesExceededError",
    "MaxPayloadSizeExceededError",
    "MaxRawTransactionsExceededError",
    "MaxScriptsExceededError",
    "MaxTransactionSizeExceededError",
    "MaxTransactionsExceededError",
    "MaxUTXOsExceededError",
    "MempoolInfoNotFoundError",
    "MissingRequestError",
    "NotFoundError",
    "PeerInfoNotFoundError",
    "RequestFailedError",
    "ScriptNotFoundError",
    "StatsNotFoundError",
    "TokenNotFoundError",
    "TransactionNotFoundError",
    "WoCError",
]
