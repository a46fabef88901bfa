"""Library-wide constants: API endpoint, headers, client defaults and bulk limits."""

from __future__ import annotations

VERSION = "v0.1.0"

# -- Wire ------------------------------------------------------------------

API_ENDPOINT_BASE = "https://api.whatsonchain.com/v1/"
API_KEY_HEADER = "woc-api-key"
DEFAULT_USER_AGENT = f"py-whatsonchain: {VERSION}"

# -- Client defaults -------------------------------------------------------

DEFAULT_RATE_LIMIT = 3  # requests per second, advisory
DEFAULT_REQUEST_RETRY_COUNT = 2
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds

DEFAULT_BACKOFF_INITIAL_TIMEOUT = 0.002
DEFAULT_BACKOFF_MAX_TIMEOUT = 0.010
DEFAULT_BACKOFF_EXPONENT_FACTOR = 2.0
DEFAULT_BACKOFF_MAX_JITTER = 0.002

DEFAULT_DIALER_KEEP_ALIVE = 20.0
DEFAULT_DIALER_TIMEOUT = 5.0

DEFAULT_TRANSPORT_IDLE_TIMEOUT = 20.0
DEFAULT_TRANSPORT_TLS_HANDSHAKE_TIMEOUT = 5.0
DEFAULT_TRANSPORT_EXPECT_CONTINUE_TIMEOUT = 3.0
DEFAULT_TRANSPORT_MAX_IDLE_CONNECTIONS = 10

# Bytes read from a response before the rest is discarded
MAX_RESPONSE_SIZE = 50 * 1024 * 1024

# -- Bulk limits (enforced by WhatsOnChain) --------------------------------

MAX_ADDRESSES_FOR_LOOKUP = 20
MAX_SCRIPTS_FOR_LOOKUP = 20
MAX_TRANSACTIONS_UTXO = 20
MAX_TRANSACTIONS_RAW = 20
MAX_BROADCAST_TRANSACTIONS = 100
MAX_SINGLE_TRANSACTION_SIZE = 100_000  # bytes of hex
MAX_COMBINED_TRANSACTION_SIZE = 10_000_000  # bytes of joined hex
