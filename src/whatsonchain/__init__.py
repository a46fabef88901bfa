"""py-whatsonchain: async Python client for the WhatsOnChain blockchain API."""

from whatsonchain.base import LastRequest
from whatsonchain.client import Client, new_client
from whatsonchain.config.defaults import VERSION
from whatsonchain.config.settings import (
    BackoffConfig,
    Chain,
    ClientOptions,
    DialerConfig,
    Network,
    TransportConfig,
)
from whatsonchain.errors import *  # noqa: F403
from whatsonchain.errors import __all__ as _errors_all
from whatsonchain.options import (
    ClientOption,
    with_api_key,
    with_backoff,
    with_chain,
    with_config_file,
    with_dialer,
    with_http_client,
    with_network,
    with_rate_limit,
    with_request_retry_count,
    with_request_timeout,
    with_transport,
    with_user_agent,
)

__version__ = VERSION.lstrip("v")

__all__ = [
    "VERSION",
    "BackoffConfig",
    "Chain",
    "Client",
    "ClientOption",
    "ClientOptions",
    "DialerConfig",
    "LastRequest",
    "Network",
    "TransportConfig",
    "new_client",
    "with_api_key",
    "with_backoff",
    "with_chain",
    "with_config_file",
    "with_dialer",
    "with_http_client",
    "with_network",
    "with_rate_limit",
    "with_request_retry_count",
    "with_request_timeout",
    "with_transport",
    "with_user_agent",
    *_errors_all,
]
