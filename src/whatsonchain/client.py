"""The WhatsOnChain API client and its constructor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from whatsonchain.config.settings import ClientOptions
from whatsonchain.endpoints.addresses import AddressEndpoints
from whatsonchain.endpoints.blocks import BlockEndpoints
from whatsonchain.endpoints.bsv import BSVEndpoints
from whatsonchain.endpoints.chain import ChainEndpoints
from whatsonchain.endpoints.scripts import ScriptEndpoints
from whatsonchain.endpoints.stats import StatsEndpoints
from whatsonchain.errors.definitions import InvalidChainError, InvalidNetworkError
from whatsonchain.options import PendingOptions

if TYPE_CHECKING:
    from whatsonchain.options import ClientOption

logger = logging.getLogger(__name__)


class Client(
    AddressEndpoints,
    ScriptEndpoints,
    BlockEndpoints,
    ChainEndpoints,
    StatsEndpoints,
    BSVEndpoints,
):
    """Async client for the WhatsOnChain API.

    Build one with :func:`new_client`. All endpoint methods are coroutines
    and may be awaited concurrently; getters and setters are thread-safe.

    Example::

        async with new_client(with_network("test")) as client:
            info = await client.get_chain_info()
    """


def new_client(*options: ClientOption) -> Client:
    """Create a :class:`Client` from functional options.

    Options apply in order over environment variables, an optional YAML
    file and the library defaults. No network activity happens here.

    Raises:
        InvalidChainError: unknown chain.
        InvalidNetworkError: unknown network, or ``stn`` on the btc chain.
        pydantic.ValidationError: any other malformed option value.
    """
    pending = PendingOptions()
    for option in options:
        option(pending)

    values = dict(pending.values)
    # An empty key leaves room for WHATS_ON_CHAIN_API_KEY
    if not values.get("api_key"):
        values.pop("api_key", None)

    try:
        client_options = ClientOptions(**values)
    except ValidationError as exc:
        fields = {err["loc"][0] for err in exc.errors() if err["loc"]}
        if "chain" in fields:
            raise InvalidChainError from exc
        if "network" in fields:
            raise InvalidNetworkError from exc
        raise

    logger.debug(
        "WhatsOnChain client created (chain=%s, network=%s, retries=%d, custom_http=%s)",
        client_options.chain,
        client_options.network,
        client_options.request_retry_count,
        pending.http_client is not None,
    )
    return Client(client_options, http_client=pending.http_client)
