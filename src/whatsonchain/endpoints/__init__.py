"""Endpoint groups, combined into :class:`whatsonchain.client.Client`."""

from whatsonchain.endpoints.addresses import AddressEndpoints
from whatsonchain.endpoints.blocks import BlockEndpoints
from whatsonchain.endpoints.bsv import BSVEndpoints
from whatsonchain.endpoints.chain import ChainEndpoints
from whatsonchain.endpoints.scripts import ScriptEndpoints
from whatsonchain.endpoints.stats import StatsEndpoints
from whatsonchain.endpoints.transactions import TransactionEndpoints

__all__ = [
    "AddressEndpoints",
    "BSVEndpoints",
    "BlockEndpoints",
    "ChainEndpoints",
    "ScriptEndpoints",
    "StatsEndpoints",
    "TransactionEndpoints",
]
