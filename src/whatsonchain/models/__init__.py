"""Pydantic models for WhatsOnChain API responses."""

from whatsonchain.models.address import (
    AddressBalance,
    AddressBalanceRecord,
    AddressConfirmedBalance,
    AddressInfo,
    AddressScripts,
    AddressUnconfirmedBalance,
    AddressUsed,
    BulkRecord,
    History,
    HistoryRecord,
)
from whatsonchain.models.base import WoCModel
from whatsonchain.models.block import BlockInfo, BlockPages, HeaderBytesResource
from whatsonchain.models.chain import (
    ChainInfo,
    ChainTip,
    ExchangeRate,
    MempoolInfo,
    PeerInfo,
    SearchResult,
    SearchResults,
)
from whatsonchain.models.stats import (
    BlockStats,
    MinerFeeStats,
    MinerStats,
    MinerSummaryStats,
    TagCount,
)
from whatsonchain.models.tokens import (
    OneSatOrdinalContent,
    OneSatOrdinalHistory,
    OneSatOrdinalLatest,
    OneSatOrdinalStats,
    OneSatOrdinalToken,
    STASStats,
    STASToken,
    STASTokenBalance,
    STASTokenBalanceEntry,
    STASTokenUTXO,
)
from whatsonchain.models.transaction import (
    BulkBroadcastResponse,
    MerkleBranch,
    MerkleInfo,
    MerkleTSCInfo,
    ScriptPubKey,
    ScriptSig,
    TxInfo,
    VinInfo,
    VoutInfo,
)

__all__ = [
    "AddressBalance",
    "AddressBalanceRecord",
    "AddressConfirmedBalance",
    "AddressInfo",
    "AddressScripts",
    "AddressUnconfirmedBalance",
    "AddressUsed",
    "BlockInfo",
    "BlockPages",
    "BlockStats",
    "BulkBroadcastResponse",
    "BulkRecord",
    "ChainInfo",
    "ChainTip",
    "ExchangeRate",
    "HeaderBytesResource",
    "History",
    "HistoryRecord",
    "MempoolInfo",
    "MerkleBranch",
    "MerkleInfo",
    "MerkleTSCInfo",
    "MinerFeeStats",
    "MinerStats",
    "MinerSummaryStats",
    "OneSatOrdinalContent",
    "OneSatOrdinalHistory",
    "OneSatOrdinalLatest",
    "OneSatOrdinalStats",
    "OneSatOrdinalToken",
    "PeerInfo",
    "STASStats",
    "STASToken",
    "STASTokenBalance",
    "STASTokenBalanceEntry",
    "STASTokenUTXO",
    "ScriptPubKey",
    "ScriptSig",
    "SearchResult",
    "SearchResults",
    "TagCount",
    "TxInfo",
    "VinInfo",
    "VoutInfo",
    "WoCModel",
]
