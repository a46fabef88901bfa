"""Chain, network, mempool, exchange rate and search response models."""

from __future__ import annotations

from pydantic import Field

from whatsonchain.models.base import WoCModel


class ChainInfo(WoCModel):
    best_block_hash: str = Field("", alias="bestblockhash")
    blocks: int = 0
    chain: str = ""
    chainwork: str = ""
    difficulty: float = 0.0
    headers: int = 0
    median_time: int = Field(0, alias="mediantime")
    pruned: bool = False
    verification_progress: float = Field(0.0, alias="verificationprogress")


class ChainTip(WoCModel):
    height: int = 0
    hash: str = ""
    branch_len: int = Field(0, alias="branchlen")
    status: str = ""


class PeerInfo(WoCModel):
    id: int = 0
    addr: str = ""
    addr_local: str = Field("", alias="addrlocal")
    services: str = ""
    relay_txes: bool = Field(False, alias="relaytxes")
    last_send: int = Field(0, alias="lastsend")
    last_recv: int = Field(0, alias="lastrecv")
    bytes_sent: int = Field(0, alias="bytessent")
    bytes_recv: int = Field(0, alias="bytesrecv")
    conn_time: int = Field(0, alias="conntime")
    time_offset: int = Field(0, alias="timeoffset")
    ping_time: float = Field(0.0, alias="pingtime")
    min_ping: float = Field(0.0, alias="minping")
    version: int = 0
    subver: str = ""
    inbound: bool = False
    starting_height: int = Field(0, alias="startingheight")
    ban_score: int = Field(0, alias="banscore")
    synced_headers: int = 0
    synced_blocks: int = 0
    whitelisted: bool = False


class ExchangeRate(WoCModel):
    rate: float = 0.0
    currency: str = ""
    time: int = 0


class MempoolInfo(WoCModel):
    size: int = 0
    bytes: int = 0
    usage: int = 0
    max_mempool: int = Field(0, alias="maxmempool")
    mempool_min_fee: float = Field(0.0, alias="mempoolminfee")


class SearchResult(WoCModel):
    type: str = ""
    url: str = ""


class SearchResults(WoCModel):
    """Explorer links matching a free-text query."""

    results: list[SearchResult] = Field(default_factory=list)
