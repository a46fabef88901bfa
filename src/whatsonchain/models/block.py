"""Block and header response models."""

from __future__ import annotations

from pydantic import Field

from whatsonchain.models.base import WoCModel
from whatsonchain.models.transaction import TxInfo


class BlockPages(WoCModel):
    """Paging hints for blocks holding more than 1000 transactions."""

    uri: list[str] = Field(default_factory=list)
    size: int = 0


class BlockInfo(WoCModel):
    """Block (or header) details."""

    hash: str = ""
    confirmations: int = 0
    size: int = 0
    height: int = 0
    version: int = 0
    version_hex: str = Field("", alias="versionHex")
    merkle_root: str = Field("", alias="merkleroot")
    tx_count: int = Field(0, alias="txcount")
    tx: list[str] = Field(default_factory=list)
    time: int = 0
    median_time: int = Field(0, alias="mediantime")
    nonce: int = 0
    bits: str = ""
    difficulty: float = 0.0
    chainwork: str = ""
    previous_block_hash: str = Field("", alias="previousblockhash")
    next_block_hash: str = Field("", alias="nextblockhash")
    coinbase_tx: TxInfo | None = Field(None, alias="coinbaseTx")
    total_fees: float = Field(0.0, alias="totalFees")
    miner: str = ""
    pages: BlockPages | None = None


class HeaderBytesResource(WoCModel):
    """Download links for header byte files."""

    files: list[str] = Field(default_factory=list)
