"""Block and miner statistics response models."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from whatsonchain.models.base import WoCModel


class BlockStats(WoCModel):
    """Per-block statistics (``/block/height/<h>/stats``)."""

    height: int = 0
    hash: str = ""
    version: int = 0
    size: int = 0
    weight: int = 0
    merkle_root: str = Field("", alias="merkleroot")
    timestamp: int = 0
    median_time: int = Field(0, alias="mediantime")
    nonce: int = 0
    bits: str = ""
    difficulty: float = 0.0
    chainwork: str = ""
    tx_count: int = 0
    total_size: int = 0
    total_fees: int = 0
    subsidy_total: int = 0
    subsidy_address: int = 0
    subsidy_miner: int = 0
    miner_name: str = ""
    miner_address: str = ""
    fee_rate_avg: float = 0.0
    fee_rate_min: float = 0.0
    fee_rate_max: float = 0.0
    fee_rate_median: float = 0.0
    fee_rate_stddev: float = 0.0
    input_count: int = 0
    output_count: int = 0
    utxo_increase: int = 0
    utxo_size_inc: int = 0


class MinerStats(WoCModel):
    name: str = Field("", validation_alias=AliasChoices("name", "miner"))
    address: str = ""
    block_count: int = 0
    percentage: float = 0.0


class MinerFeeStats(WoCModel):
    timestamp: int = 0
    name: str = Field("", validation_alias=AliasChoices("name", "miner"))
    fee_rate: float = 0.0
    min_fee_rate: float = 0.0


class MinerSummaryStats(WoCModel):
    days: int = 0
    total_blocks: int = 0
    miners: list[MinerStats] = Field(default_factory=list)


class TagCount(WoCModel):
    """Counts of tagged outputs (e.g. protocols) in one block."""

    height: int = 0
    hash: str = ""
    tag_counts: dict[str, int] = Field(default_factory=dict)
