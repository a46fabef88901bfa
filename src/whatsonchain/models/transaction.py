"""Transaction response models: details, merkle proofs, bulk broadcast."""

from __future__ import annotations

from pydantic import Field

from whatsonchain.models.base import WoCModel


class ScriptSig(WoCModel):
    asm: str = ""
    hex: str = ""


class ScriptPubKey(WoCModel):
    asm: str = ""
    hex: str = ""
    req_sigs: int = Field(0, alias="reqSigs")
    type: str = ""
    addresses: list[str] = Field(default_factory=list)
    op_return: dict | None = Field(None, alias="opReturn")
    is_truncated: bool = Field(False, alias="isTruncated")


class VinInfo(WoCModel):
    """Transaction input."""

    coinbase: str = ""
    txid: str = ""
    vout: int = 0
    script_sig: ScriptSig = Field(default_factory=ScriptSig, alias="scriptSig")
    sequence: int = 0


class VoutInfo(WoCModel):
    """Transaction output. ``value`` is in coins, not satoshis."""

    value: float = 0.0
    n: int = 0
    script_pub_key: ScriptPubKey = Field(default_factory=ScriptPubKey, alias="scriptPubKey")


class TxInfo(WoCModel):
    """Transaction details from ``/tx/hash/<txid>``, ``/txs`` and ``/tx/decode``.

    Bulk lookups set ``error`` on entries the node could not resolve.
    """

    txid: str = ""
    hash: str = ""
    hex: str = ""
    version: int = 0
    size: int = 0
    locktime: int = 0
    vin: list[VinInfo] = Field(default_factory=list)
    vout: list[VoutInfo] = Field(default_factory=list)
    block_hash: str = Field("", alias="blockhash")
    block_height: int = Field(0, alias="blockheight")
    confirmations: int = 0
    time: int = 0
    block_time: int = Field(0, alias="blocktime")
    error: str = ""


class MerkleBranch(WoCModel):
    hash: str = ""
    pos: str = ""


class MerkleInfo(WoCModel):
    """Merkle branch of a confirmed transaction."""

    block_hash: str = Field("", alias="blockHash")
    branches: list[MerkleBranch] = Field(default_factory=list)
    hash: str = ""
    merkle_root: str = Field("", alias="merkleRoot")


class MerkleTSCInfo(WoCModel):
    """Merkle proof in TSC (Technical Standards Committee) format."""

    index: int = 0
    tx_or_id: str = Field("", alias="txOrId")
    target: str = ""
    nodes: list[str] = Field(default_factory=list)


class BulkBroadcastResponse(WoCModel):
    """Result of ``/tx/broadcast``. Only populated when feedback was requested."""

    feedback: bool = False
    status_url: str = Field("", alias="statusUrl")
