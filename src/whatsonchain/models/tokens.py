"""1Sat Ordinals and STAS token response models (BSV only)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from whatsonchain.models.base import WoCModel

# ---------------------------------------------------------------------------
# 1Sat Ordinals
# ---------------------------------------------------------------------------


class OneSatOrdinalToken(WoCModel):
    outpoint: str = ""
    origin: str = ""
    txid: str = ""
    vout: int = 0
    height: int = 0
    idx: int = 0
    owner: str = ""
    satoshis: int = 0
    spend: str = ""
    data: dict[str, Any] = Field(default_factory=dict)


class OneSatOrdinalContent(WoCModel):
    content_type: str = Field("", alias="contentType")
    content: str = ""


class OneSatOrdinalLatest(OneSatOrdinalToken):
    """Latest position of an ordinal that may have moved since inscription."""


class OneSatOrdinalHistory(WoCModel):
    outpoint: str = ""
    txid: str = ""
    vout: int = 0
    height: int = 0
    owner: str = ""
    spend: str = ""


class OneSatOrdinalStats(WoCModel):
    total_tokens: int = Field(0, alias="totalTokens")
    total_inscriptions: int = Field(0, alias="totalInscriptions")
    latest_height: int = Field(0, alias="latestHeight")


# ---------------------------------------------------------------------------
# STAS
# ---------------------------------------------------------------------------


class STASToken(WoCModel):
    redeem_addr: str = Field("", alias="redeemAddr")
    symbol: str = ""
    token_id: str = Field("", alias="tokenId")
    name: str = ""
    description: str = ""
    image: str = ""
    protocol_id: str = Field("", alias="protocolId")
    schema_id: str = Field("", alias="schemaId")
    decimals: int = 0
    satoshis: int = 0
    total_supply: int = Field(0, alias="totalSupply")
    contract_txs: list[str] = Field(default_factory=list, alias="contractTxs")
    issuance_txs: list[str] = Field(default_factory=list, alias="issuanceTxs")


class STASTokenUTXO(WoCModel):
    address: str = ""
    txid: str = ""
    index: int = 0
    amount: int = 0
    symbol: str = ""
    token_id: str = Field("", alias="tokenId")
    redeem_addr: str = Field("", alias="redeemAddr")


class STASTokenBalanceEntry(WoCModel):
    symbol: str = ""
    token_id: str = Field("", alias="tokenId")
    redeem_addr: str = Field("", alias="redeemAddr")
    balance: int = 0


class STASTokenBalance(WoCModel):
    address: str = ""
    tokens: list[STASTokenBalanceEntry] = Field(default_factory=list)


class STASStats(WoCModel):
    total_tokens: int = Field(0, alias="totalTokens")
    total_issued: int = Field(0, alias="totalIssued")
    total_holders: int = Field(0, alias="totalHolders")
