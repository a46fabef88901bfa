"""Address and script response models."""

from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, BeforeValidator, Field

from whatsonchain.models.base import WoCModel, unwrap_result
from whatsonchain.models.transaction import TxInfo


class AddressInfo(WoCModel):
    """Validation details for an address (``/address/<a>/info``)."""

    is_valid: bool = Field(False, alias="isvalid")
    address: str = ""
    script_pub_key: str = Field("", alias="scriptPubKey")
    is_mine: bool = Field(False, alias="ismine")
    is_watch_only: bool = Field(False, alias="iswatchonly")
    is_script: bool = Field(False, alias="isscript")
    pub_key: str = Field("", alias="pubkey")
    is_compressed: bool = Field(False, alias="iscompressed")
    account: str = ""


class AddressUsed(WoCModel):
    used: bool = False


class AddressScripts(WoCModel):
    address: str = ""
    scripts: list[str] = Field(default_factory=list)


class AddressBalance(WoCModel):
    """Confirmed and unconfirmed balance in satoshis."""

    confirmed: int = 0
    unconfirmed: int = 0

    @property
    def total(self) -> int:
        return self.confirmed + self.unconfirmed


class AddressConfirmedBalance(WoCModel):
    address: str = ""
    script: str = ""
    confirmed: int = 0
    error: str = ""


class AddressUnconfirmedBalance(WoCModel):
    address: str = ""
    script: str = ""
    unconfirmed: int = 0
    error: str = ""


class AddressBalanceRecord(WoCModel):
    """One entry of a bulk ``/addresses/balance`` response."""

    address: str = ""
    balance: AddressBalance = Field(default_factory=AddressBalance)
    error: str = ""


class HistoryRecord(WoCModel):
    """A history or UTXO entry for an address or script.

    ``tx_pos`` and ``value`` are only present on UTXO entries. ``info``
    is filled in by :meth:`~whatsonchain.Client.address_unspent_transaction_details`.
    """

    tx_hash: str = ""
    height: int = 0
    tx_pos: int = 0
    value: int = 0
    is_spent_in_mempool_tx: bool = Field(False, alias="isSpentInMempoolTx")
    info: TxInfo | None = None


class BulkRecord(WoCModel):
    """Per-address (or per-script) entry of a bulk history/UTXO response."""

    address: str = ""
    script: str = ""
    result: list[HistoryRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("result", "unspent", "history"),
    )
    error: str = ""
    next_page_token: str = Field("", alias="nextPageToken")


# List types decoded from either a bare array or a ``{"result": [...]}`` envelope
History = Annotated[list[HistoryRecord], BeforeValidator(unwrap_result)]
