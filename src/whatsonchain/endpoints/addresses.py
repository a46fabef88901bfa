"""Address endpoints: info, balances, history, UTXOs and their bulk forms.

WhatsOnChain split its combined address endpoints into confirmed and
unconfirmed halves. The combined names survive here as deprecated
wrappers that call both halves and merge the results.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, TypeVar

from whatsonchain.base import encode_payload, model_adapter
from whatsonchain.config import defaults
from whatsonchain.endpoints.transactions import TransactionEndpoints
from whatsonchain.errors.definitions import AddressNotFoundError, MaxAddressesExceededError
from whatsonchain.guards import check_bulk, check_not_empty_list
from whatsonchain.models.address import (
    AddressBalance,
    AddressBalanceRecord,
    AddressConfirmedBalance,
    AddressInfo,
    AddressScripts,
    AddressUnconfirmedBalance,
    AddressUsed,
    BulkRecord,
    HistoryRecord,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


def _deprecated(name: str, replacement: str) -> None:
    warnings.warn(
        f"{name} is deprecated; use {replacement} instead",
        DeprecationWarning,
        stacklevel=3,
    )


def merge_bulk_records(first: list[BulkRecord], second: list[BulkRecord]) -> list[BulkRecord]:
    """Merge two per-key bulk responses, keeping the order keys first appear in."""
    merged: dict[str, BulkRecord] = {}
    for record in [*first, *second]:
        key = record.address or record.script
        existing = merged.get(key)
        if existing is None:
            merged[key] = record
            continue
        merged[key] = existing.model_copy(
            update={
                "result": [*existing.result, *record.result],
                "error": existing.error or record.error,
            }
        )
    return list(merged.values())


class AddressEndpoints(TransactionEndpoints):
    """``/address`` and ``/addresses`` routes."""

    async def address_info(self, address: str) -> AddressInfo:
        url = self.build_url("/address/{}/info", address)
        return await self._request_model(url, AddressInfo, AddressNotFoundError)

    async def address_used(self, address: str) -> AddressUsed:
        """Whether the address appears in any transaction."""
        url = self.build_url("/address/{}/used", address)
        body = (await self._request_text(url, AddressNotFoundError)).strip()
        if not body:
            raise AddressNotFoundError
        # Answered either as a bare boolean or as {"used": ...}
        if body in ("true", "false"):
            return AddressUsed(used=body == "true")
        return model_adapter(AddressUsed).validate_json(body)

    async def address_scripts(self, address: str) -> AddressScripts:
        url = self.build_url("/address/{}/scripts", address)
        return await self._request_model(url, AddressScripts, AddressNotFoundError)

    # ------------------------------------------------------------------
    # Balances
    # ------------------------------------------------------------------

    async def address_confirmed_balance(self, address: str) -> AddressConfirmedBalance:
        url = self.build_url("/address/{}/confirmed/balance", address)
        return await self._request_model(url, AddressConfirmedBalance, AddressNotFoundError)

    async def address_unconfirmed_balance(self, address: str) -> AddressUnconfirmedBalance:
        url = self.build_url("/address/{}/unconfirmed/balance", address)
        return await self._request_model(url, AddressUnconfirmedBalance, AddressNotFoundError)

    async def bulk_address_confirmed_balance(
        self, addresses: Sequence[str]
    ) -> list[AddressConfirmedBalance]:
        return await self._bulk_addresses(
            "/addresses/confirmed/balance", addresses, AddressConfirmedBalance
        )

    async def bulk_address_unconfirmed_balance(
        self, addresses: Sequence[str]
    ) -> list[AddressUnconfirmedBalance]:
        return await self._bulk_addresses(
            "/addresses/unconfirmed/balance", addresses, AddressUnconfirmedBalance
        )

    async def bulk_balance(self, addresses: Sequence[str]) -> list[AddressBalanceRecord]:
        """Confirmed and unconfirmed balance for up to 20 addresses."""
        return await self._bulk_addresses("/addresses/balance", addresses, AddressBalanceRecord)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    async def address_confirmed_history(self, address: str) -> list[HistoryRecord]:
        url = self.build_url("/address/{}/confirmed/history", address)
        return await self._request_list(url, HistoryRecord, AddressNotFoundError)

    async def address_unconfirmed_history(self, address: str) -> list[HistoryRecord]:
        url = self.build_url("/address/{}/unconfirmed/history", address)
        return await self._request_list(url, HistoryRecord, AddressNotFoundError)

    async def bulk_address_confirmed_history(self, addresses: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_addresses("/addresses/confirmed/history", addresses, BulkRecord)

    async def bulk_address_unconfirmed_history(self, addresses: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_addresses("/addresses/unconfirmed/history", addresses, BulkRecord)

    async def bulk_address_history(self, addresses: Sequence[str]) -> list[BulkRecord]:
        """Confirmed and unconfirmed history for up to 20 addresses."""
        return await self._bulk_addresses("/addresses/history/all", addresses, BulkRecord)

    # ------------------------------------------------------------------
    # UTXOs
    # ------------------------------------------------------------------

    async def address_confirmed_utxos(self, address: str) -> list[HistoryRecord]:
        url = self.build_url("/address/{}/confirmed/unspent", address)
        return await self._request_list(url, HistoryRecord, AddressNotFoundError)

    async def address_unconfirmed_utxos(self, address: str) -> list[HistoryRecord]:
        url = self.build_url("/address/{}/unconfirmed/unspent", address)
        return await self._request_list(url, HistoryRecord, AddressNotFoundError)

    async def bulk_address_confirmed_utxos(self, addresses: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_addresses("/addresses/confirmed/unspent", addresses, BulkRecord)

    async def bulk_address_unconfirmed_utxos(self, addresses: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_addresses("/addresses/unconfirmed/unspent", addresses, BulkRecord)

    async def address_unspent_transaction_details(
        self, address: str, max_transactions: int = 0
    ) -> list[HistoryRecord]:
        """UTXOs of *address* with ``info`` filled from bulk transaction details.

        A positive *max_transactions* keeps only the first that many UTXOs.
        Details are fetched 20 transactions per request.
        """
        utxos = await self._address_utxos(address)
        if max_transactions > 0:
            utxos = utxos[:max_transactions]
        if not utxos:
            return []
        txids = list(dict.fromkeys(utxo.tx_hash for utxo in utxos))
        details = await self._process_in_chunks(
            txids, defaults.MAX_TRANSACTIONS_UTXO, self.bulk_transaction_details
        )
        by_txid = {tx.txid: tx for tx in details}
        return [utxo.model_copy(update={"info": by_txid.get(utxo.tx_hash)}) for utxo in utxos]

    async def bulk_unspent_transactions_processor(
        self, addresses: Sequence[str]
    ) -> list[BulkRecord]:
        """UTXOs for any number of addresses, fetched 20 at a time."""
        check_not_empty_list(addresses, "addresses")
        return await self._process_in_chunks(
            addresses, defaults.MAX_ADDRESSES_FOR_LOOKUP, self._bulk_unspent
        )

    # ------------------------------------------------------------------
    # Statement
    # ------------------------------------------------------------------

    async def download_statement(self, address: str) -> bytes:
        """Address statement as PDF bytes."""
        url = self.site_url("/statement/{}", address)
        return await self._request_bytes(url, AddressNotFoundError)

    # ------------------------------------------------------------------
    # Deprecated combined endpoints
    # ------------------------------------------------------------------

    async def address_balance(self, address: str) -> AddressBalance:
        """Deprecated: sum of the confirmed and unconfirmed balance endpoints."""
        _deprecated(
            "address_balance", "address_confirmed_balance and address_unconfirmed_balance"
        )
        confirmed = await self.address_confirmed_balance(address)
        unconfirmed = await self.address_unconfirmed_balance(address)
        return AddressBalance(confirmed=confirmed.confirmed, unconfirmed=unconfirmed.unconfirmed)

    async def address_history(self, address: str) -> list[HistoryRecord]:
        """Deprecated: confirmed history followed by unconfirmed history."""
        _deprecated(
            "address_history", "address_confirmed_history and address_unconfirmed_history"
        )
        confirmed = await self.address_confirmed_history(address)
        unconfirmed = await self.address_unconfirmed_history(address)
        return [*confirmed, *unconfirmed]

    async def address_unspent_transactions(self, address: str) -> list[HistoryRecord]:
        """Deprecated: confirmed UTXOs followed by unconfirmed UTXOs."""
        _deprecated(
            "address_unspent_transactions",
            "address_confirmed_utxos and address_unconfirmed_utxos",
        )
        return await self._address_utxos(address)

    async def bulk_unspent_transactions(self, addresses: Sequence[str]) -> list[BulkRecord]:
        """Deprecated: per-address merge of the confirmed and unconfirmed bulk UTXOs."""
        _deprecated(
            "bulk_unspent_transactions",
            "bulk_address_confirmed_utxos and bulk_address_unconfirmed_utxos",
        )
        return await self._bulk_unspent(addresses)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _bulk_addresses(self, path: str, addresses: Sequence[str], item: type[T]) -> list[T]:
        check_bulk(
            addresses, defaults.MAX_ADDRESSES_FOR_LOOKUP, MaxAddressesExceededError, "addresses"
        )
        url = self.build_url(path)
        payload = encode_payload({"addresses": list(addresses)})
        return await self._request_list(
            url, item, AddressNotFoundError, method="POST", payload=payload
        )

    async def _address_utxos(self, address: str) -> list[HistoryRecord]:
        confirmed = await self.address_confirmed_utxos(address)
        unconfirmed = await self.address_unconfirmed_utxos(address)
        return [*confirmed, *unconfirmed]

    async def _bulk_unspent(self, addresses: Sequence[str]) -> list[BulkRecord]:
        confirmed = await self.bulk_address_confirmed_utxos(addresses)
        unconfirmed = await self.bulk_address_unconfirmed_utxos(addresses)
        return merge_bulk_records(confirmed, unconfirmed)
