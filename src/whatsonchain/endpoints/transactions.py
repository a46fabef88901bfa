"""Transaction endpoints: lookup, bulk details, raw data, proofs, broadcast."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from whatsonchain.base import BaseClient, encode_payload
from whatsonchain.config import defaults
from whatsonchain.errors.definitions import (
    BroadcastFailedError,
    MaxRawTransactionsExceededError,
    MaxUTXOsExceededError,
    RequestFailedError,
    TransactionNotFoundError,
)
from whatsonchain.guards import (
    check_broadcast,
    check_bulk,
    check_non_negative,
    check_not_empty,
    check_not_empty_list,
)
from whatsonchain.models.transaction import BulkBroadcastResponse, MerkleInfo, MerkleTSCInfo, TxInfo

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class TransactionEndpoints(BaseClient):
    """``/tx`` and ``/txs`` routes."""

    async def get_tx_by_hash(self, tx_hash: str) -> TxInfo:
        url = self.build_url("/tx/hash/{}", tx_hash)
        return await self._request_model(url, TxInfo, TransactionNotFoundError)

    async def bulk_transaction_details(self, txids: Sequence[str]) -> list[TxInfo]:
        """Details for up to 20 transactions in one request."""
        check_bulk(txids, defaults.MAX_TRANSACTIONS_UTXO, MaxUTXOsExceededError, "transactions")
        url = self.build_url("/txs")
        payload = encode_payload({"txids": list(txids)})
        return await self._request_list(
            url, TxInfo, TransactionNotFoundError, method="POST", payload=payload
        )

    async def bulk_transaction_details_processor(self, txids: Sequence[str]) -> list[TxInfo]:
        """Details for any number of transactions, fetched 20 at a time."""
        check_not_empty_list(txids, "transactions")
        return await self._process_in_chunks(
            txids, defaults.MAX_TRANSACTIONS_UTXO, self.bulk_transaction_details
        )

    async def get_merkle_proof(self, tx_hash: str) -> list[MerkleInfo]:
        url = self.build_url("/tx/{}/proof", tx_hash)
        return await self._request_list(url, MerkleInfo, TransactionNotFoundError)

    async def get_merkle_proof_tsc(self, tx_hash: str) -> list[MerkleTSCInfo]:
        url = self.build_url("/tx/{}/proof/tsc", tx_hash)
        return await self._request_list(url, MerkleTSCInfo, TransactionNotFoundError)

    async def get_raw_transaction_data(self, tx_hash: str) -> str:
        """Raw transaction as hex."""
        url = self.build_url("/tx/{}/hex", tx_hash)
        return await self._request_text(url, TransactionNotFoundError)

    async def get_raw_transaction_output_data(self, tx_hash: str, vout: int) -> str:
        """One output's script as hex."""
        check_non_negative("vout", vout)
        url = self.build_url("/tx/{}/out/{}/hex", tx_hash, vout)
        return await self._request_text(url, TransactionNotFoundError)

    async def get_raw_transaction_binary(self, tx_hash: str) -> bytes:
        url = self.build_url("/tx/{}/bin", tx_hash)
        return await self._request_bytes(url, TransactionNotFoundError)

    async def bulk_raw_transaction_data(self, txids: Sequence[str]) -> list[TxInfo]:
        """Raw hex for up to 20 transactions; each entry carries ``txid`` and ``hex``."""
        check_bulk(
            txids, defaults.MAX_TRANSACTIONS_RAW, MaxRawTransactionsExceededError, "transactions"
        )
        url = self.build_url("/txs/hex")
        payload = encode_payload({"txids": list(txids)})
        return await self._request_list(
            url, TxInfo, TransactionNotFoundError, method="POST", payload=payload
        )

    async def bulk_raw_transaction_data_processor(self, txids: Sequence[str]) -> list[TxInfo]:
        check_not_empty_list(txids, "transactions")
        return await self._process_in_chunks(
            txids, defaults.MAX_TRANSACTIONS_RAW, self.bulk_raw_transaction_data
        )

    async def broadcast_tx(self, tx_hex: str) -> str:
        """Broadcast one signed transaction and return its txid.

        Raises:
            BroadcastFailedError: the node rejected the transaction; the
                error's ``body`` holds the node's message.
        """
        check_not_empty("tx_hex", tx_hex)
        url = self.build_url("/tx/raw")
        try:
            body = await self._request_text(
                url, method="POST", payload=encode_payload({"txhex": tx_hex})
            )
        except RequestFailedError as exc:
            logger.warning("Broadcast rejected with HTTP %d", exc.status_code)
            raise BroadcastFailedError(exc.body, status_code=exc.status_code) from exc
        return body.replace('"', "").strip()

    async def bulk_broadcast_tx(
        self,
        raw_txs: Sequence[str],
        feedback: bool = False,  # noqa: FBT001, FBT002
    ) -> BulkBroadcastResponse:
        """Broadcast up to 100 transactions (each under 100 KB, 10 MB in total).

        With *feedback* the response carries a status URL that can be polled
        for per-transaction results.
        """
        check_broadcast(raw_txs)
        url = self.build_url("/tx/broadcast?feedback={}", feedback)
        try:
            payload = encode_payload(list(raw_txs))
            body = await self._request_text(url, method="POST", payload=payload)
        except RequestFailedError as exc:
            raise BroadcastFailedError(exc.body, status_code=exc.status_code) from exc
        if not feedback:
            return BulkBroadcastResponse(feedback=False)
        response = BulkBroadcastResponse()
        if body:
            response = BulkBroadcastResponse.model_validate_json(body)
        return response.model_copy(update={"feedback": True})

    async def decode_transaction(self, tx_hex: str) -> TxInfo:
        check_not_empty("tx_hex", tx_hex)
        url = self.build_url("/tx/decode")
        payload = encode_payload({"txhex": tx_hex})
        return await self._request_model(
            url, TxInfo, TransactionNotFoundError, method="POST", payload=payload
        )

    async def download_receipt(self, tx_hash: str) -> bytes:
        """Transaction receipt as PDF bytes."""
        url = self.site_url("/receipt/{}", tx_hash)
        return await self._request_bytes(url, TransactionNotFoundError)
