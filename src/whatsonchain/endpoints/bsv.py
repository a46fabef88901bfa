"""BSV-only endpoints: OP_RETURN data, 1Sat Ordinals and STAS tokens.

Every method here is gated with :func:`~whatsonchain.guards.bsv_only`
and raises :class:`~whatsonchain.errors.BSVChainRequiredError` on a BTC
client before any request is made.
"""

from __future__ import annotations

from whatsonchain.base import BaseClient
from whatsonchain.errors.definitions import TokenNotFoundError, TransactionNotFoundError
from whatsonchain.guards import bsv_only
from whatsonchain.models.tokens import (
    OneSatOrdinalContent,
    OneSatOrdinalHistory,
    OneSatOrdinalLatest,
    OneSatOrdinalStats,
    OneSatOrdinalToken,
    STASStats,
    STASToken,
    STASTokenBalance,
    STASTokenUTXO,
)
from whatsonchain.models.transaction import TxInfo


class BSVEndpoints(BaseClient):
    @bsv_only
    async def get_op_return_data(self, tx_hash: str) -> str:
        """OP_RETURN payloads of a transaction, as returned by the API."""
        url = self.build_url("/tx/{}/opreturn", tx_hash)
        return await self._request_text(url, TransactionNotFoundError)

    # ------------------------------------------------------------------
    # 1Sat Ordinals
    # ------------------------------------------------------------------

    @bsv_only
    async def get_one_sat_ordinal_by_origin(self, origin: str) -> OneSatOrdinalToken:
        url = self.build_url("/token/1satordinals/{}/origin", origin)
        return await self._request_model(url, OneSatOrdinalToken, TokenNotFoundError)

    @bsv_only
    async def get_one_sat_ordinal_by_outpoint(self, outpoint: str) -> OneSatOrdinalToken:
        url = self.build_url("/token/1satordinals/{}", outpoint)
        return await self._request_model(url, OneSatOrdinalToken, TokenNotFoundError)

    @bsv_only
    async def get_one_sat_ordinal_content(self, outpoint: str) -> OneSatOrdinalContent:
        url = self.build_url("/token/1satordinals/{}/content", outpoint)
        return await self._request_model(url, OneSatOrdinalContent, TokenNotFoundError)

    @bsv_only
    async def get_one_sat_ordinal_latest(self, outpoint: str) -> OneSatOrdinalLatest:
        url = self.build_url("/token/1satordinals/{}/latest", outpoint)
        return await self._request_model(url, OneSatOrdinalLatest, TokenNotFoundError)

    @bsv_only
    async def get_one_sat_ordinal_history(self, outpoint: str) -> list[OneSatOrdinalHistory]:
        url = self.build_url("/token/1satordinals/{}/history", outpoint)
        return await self._request_list(url, OneSatOrdinalHistory, TokenNotFoundError)

    @bsv_only
    async def get_one_sat_ordinals_by_txid(self, txid: str) -> list[OneSatOrdinalToken]:
        url = self.build_url("/token/1satordinals/tx/{}", txid)
        return await self._request_list(url, OneSatOrdinalToken, TokenNotFoundError)

    @bsv_only
    async def get_one_sat_ordinals_stats(self) -> OneSatOrdinalStats:
        url = self.build_url("/tokens/1satordinals")
        return await self._request_model(url, OneSatOrdinalStats, TokenNotFoundError)

    # ------------------------------------------------------------------
    # STAS
    # ------------------------------------------------------------------

    @bsv_only
    async def get_all_stas_tokens(self) -> list[STASToken]:
        url = self.build_url("/tokens")
        return await self._request_list(url, STASToken, TokenNotFoundError)

    @bsv_only
    async def get_stas_token_by_id(self, contract_id: str, symbol: str) -> STASToken:
        url = self.build_url("/token/{}/{}", contract_id, symbol)
        return await self._request_model(url, STASToken, TokenNotFoundError)

    @bsv_only
    async def get_token_utxos_for_address(self, address: str) -> list[STASTokenUTXO]:
        url = self.build_url("/address/{}/tokens/unspent", address)
        return await self._request_list(url, STASTokenUTXO, TokenNotFoundError)

    @bsv_only
    async def get_address_token_balance(self, address: str) -> STASTokenBalance:
        url = self.build_url("/address/{}/tokens", address)
        return await self._request_model(url, STASTokenBalance, TokenNotFoundError)

    @bsv_only
    async def get_token_transactions(self, contract_id: str, symbol: str) -> list[TxInfo]:
        url = self.build_url("/token/{}/{}/tx", contract_id, symbol)
        return await self._request_list(url, TxInfo, TokenNotFoundError)

    @bsv_only
    async def get_stas_stats(self) -> STASStats:
        url = self.build_url("/tokens/stas")
        return await self._request_model(url, STASStats, TokenNotFoundError)
