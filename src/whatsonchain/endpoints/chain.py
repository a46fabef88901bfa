"""Chain, network, mempool and general-purpose endpoints."""

from __future__ import annotations

from whatsonchain.base import BaseClient, encode_payload
from whatsonchain.errors.definitions import (
    ChainInfoNotFoundError,
    ChainTipsNotFoundError,
    ExchangeRateNotFoundError,
    MempoolInfoNotFoundError,
    PeerInfoNotFoundError,
)
from whatsonchain.guards import check_not_empty
from whatsonchain.models.chain import (
    ChainInfo,
    ChainTip,
    ExchangeRate,
    MempoolInfo,
    PeerInfo,
    SearchResults,
)


class ChainEndpoints(BaseClient):
    async def get_chain_info(self) -> ChainInfo:
        url = self.build_url("/chain/info")
        return await self._request_model(url, ChainInfo, ChainInfoNotFoundError)

    async def get_chain_tips(self) -> list[ChainTip]:
        url = self.build_url("/chain/tips")
        return await self._request_list(url, ChainTip, ChainTipsNotFoundError)

    async def get_peer_info(self) -> list[PeerInfo]:
        url = self.build_url("/peer/info")
        return await self._request_list(url, PeerInfo, PeerInfoNotFoundError)

    async def get_circulating_supply(self) -> float:
        """Coins in circulation. The endpoint answers with a bare number."""
        url = self.build_url("/circulatingsupply")
        body = (await self._request_text(url, ChainInfoNotFoundError)).strip()
        if not body:
            raise ChainInfoNotFoundError
        return float(body)

    async def get_exchange_rate(self) -> ExchangeRate:
        url = self.build_url("/exchangerate")
        return await self._request_model(url, ExchangeRate, ExchangeRateNotFoundError)

    async def get_mempool_info(self) -> MempoolInfo:
        url = self.build_url("/mempool/info")
        return await self._request_model(url, MempoolInfo, MempoolInfoNotFoundError)

    async def get_mempool_transactions(self) -> list[str]:
        """Txids currently in the node's mempool."""
        url = self.build_url("/mempool/raw")
        return await self._request_list(url, str, MempoolInfoNotFoundError)

    async def get_explorer_links(self, query: str) -> SearchResults:
        """Classify *query* as a block hash, txid or address and return explorer links."""
        check_not_empty("query", query)
        url = self.build_url("/search/links")
        payload = encode_payload({"query": query})
        return await self._request_model(
            url, SearchResults, ChainInfoNotFoundError, method="POST", payload=payload
        )

    async def get_health(self) -> str:
        """Plain-text liveness answer from ``/woc``."""
        url = self.build_url("/woc")
        return await self._request_text(url)
