"""Block, tag and miner statistics.

Block and tag statistics exist on both chains. The miner statistics
routes are only served for BTC and are gated accordingly.
"""

from __future__ import annotations

from whatsonchain.base import BaseClient
from whatsonchain.errors.definitions import StatsNotFoundError
from whatsonchain.guards import btc_only, check_non_negative
from whatsonchain.models.stats import (
    BlockStats,
    MinerFeeStats,
    MinerStats,
    MinerSummaryStats,
    TagCount,
)


class StatsEndpoints(BaseClient):
    async def get_block_stats(self, height: int) -> BlockStats:
        check_non_negative("height", height)
        url = self.build_url("/block/height/{}/stats", height)
        return await self._request_model(url, BlockStats, StatsNotFoundError)

    async def get_block_stats_by_hash(self, block_hash: str) -> BlockStats:
        url = self.build_url("/block/hash/{}/stats", block_hash)
        return await self._request_model(url, BlockStats, StatsNotFoundError)

    async def get_tag_count_by_height(self, height: int) -> TagCount:
        check_non_negative("height", height)
        url = self.build_url("/block/tagcount/height/{}/stats", height)
        return await self._request_model(url, TagCount, StatsNotFoundError)

    # ------------------------------------------------------------------
    # Miner statistics (BTC)
    # ------------------------------------------------------------------

    @btc_only
    async def get_miner_blocks_stats(self, days: int) -> list[MinerStats]:
        """Blocks mined per miner over the last *days* days."""
        check_non_negative("days", days)
        url = self.build_url("/miner/blocks/stats?days={}", days)
        return await self._request_list(url, MinerStats, StatsNotFoundError)

    @btc_only
    async def get_miner_fees_stats(self, from_ts: int, to_ts: int) -> list[MinerFeeStats]:
        """Miner fee rates between two unix timestamps."""
        check_non_negative("from_ts", from_ts)
        check_non_negative("to_ts", to_ts)
        url = self.build_url("/miner/fees?from={}&to={}", from_ts, to_ts)
        return await self._request_list(url, MinerFeeStats, StatsNotFoundError)

    @btc_only
    async def get_miner_summary_stats(self, days: int) -> MinerSummaryStats:
        check_non_negative("days", days)
        url = self.build_url("/miner/summary/stats?days={}", days)
        return await self._request_model(url, MinerSummaryStats, StatsNotFoundError)
