"""Tests for block, tag and miner statistics endpoints."""

from __future__ import annotations

import pytest

from whatsonchain import BadRequestError, BTCChainRequiredError, StatsNotFoundError, with_chain


class TestBlockStats:
    @pytest.mark.asyncio
    async def test_by_height(self, make_client, api) -> None:
        api.add(
            "/block/height/800000/stats",
            {"height": 800000, "tx_count": 5000, "total_fees": 1234, "miner_name": "TAAL"},
        )
        client = make_client(api)
        stats = await client.get_block_stats(800000)
        assert stats.tx_count == 5000
        assert stats.miner_name == "TAAL"

    @pytest.mark.asyncio
    async def test_by_hash(self, make_client, api) -> None:
        api.add("/block/hash/abc/stats", {"hash": "abc", "size": 1000})
        client = make_client(api)
        assert (await client.get_block_stats_by_hash("abc")).size == 1000

    @pytest.mark.asyncio
    async def test_available_on_btc(self, make_client, api) -> None:
        api.add("/block/height/1/stats", {"height": 1})
        client = make_client(api, with_chain("btc"))
        assert (await client.get_block_stats(1)).height == 1

    @pytest.mark.asyncio
    async def test_not_found(self, make_client, api) -> None:
        client = make_client(api)
        with pytest.raises(StatsNotFoundError):
            await client.get_block_stats(5)

    @pytest.mark.asyncio
    async def test_tag_count(self, make_client, api) -> None:
        api.add(
            "/block/tagcount/height/700000/stats",
            {"height": 700000, "hash": "h", "tag_counts": {"bitcom": 12, "run": 3}},
        )
        client = make_client(api)
        tags = await client.get_tag_count_by_height(700000)
        assert tags.tag_counts == {"bitcom": 12, "run": 3}

    @pytest.mark.asyncio
    async def test_negative_height(self, make_client, unreachable) -> None:
        client = make_client(unreachable)
        with pytest.raises(BadRequestError):
            await client.get_tag_count_by_height(-1)


class TestMinerStats:
    @pytest.mark.asyncio
    async def test_blocks(self, make_client, api) -> None:
        api.add(
            "/miner/blocks/stats?days=7",
            [{"miner": "Foundry", "block_count": 300, "percentage": 30.5}],
        )
        client = make_client(api, with_chain("btc"))
        stats = await client.get_miner_blocks_stats(7)
        assert stats[0].name == "Foundry"
        assert stats[0].block_count == 300

    @pytest.mark.asyncio
    async def test_fees(self, make_client, api) -> None:
        api.add("/miner/fees?from=100&to=200", [{"timestamp": 150, "name": "x", "fee_rate": 2.5}])
        client = make_client(api, with_chain("btc"))
        fees = await client.get_miner_fees_stats(100, 200)
        assert fees[0].fee_rate == 2.5

    @pytest.mark.asyncio
    async def test_summary(self, make_client, api) -> None:
        api.add(
            "/miner/summary/stats?days=30",
            {"days": 30, "total_blocks": 4000, "miners": [{"name": "a", "block_count": 1}]},
        )
        client = make_client(api, with_chain("btc"))
        summary = await client.get_miner_summary_stats(30)
        assert summary.total_blocks == 4000
        assert summary.miners[0].name == "a"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("get_miner_blocks_stats", (7,)),
            ("get_miner_fees_stats", (1, 2)),
            ("get_miner_summary_stats", (30,)),
        ],
    )
    async def test_gated_to_btc(self, make_client, unreachable, method: str, args: tuple) -> None:
        client = make_client(unreachable)
        with pytest.raises(BTCChainRequiredError):
            await getattr(client, method)(*args)
        assert client.last_request.url == ""
