"""Block and header endpoints."""

from __future__ import annotations

from whatsonchain.base import BaseClient
from whatsonchain.errors.definitions import BlockNotFoundError, HeadersNotFoundError
from whatsonchain.guards import check_non_negative
from whatsonchain.models.block import BlockInfo, HeaderBytesResource


class BlockEndpoints(BaseClient):
    """``/block`` routes."""

    async def get_block_by_hash(self, block_hash: str) -> BlockInfo:
        url = self.build_url("/block/hash/{}", block_hash)
        return await self._request_model(url, BlockInfo, BlockNotFoundError)

    async def get_block_by_height(self, height: int) -> BlockInfo:
        check_non_negative("height", height)
        url = self.build_url("/block/height/{}", height)
        return await self._request_model(url, BlockInfo, BlockNotFoundError)

    async def get_block_pages(self, block_hash: str, page: int) -> list[str]:
        """Txids on one page of a block with more than 1000 transactions.

        Pages are numbered from 1; see ``BlockInfo.pages`` for the count.
        """
        check_non_negative("page", page)
        url = self.build_url("/block/hash/{}/page/{}", block_hash, page)
        return await self._request_list(url, str, BlockNotFoundError)

    async def get_header_by_hash(self, block_hash: str) -> BlockInfo:
        url = self.build_url("/block/{}/header", block_hash)
        return await self._request_model(url, BlockInfo, BlockNotFoundError)

    async def get_headers(self) -> list[BlockInfo]:
        """The latest ten block headers."""
        url = self.build_url("/block/headers")
        return await self._request_list(url, BlockInfo, HeadersNotFoundError)

    async def get_header_bytes_file_links(self) -> HeaderBytesResource:
        url = self.build_url("/block/headers/resources")
        return await self._request_model(url, HeaderBytesResource, HeadersNotFoundError)

    async def get_latest_header_bytes(self, count: int = 0) -> str:
        """Hex-encoded raw headers of the latest *count* blocks (server default when 0)."""
        check_non_negative("count", count)
        path = "/block/headers/latest"
        if count > 0:
            path += "?count={}"
            url = self.build_url(path, count)
        else:
            url = self.build_url(path)
        body = await self._request_text(url, HeadersNotFoundError)
        if not body:
            raise HeadersNotFoundError
        return body
