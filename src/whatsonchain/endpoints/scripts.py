"""Script hash endpoints: history, UTXOs, usage and their bulk forms."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

from whatsonchain.base import BaseClient, encode_payload
from whatsonchain.config import defaults
from whatsonchain.endpoints.addresses import merge_bulk_records
from whatsonchain.errors.definitions import MaxScriptsExceededError, ScriptNotFoundError
from whatsonchain.guards import check_bulk
from whatsonchain.models.address import BulkRecord, HistoryRecord

if TYPE_CHECKING:
    from collections.abc import Sequence


class ScriptEndpoints(BaseClient):
    """``/script`` and ``/scripts`` routes. Scripts are addressed by hash."""

    async def script_confirmed_history(self, script_hash: str) -> list[HistoryRecord]:
        url = self.build_url("/script/{}/confirmed/history", script_hash)
        return await self._request_list(url, HistoryRecord, ScriptNotFoundError)

    async def script_unconfirmed_history(self, script_hash: str) -> list[HistoryRecord]:
        url = self.build_url("/script/{}/unconfirmed/history", script_hash)
        return await self._request_list(url, HistoryRecord, ScriptNotFoundError)

    async def script_confirmed_utxos(self, script_hash: str) -> list[HistoryRecord]:
        url = self.build_url("/script/{}/confirmed/unspent", script_hash)
        return await self._request_list(url, HistoryRecord, ScriptNotFoundError)

    async def script_unconfirmed_utxos(self, script_hash: str) -> list[HistoryRecord]:
        url = self.build_url("/script/{}/unconfirmed/unspent", script_hash)
        return await self._request_list(url, HistoryRecord, ScriptNotFoundError)

    async def script_used(self, script_hash: str) -> bool:
        """Whether the script appears in any transaction (plain ``true``/``false``)."""
        url = self.build_url("/script/{}/used", script_hash)
        body = (await self._request_text(url, ScriptNotFoundError)).strip()
        if not body:
            raise ScriptNotFoundError
        return body == "true"

    async def bulk_script_confirmed_history(self, scripts: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_scripts("/scripts/confirmed/history", scripts)

    async def bulk_script_unconfirmed_history(self, scripts: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_scripts("/scripts/unconfirmed/history", scripts)

    async def bulk_script_confirmed_utxos(self, scripts: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_scripts("/scripts/confirmed/unspent", scripts)

    async def bulk_script_unconfirmed_utxos(self, scripts: Sequence[str]) -> list[BulkRecord]:
        return await self._bulk_scripts("/scripts/unconfirmed/unspent", scripts)

    # ------------------------------------------------------------------
    # Deprecated combined endpoints
    # ------------------------------------------------------------------

    async def script_history(self, script_hash: str) -> list[HistoryRecord]:
        """Deprecated: confirmed history followed by unconfirmed history."""
        warnings.warn(
            "script_history is deprecated; use script_confirmed_history "
            "and script_unconfirmed_history instead",
            DeprecationWarning,
            stacklevel=2,
        )
        confirmed = await self.script_confirmed_history(script_hash)
        unconfirmed = await self.script_unconfirmed_history(script_hash)
        return [*confirmed, *unconfirmed]

    async def script_unspent_transactions(self, script_hash: str) -> list[HistoryRecord]:
        """Deprecated: confirmed UTXOs followed by unconfirmed UTXOs."""
        warnings.warn(
            "script_unspent_transactions is deprecated; use script_confirmed_utxos "
            "and script_unconfirmed_utxos instead",
            DeprecationWarning,
            stacklevel=2,
        )
        confirmed = await self.script_confirmed_utxos(script_hash)
        unconfirmed = await self.script_unconfirmed_utxos(script_hash)
        return [*confirmed, *unconfirmed]

    async def bulk_script_unspent_transactions(self, scripts: Sequence[str]) -> list[BulkRecord]:
        """Deprecated: per-script merge of the confirmed and unconfirmed bulk UTXOs."""
        warnings.warn(
            "bulk_script_unspent_transactions is deprecated; use bulk_script_confirmed_utxos "
            "and bulk_script_unconfirmed_utxos instead",
            DeprecationWarning,
            stacklevel=2,
        )
        confirmed = await self.bulk_script_confirmed_utxos(scripts)
        unconfirmed = await self.bulk_script_unconfirmed_utxos(scripts)
        return merge_bulk_records(confirmed, unconfirmed)

    async def _bulk_scripts(self, path: str, scripts: Sequence[str]) -> list[BulkRecord]:
        check_bulk(scripts, defaults.MAX_SCRIPTS_FOR_LOOKUP, MaxScriptsExceededError, "scripts")
        url = self.build_url(path)
        payload = encode_payload({"scripts": list(scripts)})
        return await self._request_list(
            url, BulkRecord, ScriptNotFoundError, method="POST", payload=payload
        )
