"""Shared base for WhatsOnChain response models and the envelope unwrapper."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class WoCModel(BaseModel):
    """Lenient response model.

    Every field has a default, so a partial (or ``null``) response still
    yields an instance. Fields the API adds later are kept as extras.
    """

    model_config = {"populate_by_name": True, "extra": "allow"}


def unwrap_result(value: Any) -> Any:
    """Accept a bare JSON array, ``null``, or an envelope carrying ``result``.

    The split confirmed/unconfirmed endpoints answer with
    ``{"address": ..., "result": [...], "error": "", "nextPageToken": ...}``
    where older endpoints answered with the array itself.
    """
    if value is None:
        return []
    if isinstance(value, dict) and "result" in value:
        return value["result"] or []
    return value
