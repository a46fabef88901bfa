"""WoCError: base exception class for all py-whatsonchain errors."""

from __future__ import annotations


class WoCError(Exception):
    """Base error for all WhatsOnChain client operations.

    Subclasses are the stable error kinds callers test against with
    ``except`` or ``isinstance``; their class attributes supply the defaults.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status code the error corresponds to.
        code: Machine-readable error code string.
    """

    default_message = "whatsonchain error"
    default_status_code = 500
    default_code = "woc-error"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.status_code = self.default_status_code if status_code is None else status_code
        self.code = code or self.default_code
        super().__init__(self.message)
