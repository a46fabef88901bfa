"""Exponential backoff with a capped ceiling and additive jitter."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whatsonchain.config.settings import BackoffConfig

# Jitter is drawn from the OS CSPRNG so independent processes do not
# phase-align their retries after a shared outage.
_rng = secrets.SystemRandom()


@dataclass(frozen=True)
class ExponentialBackoff:
    """Delay policy between retry attempts. All values are seconds.

    ``next_interval(attempt)`` is ``min(initial * factor**attempt, maximum)``
    plus a jitter sampled uniformly from ``[0, max_jitter)``.
    """

    initial: float
    maximum: float
    factor: float
    max_jitter: float = 0.0

    @classmethod
    def from_config(cls, config: BackoffConfig) -> ExponentialBackoff:
        return cls(
            initial=config.initial_timeout,
            maximum=config.max_timeout,
            factor=config.exponent_factor,
            max_jitter=config.max_jitter,
        )

    def next_interval(self, attempt: int) -> float:
        """Return the delay before the retry following *attempt* (0-based)."""
        attempt = max(attempt, 0)
        try:
            base = self.initial * self.factor**attempt
        except OverflowError:
            base = self.maximum
        base = max(min(base, self.maximum), 0.0)
        if self.max_jitter <= 0:
            return base
        return base + _rng.random() * self.max_jitter
