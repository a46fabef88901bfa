"""HTTP plumbing: backoff policy, retrying and deadline transports, managed executor."""

from whatsonchain.transport.backoff import ExponentialBackoff
from whatsonchain.transport.deadline import DeadlineTransport
from whatsonchain.transport.retry import RETRYABLE_STATUS_CODES, RetryTransport

__all__ = ["RETRYABLE_STATUS_CODES", "DeadlineTransport", "ExponentialBackoff", "RetryTransport"]
