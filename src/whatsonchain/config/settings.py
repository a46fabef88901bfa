"""Client options loaded from option functions, environment variables and YAML.

Options are resolved from (highest priority first):
1. Option functions passed to ``new_client`` (init kwargs)
2. Environment variables (prefix: ``WHATS_ON_CHAIN_``, nested via ``__``)
3. YAML config file (``with_config_file`` or ``WHATS_ON_CHAIN_CONFIG_PATH``)
4. Defaults from :mod:`whatsonchain.config.defaults`

Every model here is frozen: the client swaps whole snapshots instead of
mutating them in place.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from whatsonchain.config import defaults

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Enums for validated choices
# ---------------------------------------------------------------------------


class Chain(enum.StrEnum):
    """Blockchain namespace of the API."""

    BSV = "bsv"
    BTC = "btc"


class Network(enum.StrEnum):
    """Network under a chain. ``stn`` exists only for BSV."""

    MAIN = "main"
    TEST = "test"
    STN = "stn"


# ---------------------------------------------------------------------------
# Option groups
# ---------------------------------------------------------------------------


class BackoffConfig(BaseSettings):
    """Exponential backoff policy between retry attempts (seconds)."""

    model_config = SettingsConfigDict(
        env_prefix="WHATS_ON_CHAIN_BACKOFF__",
        case_sensitive=False,
        frozen=True,
    )

    initial_timeout: float = defaults.DEFAULT_BACKOFF_INITIAL_TIMEOUT
    max_timeout: float = defaults.DEFAULT_BACKOFF_MAX_TIMEOUT
    exponent_factor: float = defaults.DEFAULT_BACKOFF_EXPONENT_FACTOR
    max_jitter: float = defaults.DEFAULT_BACKOFF_MAX_JITTER


class DialerConfig(BaseSettings):
    """TCP dialer settings (seconds)."""

    model_config = SettingsConfigDict(
        env_prefix="WHATS_ON_CHAIN_DIALER__",
        case_sensitive=False,
        frozen=True,
    )

    keep_alive: float = defaults.DEFAULT_DIALER_KEEP_ALIVE
    timeout: float = defaults.DEFAULT_DIALER_TIMEOUT


class TransportConfig(BaseSettings):
    """Connection pool settings (seconds, except the connection count)."""

    model_config = SettingsConfigDict(
        env_prefix="WHATS_ON_CHAIN_TRANSPORT__",
        case_sensitive=False,
        frozen=True,
    )

    idle_timeout: float = defaults.DEFAULT_TRANSPORT_IDLE_TIMEOUT
    tls_handshake_timeout: float = defaults.DEFAULT_TRANSPORT_TLS_HANDSHAKE_TIMEOUT
    # httpx does not send "Expect: 100-continue"; the value is kept for callers
    expect_continue_timeout: float = defaults.DEFAULT_TRANSPORT_EXPECT_CONTINUE_TIMEOUT
    max_idle_connections: int = Field(default=defaults.DEFAULT_TRANSPORT_MAX_IDLE_CONNECTIONS, ge=0)


# ---------------------------------------------------------------------------
# Top-level options
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Read client option defaults from *path*.

    A missing file or a document whose top level is not a mapping yields
    no defaults; both are logged so a mistyped ``config_path`` is visible.
    """
    source = Path(path)
    if not source.is_file():
        logger.warning("WhatsOnChain config file %s not found; using defaults", source)
        return {}
    document = yaml.safe_load(source.read_text(encoding="utf-8"))
    if document is None:
        return {}
    if not isinstance(document, dict):
        logger.warning(
            "WhatsOnChain config file %s is a %s, not a mapping; ignored",
            source,
            type(document).__name__,
        )
        return {}
    # A file cannot redirect option loading to another file
    document.pop("config_path", None)
    return document


def _fill_missing(given: dict[str, Any], file_values: dict[str, Any]) -> dict[str, Any]:
    """Return *given* with gaps filled from *file_values*.

    Option groups (backoff, dialer, transport) merge field by field, so a
    file can set ``backoff.max_timeout`` while an env var sets
    ``backoff.max_jitter``. A group already given as a model is left alone.
    """
    merged = dict(given)
    for key, file_value in file_values.items():
        current = merged.get(key)
        if current is None:
            merged[key] = file_value
        elif isinstance(current, dict) and isinstance(file_value, dict):
            merged[key] = _fill_missing(current, file_value)
    return merged


class ClientOptions(BaseSettings):
    """Complete, immutable option set of a :class:`~whatsonchain.Client`.

    ``WHATS_ON_CHAIN_API_KEY`` supplies the API key when no option sets one.
    """

    model_config = SettingsConfigDict(
        env_prefix="WHATS_ON_CHAIN_",
        env_nested_delimiter="__",
        case_sensitive=False,
        frozen=True,
    )

    chain: Chain = Chain.BSV
    network: Network = Network.MAIN
    api_key: str = ""
    user_agent: str = defaults.DEFAULT_USER_AGENT
    rate_limit: int = defaults.DEFAULT_RATE_LIMIT
    request_timeout: float = defaults.DEFAULT_REQUEST_TIMEOUT  # <= 0 disables the timeout
    request_retry_count: int = defaults.DEFAULT_REQUEST_RETRY_COUNT
    config_path: str = ""

    backoff: BackoffConfig = Field(default_factory=BackoffConfig)
    dialer: DialerConfig = Field(default_factory=DialerConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        # values already holds option-function kwargs and env vars
        config_path = values.get("config_path")
        if not config_path:
            return values
        return _fill_missing(values, _load_yaml(config_path))

    @field_validator("request_retry_count")
    @classmethod
    def _clamp_retry_count(cls, value: int) -> int:
        return max(value, 0)

    @field_validator("network")
    @classmethod
    def _network_on_chain(cls, value: Network, info: ValidationInfo) -> Network:
        # chain is declared first, so it is already validated here
        if value is Network.STN and info.data.get("chain") is Chain.BTC:
            msg = "stn network is only available on the bsv chain"
            raise ValueError(msg)
        return value

    @classmethod
    def from_yaml(cls, path: str | Path, **overrides: Any) -> Self:
        """Options for a client configured from the YAML file at *path*.

        *overrides* take the place of option functions and win over both
        ``WHATS_ON_CHAIN_*`` env vars and the file, e.g.
        ``ClientOptions.from_yaml("woc.yaml", network="test")``.
        """
        return cls(**overrides, config_path=str(path))
