"""Tests for ClientOptions: defaults, environment variables and YAML files."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from whatsonchain import (
    new_client,
    with_api_key,
    with_config_file,
    with_rate_limit,
)
from whatsonchain.config.settings import (
    BackoffConfig,
    Chain,
    ClientOptions,
    DialerConfig,
    Network,
    TransportConfig,
    _load_yaml,
)

if TYPE_CHECKING:
    from pathlib import Path

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_client_options_defaults(self) -> None:
        opts = ClientOptions()
        assert opts.chain is Chain.BSV
        assert opts.network is Network.MAIN
        assert opts.api_key == ""
        assert opts.user_agent == "py-whatsonchain: v0.1.0"
        assert opts.rate_limit == 3
        assert opts.request_timeout == 30.0
        assert opts.request_retry_count == 2
        assert opts.config_path == ""

    def test_backoff_defaults(self) -> None:
        cfg = BackoffConfig()
        assert cfg.initial_timeout == 0.002
        assert cfg.max_timeout == 0.010
        assert cfg.exponent_factor == 2.0
        assert cfg.max_jitter == 0.002

    def test_dialer_defaults(self) -> None:
        cfg = DialerConfig()
        assert cfg.keep_alive == 20.0
        assert cfg.timeout == 5.0

    def test_transport_defaults(self) -> None:
        cfg = TransportConfig()
        assert cfg.idle_timeout == 20.0
        assert cfg.tls_handshake_timeout == 5.0
        assert cfg.expect_continue_timeout == 3.0
        assert cfg.max_idle_connections == 10

    def test_frozen(self) -> None:
        opts = ClientOptions()
        with pytest.raises(ValidationError):
            opts.rate_limit = 99  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_retry_count_clamped(self) -> None:
        assert ClientOptions(request_retry_count=-7).request_retry_count == 0

    def test_unknown_chain(self) -> None:
        with pytest.raises(ValidationError):
            ClientOptions(chain="eth")

    def test_stn_requires_bsv(self) -> None:
        with pytest.raises(ValidationError, match="stn network is only available"):
            ClientOptions(chain="btc", network="stn")

    def test_negative_idle_connections(self) -> None:
        with pytest.raises(ValidationError):
            TransportConfig(max_idle_connections=-1)


# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------


class TestEnvironment:
    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_API_KEY", "env-key")
        assert new_client().api_key == "env-key"

    def test_explicit_api_key_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_API_KEY", "env-key")
        assert new_client(with_api_key("explicit")).api_key == "explicit"

    def test_empty_api_key_falls_back_to_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_API_KEY", "env-key")
        assert new_client(with_api_key("")).api_key == "env-key"

    def test_core_options_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_CHAIN", "btc")
        monkeypatch.setenv("WHATS_ON_CHAIN_NETWORK", "test")
        monkeypatch.setenv("WHATS_ON_CHAIN_REQUEST_RETRY_COUNT", "4")
        opts = ClientOptions()
        assert opts.chain is Chain.BTC
        assert opts.network is Network.TEST
        assert opts.request_retry_count == 4

    def test_nested_group_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_BACKOFF__MAX_TIMEOUT", "1.5")
        monkeypatch.setenv("WHATS_ON_CHAIN_TRANSPORT__MAX_IDLE_CONNECTIONS", "42")
        opts = ClientOptions()
        assert opts.backoff.max_timeout == 1.5
        assert opts.transport.max_idle_connections == 42

    def test_option_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_RATE_LIMIT", "9")
        assert new_client(with_rate_limit(1)).rate_limit == 1


# ---------------------------------------------------------------------------
# YAML
# ---------------------------------------------------------------------------


def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "woc.yaml"
    path.write_text(
        textwrap.dedent("""\
            chain: btc
            network: test
            rate_limit: 7
            api_key: yaml-key
            backoff:
              max_timeout: 2.0
              max_jitter: 0.0
        """),
        encoding="utf-8",
    )
    return path


class TestYAML:
    def test_load_yaml_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "missing.yaml") == {}

    def test_load_yaml_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert _load_yaml(path) == {}

    def test_from_yaml(self, tmp_path: Path) -> None:
        opts = ClientOptions.from_yaml(_write_config(tmp_path))
        assert opts.chain is Chain.BTC
        assert opts.network is Network.TEST
        assert opts.rate_limit == 7
        assert opts.api_key == "yaml-key"
        assert opts.backoff.max_timeout == 2.0
        assert opts.backoff.initial_timeout == 0.002

    def test_config_file_option(self, tmp_path: Path) -> None:
        client = new_client(with_config_file(_write_config(tmp_path)))
        assert client.chain is Chain.BTC
        assert client.rate_limit == 7

    def test_option_beats_yaml(self, tmp_path: Path) -> None:
        client = new_client(with_config_file(_write_config(tmp_path)), with_rate_limit(2))
        assert client.rate_limit == 2

    def test_env_beats_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_RATE_LIMIT", "11")
        client = new_client(with_config_file(_write_config(tmp_path)))
        assert client.rate_limit == 11
        assert client.network is Network.TEST

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        client = new_client(with_config_file(tmp_path / "nope.yaml"))
        assert client.chain is Chain.BSV
        assert client.rate_limit == 3

    def test_missing_file_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="whatsonchain.config.settings"):
            assert _load_yaml(tmp_path / "typo.yaml") == {}
        assert "typo.yaml not found" in caplog.text

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert _load_yaml(path) == {}

    def test_file_cannot_chain_to_another_file(self, tmp_path: Path) -> None:
        other = _write_config(tmp_path)
        path = tmp_path / "outer.yaml"
        path.write_text(f"config_path: {other}\nrate_limit: 4\n", encoding="utf-8")
        opts = ClientOptions.from_yaml(path)
        assert opts.config_path == str(path)
        assert opts.rate_limit == 4
        assert opts.chain is Chain.BSV

    def test_from_yaml_overrides(self, tmp_path: Path) -> None:
        opts = ClientOptions.from_yaml(_write_config(tmp_path), network="main", rate_limit=1)
        assert opts.chain is Chain.BTC
        assert opts.network is Network.MAIN
        assert opts.rate_limit == 1

    def test_group_merged_with_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WHATS_ON_CHAIN_BACKOFF__MAX_JITTER", "0.25")
        opts = ClientOptions.from_yaml(_write_config(tmp_path))
        assert opts.backoff.max_jitter == 0.25
        assert opts.backoff.max_timeout == 2.0
