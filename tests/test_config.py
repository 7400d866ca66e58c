"""Tests for configuration validation and normalization."""

from __future__ import annotations

import pytest

from salesbuildr_mcp.config import DEFAULT_BASE_URL, SalesbuildrConfig

_ENV_VARS = (
    "MCP_TRANSPORT",
    "MCP_HTTP_HOST",
    "MCP_HTTP_PORT",
    "AUTH_MODE",
    "SALESBUILDR_API_KEY",
    "SALESBUILDR_BASE_URL",
    "SALESBUILDR_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


def test_defaults():
    cfg = SalesbuildrConfig()
    assert cfg.transport == "stdio"
    assert cfg.auth_mode == "env"
    assert cfg.http_port == 8080
    assert cfg.base_url == DEFAULT_BASE_URL
    assert not cfg.gateway_mode


def test_values_are_normalized():
    cfg = SalesbuildrConfig(
        transport="HTTP", auth_mode="Gateway", base_url="https://x.test/", log_level="debug"
    )
    assert cfg.transport == "http"
    assert cfg.gateway_mode
    assert cfg.base_url == "https://x.test"
    assert cfg.log_level == "DEBUG"


def test_from_env(monkeypatch):
    monkeypatch.setenv("MCP_TRANSPORT", "http")
    monkeypatch.setenv("MCP_HTTP_PORT", "9090")
    monkeypatch.setenv("AUTH_MODE", "gateway")
    monkeypatch.setenv("SALESBUILDR_TIMEOUT", "5.5")
    cfg = SalesbuildrConfig.from_env()
    assert cfg.transport == "http"
    assert cfg.http_port == 9090
    assert cfg.gateway_mode
    assert cfg.request_timeout == 5.5


def test_from_env_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("MCP_HTTP_PORT", "eighty")
    assert SalesbuildrConfig.from_env().http_port == 8080


def test_from_env_reads_dotenv_file(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("SALESBUILDR_API_KEY=from-file\n")
    assert SalesbuildrConfig.from_env(env_file).api_key == "from-file"


def test_invalid_transport_raises(monkeypatch):
    monkeypatch.setenv("MCP_TRANSPORT", "websocket")
    with pytest.raises(ValueError, match="Invalid MCP_TRANSPORT"):
        SalesbuildrConfig.from_env()


def test_invalid_auth_mode_raises():
    with pytest.raises(ValueError, match="Invalid AUTH_MODE"):
        SalesbuildrConfig(auth_mode="oauth")


def test_gateway_requires_http():
    with pytest.raises(ValueError, match="requires MCP_TRANSPORT=http"):
        SalesbuildrConfig(transport="stdio", auth_mode="gateway")


def test_port_range():
    with pytest.raises(ValueError, match="MCP_HTTP_PORT"):
        SalesbuildrConfig(http_port=0)


def test_repr_masks_api_key():
    text = repr(SalesbuildrConfig(api_key="secret-123"))
    assert "secret-123" not in text
    assert "api_key='***'" in text


def test_from_env_overrides_apply_before_validation(monkeypatch):
    monkeypatch.setenv("AUTH_MODE", "gateway")
    cfg = SalesbuildrConfig.from_env(transport="http", http_port=9000, http_host=None)
    assert cfg.gateway_mode
    assert cfg.transport == "http"
    assert cfg.http_port == 9000
    assert cfg.http_host == "0.0.0.0"


def test_streamable_http_alias():
    assert SalesbuildrConfig(transport="streamable-http").transport == "http"
