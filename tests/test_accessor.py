"""Tests for the upstream client accessor."""

from __future__ import annotations

import pytest

from salesbuildr_mcp.accessor import ClientAccessor, MissingCredentialsError
from salesbuildr_mcp.client import SalesbuildrClient
from salesbuildr_mcp.config import SalesbuildrConfig


class _CountingFactory:
    def __init__(self, cls):
        self.cls = cls
        self.built: list[str] = []

    def __call__(self, **kwargs):
        self.built.append(kwargs["api_key"])
        return self.cls(**kwargs)


@pytest.fixture
def factory(fake_client_cls):
    return _CountingFactory(fake_client_cls)


def test_client_is_memoized(config, factory):
    acc = ClientAccessor(config, factory)
    assert factory.built == []
    assert acc.get() is acc.get()
    assert factory.built == ["test-key"]


def test_rebind_same_key_keeps_client(config, factory):
    acc = ClientAccessor(config, factory)
    first = acc.get()
    acc.rebind("test-key")
    assert acc.get() is first


def test_rebind_new_key_rebuilds(config, factory):
    acc = ClientAccessor(config, factory)
    first = acc.get()
    acc.rebind("rotated")
    second = acc.get()
    assert second is not first
    assert second.api_key == "rotated"
    assert factory.built == ["test-key", "rotated"]


def test_invalidate_forces_rebuild(config, factory):
    acc = ClientAccessor(config, factory)
    acc.get()
    acc.invalidate()
    acc.get()
    assert factory.built == ["test-key", "test-key"]


def test_scoped_accessors_are_isolated(config, factory):
    shared = ClientAccessor(config, factory)
    tenant_a = shared.scoped("key-a")
    tenant_b = shared.scoped("key-b")
    assert tenant_a.get().api_key == "key-a"
    assert tenant_b.get().api_key == "key-b"
    assert shared.api_key == "test-key"
    assert factory.built == ["key-a", "key-b"]


def test_missing_env_key():
    acc = ClientAccessor(SalesbuildrConfig(api_key=""))
    with pytest.raises(MissingCredentialsError, match="SALESBUILDR_API_KEY"):
        acc.get()


def test_missing_gateway_header():
    cfg = SalesbuildrConfig(transport="http", auth_mode="gateway")
    acc = ClientAccessor(cfg).scoped("")
    with pytest.raises(MissingCredentialsError, match="X-Salesbuildr-API-Key"):
        acc.get()


def test_default_factory_builds_real_client():
    cfg = SalesbuildrConfig(api_key="k", base_url="https://example.test/api/")
    client = ClientAccessor(cfg).get()
    assert isinstance(client, SalesbuildrClient)
