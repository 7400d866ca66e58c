"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from salesbuildr_mcp.accessor import ClientAccessor
from salesbuildr_mcp.client import RESOURCES
from salesbuildr_mcp.config import SalesbuildrConfig
from salesbuildr_mcp.router import Router


class FakeResource:
    """Records every upstream call and returns canned results."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls: list[tuple[Any, ...]] = []
        self.error: Exception | None = None

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    async def list(self, **params: Any) -> dict[str, Any]:
        self._record("list", params)
        return {"data": [], "total": 0, "from": params.get("from", 0), "size": 25}

    async def get(self, id: str) -> dict[str, Any]:
        self._record("get", id)
        return {"id": id}

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        self._record("create", data)
        return {"id": "new-1", **data}

    async def update(self, id: str, data: dict[str, Any]) -> dict[str, Any]:
        self._record("update", id, data)
        return {"id": id, **data}

    async def delete(self, id: str) -> None:
        self._record("delete", id)


class FakeClient:
    """Stand-in for SalesbuildrClient with one FakeResource per resource."""

    def __init__(self, api_key: str = "test-key", **_: Any) -> None:
        self.api_key = api_key
        for name in RESOURCES:
            setattr(self, name, FakeResource(name))

    def resource(self, name: str) -> FakeResource:
        return getattr(self, name)


@pytest.fixture
def config():
    return SalesbuildrConfig(api_key="test-key")


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def accessor(config, fake_client):
    return ClientAccessor(config, factory=lambda **kwargs: fake_client)


@pytest.fixture
def router(accessor):
    return Router(accessor)


@pytest.fixture
def state(router):
    """Fresh session positioned at the root."""
    return router.new_session()


@pytest.fixture
def fake_client_cls():
    return FakeClient
