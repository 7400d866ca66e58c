"""Async HTTP client for the SalesBuildr public API.

One ``ResourceClient`` per resource, each exposing the CRUD calls the MCP
domains use. Every call opens a short-lived ``httpx.AsyncClient`` so a
client instance holds no connection state and is safe to discard whenever
credentials change.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from salesbuildr_mcp.config import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

RESOURCES = ("companies", "contacts", "products", "opportunities", "quotes")

_MAX_ERROR_BODY = 500


class SalesbuildrAPIError(Exception):
    """Raised when the upstream API fails or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _describe_status(status: int, body: str) -> str:
    if status == 401:
        return "SalesBuildr authentication failed (401). Check your API key."
    if status == 403:
        return "SalesBuildr denied access (403). Check the API key's permissions."
    if status == 404:
        return "SalesBuildr resource not found (404). Check the ID is correct."
    if status == 429:
        return "SalesBuildr rate limit exceeded (429). Wait a moment and retry."
    return f"SalesBuildr API returned {status}: {body[:_MAX_ERROR_BODY]}"


class ResourceClient:
    """CRUD calls for a single SalesBuildr resource (e.g. ``/companies``)."""

    def __init__(self, client: SalesbuildrClient, resource: str) -> None:
        self._client = client
        self.resource = resource

    async def list(self, **params: Any) -> Any:
        query = {k: v for k, v in params.items() if v is not None}
        return await self._client.request("GET", f"/{self.resource}", params=query)

    async def get(self, id: str) -> Any:
        return await self._client.request("GET", f"/{self.resource}/{id}")

    async def create(self, data: dict[str, Any]) -> Any:
        return await self._client.request("POST", f"/{self.resource}", json=data)

    async def update(self, id: str, data: dict[str, Any]) -> Any:
        return await self._client.request("PATCH", f"/{self.resource}/{id}", json=data)

    async def delete(self, id: str) -> None:
        await self._client.request("DELETE", f"/{self.resource}/{id}")


class SalesbuildrClient:
    """Typed entry point to the SalesBuildr API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("SalesbuildrClient requires an API key")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

        self.companies = ResourceClient(self, "companies")
        self.contacts = ResourceClient(self, "contacts")
        self.products = ResourceClient(self, "products")
        self.opportunities = ResourceClient(self, "opportunities")
        self.quotes = ResourceClient(self, "quotes")

    def resource(self, name: str) -> ResourceClient:
        """Look up a resource client by name."""
        if name not in RESOURCES:
            raise KeyError(f"Unknown SalesBuildr resource: {name}")
        return getattr(self, name)

    def _headers(self) -> dict[str, str]:
        return {
            "api-key": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Perform one authenticated request and decode the JSON body."""
        logger.debug("SalesBuildr %s %s", method, path)
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as http:
                response = await http.request(
                    method,
                    path,
                    headers=self._headers(),
                    params=params or None,
                    json=json,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise SalesbuildrAPIError(
                _describe_status(status, exc.response.text), status_code=status
            ) from exc
        except httpx.TimeoutException as exc:
            raise SalesbuildrAPIError(
                f"SalesBuildr request timed out after {self._timeout}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise SalesbuildrAPIError(f"SalesBuildr request failed: {exc}") from exc

        if not response.content:
            return None
        return response.json()
