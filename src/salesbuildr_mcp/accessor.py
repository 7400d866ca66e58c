"""Owned, injectable handle to the upstream SalesBuildr client.

The accessor builds the client lazily and memoises it. Credentials can be
swapped with ``rebind()``, which drops the memoised client only when the key
actually changes. Gateway (multi-tenant) deployments never rebind the shared
accessor; they call ``scoped()`` once per HTTP request instead, so two
tenants' requests can never observe each other's client.
"""

from __future__ import annotations

import logging
from typing import Callable

from salesbuildr_mcp.client import SalesbuildrClient
from salesbuildr_mcp.config import SalesbuildrConfig

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., SalesbuildrClient]


class MissingCredentialsError(RuntimeError):
    """No API key is available for the current request."""


class ClientAccessor:
    """Lazily creates and memoises a SalesbuildrClient."""

    def __init__(
        self,
        config: SalesbuildrConfig,
        factory: ClientFactory = SalesbuildrClient,
        *,
        api_key: str | None = None,
    ) -> None:
        self._config = config
        self._factory = factory
        self._api_key = config.api_key if api_key is None else api_key
        self._client: SalesbuildrClient | None = None

    @property
    def api_key(self) -> str:
        return self._api_key

    def get(self) -> SalesbuildrClient:
        """Return the memoised client, building it on first use."""
        if self._client is None:
            if not self._api_key:
                if self._config.gateway_mode:
                    raise MissingCredentialsError(
                        "X-Salesbuildr-API-Key header is required in gateway mode."
                    )
                raise MissingCredentialsError(
                    "SALESBUILDR_API_KEY environment variable is required. "
                    "Set it to your SalesBuildr API key from your account settings."
                )
            self._client = self._factory(
                api_key=self._api_key,
                base_url=self._config.base_url,
                timeout=self._config.request_timeout,
            )
            logger.debug("Built SalesBuildr client for %s", self._config.base_url)
        return self._client

    def rebind(self, api_key: str) -> None:
        """Switch credentials, invalidating the client if the key changed."""
        if api_key != self._api_key:
            self._api_key = api_key
            self.invalidate()

    def invalidate(self) -> None:
        """Drop the memoised client so the next get() rebuilds it."""
        self._client = None

    def scoped(self, api_key: str) -> ClientAccessor:
        """New accessor bound to ``api_key`` with its own client."""
        return ClientAccessor(self._config, self._factory, api_key=api_key)
