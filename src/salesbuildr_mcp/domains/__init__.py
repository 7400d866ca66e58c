"""Domain registry.

The five SalesBuildr domains in the order they are advertised to callers.
"""

from __future__ import annotations

from salesbuildr_mcp.domains import companies, contacts, opportunities, products, quotes
from salesbuildr_mcp.domains.base import (
    NAMESPACE,
    Domain,
    DomainRegistry,
    ResourceHandler,
    ToolDescriptor,
)

__all__ = [
    "DOMAINS",
    "Domain",
    "DomainRegistry",
    "NAMESPACE",
    "ResourceHandler",
    "ToolDescriptor",
    "get_registry",
]


DOMAINS: tuple[Domain, ...] = (
    companies.DOMAIN,
    contacts.DOMAIN,
    products.DOMAIN,
    opportunities.DOMAIN,
    quotes.DOMAIN,
)


def get_registry() -> DomainRegistry:
    """Build the registry of built-in domains."""
    return DomainRegistry(DOMAINS)
