"""Decision-tree navigation state.

Each session is either at the root, where only the navigate tool is visible,
or inside exactly one registered domain, where the back tool and that
domain's tools are visible. The active domain is always a ``Domain`` object
taken from the registry, never a raw string.
"""

from __future__ import annotations

import logging

from salesbuildr_mcp.domains import NAMESPACE, Domain, DomainRegistry, ToolDescriptor

logger = logging.getLogger(__name__)

NAVIGATE_TOOL_NAME = f"{NAMESPACE}_navigate"
BACK_TOOL_NAME = f"{NAMESPACE}_back"


class UnknownDomainError(ValueError):
    """Navigation requested a domain that is not registered."""

    def __init__(self, domain: object, valid: list[str]) -> None:
        super().__init__(
            f"Unknown domain '{domain}'. Valid domains: {', '.join(valid)}"
        )
        self.domain = domain


def build_navigate_tool(registry: DomainRegistry) -> ToolDescriptor:
    """Navigation tool whose input enumerates the registered domains."""
    listing = "\n".join(f"- {d.id}: {d.description}" for d in registry)
    return ToolDescriptor(
        name=NAVIGATE_TOOL_NAME,
        description=(
            "Navigate to a specific domain in SalesBuildr. Call this first to select "
            "which area you want to work with. After navigation, domain-specific tools "
            "will be available."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "domain": {
                    "type": "string",
                    "enum": registry.ids,
                    "description": f"The domain to navigate to:\n{listing}",
                },
            },
            "required": ["domain"],
        },
    )


BACK_TOOL = ToolDescriptor(
    name=BACK_TOOL_NAME,
    description=(
        "Return to domain selection. Use this to switch to a different area of SalesBuildr."
    ),
    input_schema={"type": "object", "properties": {}},
)


class NavigationState:
    """Per-session navigation state: the root or one active domain."""

    def __init__(self, registry: DomainRegistry) -> None:
        self._registry = registry
        self._navigate_tool = build_navigate_tool(registry)
        self._current: Domain | None = None

    @property
    def registry(self) -> DomainRegistry:
        return self._registry

    @property
    def current(self) -> Domain | None:
        return self._current

    @property
    def at_root(self) -> bool:
        return self._current is None

    @property
    def navigate_tool(self) -> ToolDescriptor:
        return self._navigate_tool

    def navigate(self, domain_id: str) -> Domain:
        """Enter ``domain_id``, replacing any active domain.

        Raises UnknownDomainError without changing state if the domain is not
        registered.
        """
        try:
            domain = self._registry.get(domain_id)
        except TypeError:
            domain = None
        if domain is None:
            raise UnknownDomainError(domain_id, self._registry.ids)
        self._current = domain
        return domain

    def back(self) -> None:
        """Return to the root. A no-op when already there."""
        self._current = None

    def visible_tools(self) -> list[ToolDescriptor]:
        """Tools advertised for the current state, in display order."""
        if self._current is None:
            return [self._navigate_tool]
        return [BACK_TOOL, *self._current.tools]

    def __repr__(self) -> str:
        where = self._current.id if self._current else "root"
        return f"NavigationState({where})"
