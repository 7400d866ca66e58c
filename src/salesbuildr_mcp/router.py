"""Request router: turns one tool invocation into one response envelope.

Dispatch order:
1. the navigate tool mutates the session into a domain,
2. the back tool returns the session to the root,
3. a registered domain tool is delegated to its domain handler,
4. anything else is reported as unknown and leaves the session untouched.

Domain dispatch does not consult the session's current domain unless the
router is built with ``enforce_navigation=True``. ``call_tool`` never raises:
every failure is converted into an error envelope.
"""

from __future__ import annotations

import logging
from typing import Any

from salesbuildr_mcp.accessor import ClientAccessor
from salesbuildr_mcp.domains import DomainRegistry, ToolDescriptor, get_registry
from salesbuildr_mcp.envelope import ToolResult, error_result, text_result
from salesbuildr_mcp.navigation import (
    BACK_TOOL_NAME,
    NAVIGATE_TOOL_NAME,
    NavigationState,
    UnknownDomainError,
)

logger = logging.getLogger(__name__)


class Router:
    """Transport-agnostic tool listing and dispatch."""

    def __init__(
        self,
        clients: ClientAccessor,
        registry: DomainRegistry | None = None,
        *,
        enforce_navigation: bool = False,
    ) -> None:
        self._clients = clients
        self._registry = registry or get_registry()
        self._enforce_navigation = enforce_navigation

    @property
    def registry(self) -> DomainRegistry:
        return self._registry

    @property
    def clients(self) -> ClientAccessor:
        return self._clients

    def new_session(self) -> NavigationState:
        """Fresh navigation state positioned at the root."""
        return NavigationState(self._registry)

    def list_tools(self, state: NavigationState) -> list[ToolDescriptor]:
        return state.visible_tools()

    async def call_tool(
        self,
        state: NavigationState,
        name: str,
        arguments: dict[str, Any] | None = None,
        *,
        clients: ClientAccessor | None = None,
    ) -> ToolResult:
        """Dispatch ``name`` for ``state`` and return an envelope.

        ``clients`` overrides the router's accessor for this call only; the
        HTTP gateway passes a request-scoped accessor here.
        """
        args = arguments or {}
        try:
            if not isinstance(args, dict):
                return error_result(
                    f"Error: arguments must be an object, got {type(args).__name__}"
                )
            if name == NAVIGATE_TOOL_NAME:
                return self._navigate(state, args)
            if name == BACK_TOOL_NAME:
                return self._back(state)
            return await self._dispatch(state, name, args, clients or self._clients)
        except Exception as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return error_result(f"Error: {exc}")

    def _navigate(self, state: NavigationState, args: dict[str, Any]) -> ToolResult:
        try:
            domain = state.navigate(args.get("domain"))
        except UnknownDomainError as exc:
            logger.warning("Rejected navigation: %s", exc)
            return error_result(f"Error: {exc}")
        logger.info("Navigated to %s", domain.id)
        return text_result(
            f"Navigated to {domain.id} domain. "
            f"Available tools: {', '.join(domain.tool_names)}"
        )

    def _back(self, state: NavigationState) -> ToolResult:
        state.back()
        return text_result(
            "Returned to domain selection. Use "
            f"{NAVIGATE_TOOL_NAME} to select a domain: {', '.join(self._registry.ids)}"
        )

    async def _dispatch(
        self,
        state: NavigationState,
        name: str,
        args: dict[str, Any],
        clients: ClientAccessor,
    ) -> ToolResult:
        resolved = self._registry.resolve(name)
        if resolved is None:
            logger.warning("Unknown tool requested: %s", name)
            return error_result(
                f"Unknown tool: {name}. Use {NAVIGATE_TOOL_NAME} to select a domain first."
            )
        domain, verb = resolved

        if self._enforce_navigation and state.current is not domain:
            return error_result(
                f"Tool {name} belongs to the {domain.id} domain. "
                f"Use {NAVIGATE_TOOL_NAME} to enter it first."
            )

        if verb is None:
            return error_result(f"Unknown {domain.label.lower()} tool: {name}")

        tool = domain.tool(name)
        missing = tool.missing_arguments(args) if tool else []
        if missing:
            return error_result(f"Error: {name} requires: {', '.join(missing)}")

        client = clients.get()
        return await domain.handler(name, verb, args, client)
