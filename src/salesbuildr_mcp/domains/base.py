"""Domain abstraction layer.

Defines ToolDescriptor (one exposed operation), Domain (an ordered group of
tools plus the handler that serves them) and DomainRegistry (the closed set
of domains a server exposes). Tool names are parsed into (domain, verb)
pairs once, at registration time.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterable, Sequence

from salesbuildr_mcp.client import SalesbuildrClient
from salesbuildr_mcp.envelope import ToolResult, error_result, json_result, text_result

logger = logging.getLogger(__name__)

NAMESPACE = "salesbuildr"

PAGINATION_PROPERTIES: dict[str, Any] = {
    "from": {
        "type": "number",
        "description": "Starting offset for pagination (default: 0)",
    },
    "size": {
        "type": "number",
        "description": "Number of results per page (default: 25, max: 100)",
    },
}

DomainHandler = Callable[[str, str, dict[str, Any], SalesbuildrClient], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, human-readable description and JSON-schema input contract."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    def missing_arguments(self, args: dict[str, Any]) -> list[str]:
        """Required fields absent from ``args``, including array item fields."""
        missing = [f for f in self.required if args.get(f) is None]
        properties = self.input_schema.get("properties", {})
        for name, prop in properties.items():
            if prop.get("type") != "array" or not isinstance(args.get(name), list):
                continue
            item_required = prop.get("items", {}).get("required", [])
            for i, item in enumerate(args[name]):
                if not isinstance(item, dict):
                    missing.append(f"{name}[{i}]")
                    continue
                missing.extend(
                    f"{name}[{i}].{f}" for f in item_required if item.get(f) is None
                )
        return missing

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


@dataclass(frozen=True)
class Domain:
    """One navigable group of tools, immutable for the process lifetime."""

    id: str
    label: str
    description: str
    tools: tuple[ToolDescriptor, ...]
    handler: DomainHandler
    namespace: str = NAMESPACE
    _verbs: dict[str, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tools", tuple(self.tools))
        verbs: dict[str, str] = {}
        for tool in self.tools:
            if not tool.name.startswith(self.prefix):
                raise ValueError(
                    f"Tool '{tool.name}' does not belong to domain '{self.id}' "
                    f"(expected prefix '{self.prefix}')"
                )
            verb = tool.name[len(self.prefix):]
            if not verb or tool.name in verbs:
                raise ValueError(f"Invalid or duplicate tool name '{tool.name}'")
            verbs[tool.name] = verb
        object.__setattr__(self, "_verbs", verbs)

    @property
    def prefix(self) -> str:
        return f"{self.namespace}_{self.id}_"

    @property
    def tool_names(self) -> list[str]:
        return [t.name for t in self.tools]

    def verb_for(self, tool_name: str) -> str | None:
        return self._verbs.get(tool_name)

    def tool(self, tool_name: str) -> ToolDescriptor | None:
        for t in self.tools:
            if t.name == tool_name:
                return t
        return None


class DomainRegistry:
    """Closed, ordered set of domains with a precomputed tool index."""

    def __init__(self, domains: Iterable[Domain]) -> None:
        self._domains: dict[str, Domain] = {}
        self._tools: dict[str, tuple[Domain, str]] = {}
        for domain in domains:
            if domain.id in self._domains:
                raise ValueError(f"Duplicate domain id '{domain.id}'")
            self._domains[domain.id] = domain
            for tool in domain.tools:
                if tool.name in self._tools:
                    raise ValueError(f"Duplicate tool name '{tool.name}'")
                self._tools[tool.name] = (domain, domain.verb_for(tool.name) or "")
        if not self._domains:
            raise ValueError("DomainRegistry requires at least one domain")

    def __contains__(self, domain_id: object) -> bool:
        return domain_id in self._domains

    def __iter__(self):
        return iter(self._domains.values())

    def __len__(self) -> int:
        return len(self._domains)

    @property
    def ids(self) -> list[str]:
        return list(self._domains)

    def get(self, domain_id: str) -> Domain | None:
        return self._domains.get(domain_id)

    def resolve(self, tool_name: str) -> tuple[Domain, str | None] | None:
        """Map a tool name to (domain, verb).

        Names carrying a domain prefix with an unregistered verb resolve to
        (domain, None) so the domain can report the unknown tool itself.
        """
        hit = self._tools.get(tool_name)
        if hit is not None:
            return hit
        for domain in self._domains.values():
            if tool_name.startswith(domain.prefix):
                return domain, None
        return None


# ── Generic resource handler ──


class ResourceHandler:
    """Maps list/get/create/update/delete verbs onto one upstream resource.

    Create never forwards a caller-supplied ``id``; update routes ``id``
    positionally and sends only the remaining fields as payload.
    """

    def __init__(
        self,
        resource: str,
        label: str,
        list_params: Sequence[str] = ("query", "from", "size"),
    ) -> None:
        self.resource = resource
        self.label = label
        self.list_params = tuple(list_params)

    async def __call__(
        self,
        tool_name: str,
        verb: str,
        args: dict[str, Any],
        client: SalesbuildrClient,
    ) -> ToolResult:
        method = getattr(self, f"_{verb}", None)
        if method is None:
            return error_result(f"Unknown {self.label.lower()} tool: {tool_name}")
        return await method(client.resource(self.resource), args)

    async def _list(self, api, args: dict[str, Any]) -> ToolResult:
        params = {k: args[k] for k in self.list_params if args.get(k) is not None}
        return json_result(await api.list(**params))

    async def _get(self, api, args: dict[str, Any]) -> ToolResult:
        return json_result(await api.get(str(args["id"])))

    async def _create(self, api, args: dict[str, Any]) -> ToolResult:
        data = {k: v for k, v in args.items() if k != "id"}
        return json_result(await api.create(data))

    async def _update(self, api, args: dict[str, Any]) -> ToolResult:
        data = dict(args)
        resource_id = str(data.pop("id"))
        return json_result(await api.update(resource_id, data))

    async def _delete(self, api, args: dict[str, Any]) -> ToolResult:
        resource_id = str(args["id"])
        await api.delete(resource_id)
        return text_result(f"{self.label} {resource_id} deleted successfully.")
