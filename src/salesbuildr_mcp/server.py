#!/usr/bin/env python3
"""SalesBuildr MCP server.

Exposes the SalesBuildr API as MCP tools behind a two-level decision tree:
callers see only the navigate tool until they enter a domain.

Usage:
    salesbuildr-mcp                                   # stdio (default)
    salesbuildr-mcp --transport http --port 8080      # streamable HTTP
    python -m salesbuildr_mcp.server                  # module mode

Environment:
    MCP_TRANSPORT           stdio (default) | http
    MCP_HTTP_HOST           HTTP bind address (default: 0.0.0.0)
    MCP_HTTP_PORT           HTTP port (default: 8080)
    AUTH_MODE               env (default) | gateway
    SALESBUILDR_API_KEY     API key used in env mode
    See config.py for full list.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import weakref
from datetime import datetime, timezone
from typing import Any

import anyio
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from salesbuildr_mcp import __version__
from salesbuildr_mcp.accessor import ClientAccessor
from salesbuildr_mcp.config import SalesbuildrConfig
from salesbuildr_mcp.domains import ToolDescriptor
from salesbuildr_mcp.navigation import NavigationState
from salesbuildr_mcp.router import Router

logger = logging.getLogger(__name__)

SERVER_NAME = "salesbuildr-mcp"
GATEWAY_HEADER = "x-salesbuildr-api-key"


class SessionRegistry:
    """One NavigationState per live MCP session, dropped with the session."""

    def __init__(self, router: Router) -> None:
        self._router = router
        self._states: weakref.WeakKeyDictionary[Any, NavigationState] = (
            weakref.WeakKeyDictionary()
        )

    def for_session(self, session: Any) -> NavigationState:
        state = self._states.get(session)
        if state is None:
            state = self._router.new_session()
            self._states[session] = state
        return state

    def __len__(self) -> int:
        return len(self._states)


def _request_header(ctx: Any, name: str) -> str:
    """Header value from the HTTP request behind ``ctx``, or empty string."""
    request = getattr(ctx, "request", None)
    headers = getattr(request, "headers", None)
    if headers is None:
        return ""
    return headers.get(name, "") or ""


def _to_mcp_tool(tool: ToolDescriptor) -> types.Tool:
    return types.Tool.model_validate(tool.to_dict())


def build_server(
    router: Router,
    config: SalesbuildrConfig,
    sessions: SessionRegistry | None = None,
) -> Server:
    """Bind ``router`` to a low-level MCP server.

    The tool list is recomputed for the calling session on every request,
    so the visible set follows that session's navigation state.
    """
    server: Server = Server(SERVER_NAME, version=__version__)
    registry = sessions or SessionRegistry(router)

    def _state() -> NavigationState:
        return registry.for_session(server.request_context.session)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [_to_mcp_tool(t) for t in router.list_tools(_state())]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        ctx = server.request_context
        clients = None
        if config.gateway_mode:
            # Credentials are bound per request and never stored on the router.
            clients = router.clients.scoped(_request_header(ctx, GATEWAY_HEADER))

        result = await router.call_tool(
            registry.for_session(ctx.session),
            req.params.name,
            req.params.arguments,
            clients=clients,
        )
        return types.ServerResult(
            types.CallToolResult(
                content=[
                    types.TextContent(type="text", text=block.text)
                    for block in result.content
                ],
                # mcp 1.x CallToolResult always serialises isError; success sends false.
                isError=bool(result.is_error),
            )
        )

    # Registered directly so the router, not the SDK, owns argument validation
    # and error formatting.
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


class _GatewayAuthMiddleware:
    """ASGI middleware that rejects /mcp requests without an API key header."""

    def __init__(self, app, header: str = GATEWAY_HEADER) -> None:
        self.app = app
        self.header = header.encode()

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope.get("path", "").rstrip("/") == "/mcp":
            headers = dict(scope.get("headers", []))
            if not headers.get(self.header, b"").strip():
                logger.error("Gateway mode: Missing %s header", self.header.decode())
                resp = JSONResponse(
                    {
                        "error": "Missing credentials",
                        "message": "Gateway mode requires X-Salesbuildr-API-Key header",
                        "required": ["X-Salesbuildr-API-Key"],
                    },
                    status_code=401,
                )
                await resp(scope, receive, send)
                return
        await self.app(scope, receive, send)


class _MCPEndpoint:
    """ASGI endpoint forwarding /mcp traffic to the session manager."""

    def __init__(self, manager: StreamableHTTPSessionManager) -> None:
        self.manager = manager

    async def __call__(self, scope, receive, send):
        await self.manager.handle_request(scope, receive, send)


def build_http_app(server: Server, config: SalesbuildrConfig):
    """Starlette app serving /mcp and /health, wrapped for gateway auth."""
    manager = StreamableHTTPSessionManager(app=server, json_response=True)

    async def health(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "ok",
                "transport": "http",
                "authMode": config.auth_mode,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    async def not_found(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            {"error": "Not found", "endpoints": ["/mcp", "/health"]},
            status_code=404,
        )

    @contextlib.asynccontextmanager
    async def lifespan(app):
        async with manager.run():
            yield

    app = Starlette(
        routes=[
            Route("/health", health, methods=["GET"]),
            Route("/mcp", endpoint=_MCPEndpoint(manager)),
        ],
        exception_handlers={404: not_found},
        lifespan=lifespan,
    )
    if config.gateway_mode:
        return _GatewayAuthMiddleware(app)
    return app


async def run_stdio(server: Server) -> None:
    """Serve a single implicit session over stdin/stdout."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("SalesBuildr MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def _parse_args(args: list[str]) -> dict[str, Any]:
    """Map --transport/--host/--port flags onto config field overrides."""
    overrides: dict[str, Any] = {}
    for i, arg in enumerate(args):
        if arg == "--transport" and i + 1 < len(args):
            overrides["transport"] = args[i + 1]
        elif arg == "--port" and i + 1 < len(args):
            overrides["http_port"] = int(args[i + 1])
        elif arg == "--host" and i + 1 < len(args):
            overrides["http_host"] = args[i + 1]
    return overrides


def main() -> None:
    """CLI entry point."""
    config = SalesbuildrConfig.from_env(**_parse_args(sys.argv[1:]))

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    router = Router(ClientAccessor(config))
    server = build_server(router, config)

    if config.transport == "http":
        import uvicorn

        if not config.gateway_mode and not config.api_key:
            logger.warning(
                "SALESBUILDR_API_KEY not set; every domain tool call will fail. "
                "Set it, or run with AUTH_MODE=gateway to read keys per request."
            )
        logger.info(
            "SalesBuildr MCP server listening on http://%s:%s/mcp (health: /health, auth: %s)",
            config.http_host,
            config.http_port,
            "gateway (header-based)" if config.gateway_mode else "env (environment variables)",
        )
        uvicorn.run(build_http_app(server, config), host=config.http_host, port=config.http_port)
    else:
        anyio.run(run_stdio, server)


if __name__ == "__main__":
    main()
