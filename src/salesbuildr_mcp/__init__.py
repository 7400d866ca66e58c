"""SalesBuildr MCP - the SalesBuildr CRM and quoting API as MCP tools.

Decision-tree tool visibility. Stdio or streamable HTTP. Single- or multi-tenant.
"""

from salesbuildr_mcp.accessor import ClientAccessor
from salesbuildr_mcp.config import SalesbuildrConfig
from salesbuildr_mcp.envelope import ToolResult
from salesbuildr_mcp.router import Router

__version__ = "1.0.0"
__all__ = ["ClientAccessor", "Router", "SalesbuildrConfig", "ToolResult", "__version__"]
