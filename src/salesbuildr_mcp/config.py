"""SalesBuildr MCP configuration.

Loads settings from environment variables (with .env support via python-dotenv).
All config is immutable after construction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://portal.salesbuildr.com/public-api"


def _safe_int(env_var: str, default: int) -> int:
    """Read an int from env, falling back to default on parse error."""
    try:
        return int(os.getenv(env_var, str(default)))
    except (ValueError, TypeError):
        return default


def _safe_float(env_var: str, default: float) -> float:
    """Read a float from env, falling back to default on parse error."""
    try:
        return float(os.getenv(env_var, str(default)))
    except (ValueError, TypeError):
        return default


@dataclass(frozen=True)
class SalesbuildrConfig:
    """Immutable configuration loaded from environment variables."""

    # Transport
    transport: Literal["stdio", "http"] = "stdio"
    http_host: str = "0.0.0.0"
    http_port: int = 8080

    # Authentication: "env" reads SALESBUILDR_API_KEY once,
    # "gateway" reads X-Salesbuildr-API-Key on every HTTP request.
    auth_mode: Literal["env", "gateway"] = "env"
    api_key: str = ""

    # Upstream API
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        transport = (self.transport or "stdio").lower()
        if transport == "streamable-http":
            transport = "http"
        auth_mode = (self.auth_mode or "env").lower()
        object.__setattr__(self, "transport", transport)
        object.__setattr__(self, "auth_mode", auth_mode)
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))
        object.__setattr__(self, "log_level", (self.log_level or "INFO").upper())

        if transport not in {"stdio", "http"}:
            raise ValueError(
                f"Invalid MCP_TRANSPORT='{self.transport}'. Expected: stdio | http"
            )
        if auth_mode not in {"env", "gateway"}:
            raise ValueError(
                f"Invalid AUTH_MODE='{self.auth_mode}'. Expected: env | gateway"
            )
        if auth_mode == "gateway" and transport != "http":
            raise ValueError("AUTH_MODE=gateway requires MCP_TRANSPORT=http")
        if not (1 <= self.http_port <= 65535):
            raise ValueError("MCP_HTTP_PORT must be between 1 and 65535")
        if self.request_timeout <= 0:
            raise ValueError("SALESBUILDR_TIMEOUT must be > 0")

    @classmethod
    def from_env(
        cls, dotenv_path: str | Path | None = None, **overrides: Any
    ) -> SalesbuildrConfig:
        """Load config from environment, optionally reading a .env file first.

        Non-None ``overrides`` (e.g. CLI flags) replace the environment values
        before validation runs.
        """
        if dotenv_path:
            load_dotenv(dotenv_path)
        else:
            load_dotenv()

        values: dict[str, Any] = dict(
            transport=os.getenv("MCP_TRANSPORT", "stdio"),
            http_host=os.getenv("MCP_HTTP_HOST", "0.0.0.0"),
            http_port=_safe_int("MCP_HTTP_PORT", 8080),
            auth_mode=os.getenv("AUTH_MODE", "env"),
            api_key=os.getenv("SALESBUILDR_API_KEY", ""),
            base_url=os.getenv("SALESBUILDR_BASE_URL", DEFAULT_BASE_URL),
            request_timeout=_safe_float("SALESBUILDR_TIMEOUT", 30.0),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    _SENSITIVE_FIELDS = frozenset({"api_key"})

    def __repr__(self) -> str:
        fields = []
        for f in self.__dataclass_fields__:
            val = getattr(self, f)
            if f in self._SENSITIVE_FIELDS and val:
                fields.append(f"{f}='***'")
            else:
                fields.append(f"{f}={val!r}")
        return f"SalesbuildrConfig({', '.join(fields)})"

    @property
    def gateway_mode(self) -> bool:
        """True if credentials come from request headers."""
        return self.auth_mode == "gateway"
