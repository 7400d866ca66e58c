"""Uniform response envelope returned by every tool invocation.

``is_error`` is either True or None. Success envelopes never carry the flag,
so ``to_dict()`` omits ``isError`` entirely on success.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TextBlock:
    text: str
    type: str = "text"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass
class ToolResult:
    """Ordered content blocks plus an optional error flag."""

    content: list[TextBlock] = field(default_factory=list)
    is_error: bool | None = None

    @property
    def text(self) -> str:
        """All text blocks joined by newlines."""
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"content": [b.to_dict() for b in self.content]}
        if self.is_error:
            d["isError"] = True
        return d


def text_result(text: str) -> ToolResult:
    """Success envelope with a single text block."""
    return ToolResult(content=[TextBlock(text)])


def json_result(payload: Any) -> ToolResult:
    """Success envelope with the payload pretty-printed as JSON."""
    return text_result(json.dumps(payload, indent=2, default=str))


def error_result(message: str) -> ToolResult:
    """Failure envelope with a single text block."""
    return ToolResult(content=[TextBlock(message)], is_error=True)
