#!/usr/bin/env python3
"""
models.py - Data models for a generation run

Contains the server snapshot produced by the client, the validated view of
the document's ``x-mcp`` section and the result reported back to the CLI.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .constants import X_MCP_KEY
from .errors import DocumentError, format_validation_error

# ============================================================================
# Server Snapshot
# ============================================================================


@dataclass
class ServerSnapshot:
    """Everything fetched from one MCP server in a single session"""

    capabilities: dict[str, Any]
    tools: list[dict[str, Any]] = field(default_factory=list)
    prompts: list[dict[str, Any]] = field(default_factory=list)
    resources: list[dict[str, Any]] = field(default_factory=list)
    server_info: dict[str, Any] = field(default_factory=dict)


@dataclass
class SyncResult:
    """Outcome of one generation run"""

    path: Path
    created: bool
    tools: int = 0
    prompts: int = 0
    resources: int = 0

    def summary(self) -> str:
        """Short human-readable description of what was written"""
        return f"{self.tools} tools, {self.prompts} prompts, {self.resources} resources"


# ============================================================================
# x-mcp Section
# ============================================================================


class XMcpSection(BaseModel):
    """Shape check for the ``x-mcp`` vendor extension.

    Unknown keys are kept so hand-written additions survive a rewrite.
    """

    model_config = ConfigDict(extra="allow")

    # Replaced on every run, so any stored value is accepted
    capabilities: Any = None
    # Non-mapping entries are skipped by the merge
    tools: list[Any] | None = None
    prompts: list[Any] | None = None
    resources: list[Any] | None = None

    @classmethod
    def from_document(cls, section: Any) -> "XMcpSection":
        """Validate a raw ``x-mcp`` value loaded from a document."""
        if not isinstance(section, dict):
            raise DocumentError(
                f"'{X_MCP_KEY}' must be a mapping, got {type(section).__name__}",
                suggestion=f"Remove the '{X_MCP_KEY}' key and run again to regenerate it",
            )
        try:
            return cls.model_validate(section)
        except ValidationError as e:
            raise DocumentError(
                f"Invalid '{X_MCP_KEY}' section: {format_validation_error(e)}",
                suggestion="tools, prompts and resources must be lists",
            ) from e


__all__ = ["ServerSnapshot", "SyncResult", "XMcpSection"]
