#!/usr/bin/env python3
# src/generate_x_mcp/__init__.py
"""
generate-x-mcp - keep an OpenAPI document's ``x-mcp`` section in sync with a live MCP server.

    from generate_x_mcp import SyncOptions, generate

    result = asyncio.run(generate(SyncOptions(server_url="http://localhost:8000/mcp")))

Re-running is safe: tags, security and prompt argument examples added by hand
are kept, everything else is refreshed from the server.
"""

from .client import fetch_server_snapshot, parse_headers
from .config import SyncOptions
from .constants import CLIENT_VERSION
from .document import assemble_document, ensure_server, load_document, save_document, scaffold_document
from .errors import ConfigurationError, DocumentError, GeneratorError
from .merge import merge_collection, merge_prompts, merge_resources, merge_tools
from .models import ServerSnapshot, SyncResult, XMcpSection
from .sync import generate

__version__ = CLIENT_VERSION
__all__ = [
    "generate",
    "SyncOptions",
    "SyncResult",
    "ServerSnapshot",
    "XMcpSection",
    "fetch_server_snapshot",
    "parse_headers",
    "merge_collection",
    "merge_tools",
    "merge_prompts",
    "merge_resources",
    "scaffold_document",
    "load_document",
    "ensure_server",
    "assemble_document",
    "save_document",
    "GeneratorError",
    "DocumentError",
    "ConfigurationError",
]
