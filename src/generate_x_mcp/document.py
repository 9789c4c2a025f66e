#!/usr/bin/env python3
# src/generate_x_mcp/document.py
"""
OpenAPI document handling - scaffold, load, assemble and save.

The document is treated as a loosely typed mapping; only the ``servers``
list and the ``x-mcp`` vendor section are touched.
"""

import copy
import logging
from pathlib import Path
from typing import Any

import orjson
import yaml

from .constants import (
    DEFAULT_INFO,
    JSON_SUFFIX,
    KEY_CAPABILITIES,
    KEY_PROMPTS,
    KEY_RESOURCES,
    KEY_SERVERS,
    KEY_TOOLS,
    KEY_URL,
    OPENAPI_VERSION,
    X_MCP_KEY,
)
from .errors import DocumentError
from .merge import merge_prompts, merge_resources, merge_tools
from .models import ServerSnapshot, XMcpSection

logger = logging.getLogger(__name__)


def scaffold_document() -> dict[str, Any]:
    """Create the minimal OpenAPI skeleton used when no document exists yet."""
    return {
        "openapi": OPENAPI_VERSION,
        "info": copy.deepcopy(DEFAULT_INFO),
        "paths": {},
        "components": {"securitySchemes": {}},
        "security": [],
    }


def load_document(path: Path) -> dict[str, Any] | None:
    """Load an OpenAPI document, as JSON for ``.json`` paths and YAML otherwise.

    Args:
        path: Location of the document.

    Returns:
        The parsed document, or None if the file does not exist.

    Raises:
        DocumentError: If the file cannot be parsed or its top level is not a mapping.
    """
    if not path.exists():
        return None

    if path.suffix.lower() == JSON_SUFFIX:
        data = path.read_bytes()
        if not data.strip():
            document = None
        else:
            try:
                document = orjson.loads(data)
            except orjson.JSONDecodeError as e:
                raise DocumentError(
                    f"Cannot parse {path}: {e}", suggestion="Fix the JSON syntax or delete the file"
                ) from e
    else:
        text = path.read_text(encoding="utf-8")
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentError(
                f"Cannot parse {path}: {e}", suggestion="Fix the YAML syntax or delete the file"
            ) from e

    if document is None:
        logger.debug(f"{path} is empty, starting from an empty document")
        return {}
    if not isinstance(document, dict):
        raise DocumentError(
            f"{path} must contain a mapping at the top level, got {type(document).__name__}",
            suggestion="Point --openapi-file at an OpenAPI document",
        )
    return document


def ensure_server(document: dict[str, Any], server_url: str) -> None:
    """Add ``server_url`` to ``servers`` unless an entry with that exact url exists."""
    servers = document.get(KEY_SERVERS)
    if servers is None:
        servers = document[KEY_SERVERS] = []
    elif not isinstance(servers, list):
        raise DocumentError(f"'{KEY_SERVERS}' must be a list, got {type(servers).__name__}")

    if any(isinstance(server, dict) and server.get(KEY_URL) == server_url for server in servers):
        return
    servers.append({KEY_URL: server_url})
    logger.debug(f"Added {server_url} to servers")


def assemble_document(
    document: dict[str, Any], snapshot: ServerSnapshot, replace_empty: bool = False
) -> dict[str, Any]:
    """Write a server snapshot into the document's ``x-mcp`` section.

    Capabilities are replaced outright. Tools, prompts and resources are merged
    with what the document already holds; an empty list from the server leaves
    the stored value alone unless ``replace_empty`` is set.

    Args:
        document: Document to update in place.
        snapshot: Capabilities and lists fetched from the server.
        replace_empty: Store empty lists instead of keeping the prior value.

    Returns:
        The same document object.
    """
    if document.get(X_MCP_KEY) is None:
        document[X_MCP_KEY] = {}
    section = XMcpSection.from_document(document[X_MCP_KEY])
    raw = document[X_MCP_KEY]

    raw[KEY_CAPABILITIES] = snapshot.capabilities

    collections = (
        (KEY_TOOLS, merge_tools(snapshot.tools, section.tools)),
        (KEY_PROMPTS, merge_prompts(snapshot.prompts, section.prompts)),
        (KEY_RESOURCES, merge_resources(snapshot.resources, section.resources)),
    )
    for key, merged in collections:
        if merged or replace_empty:
            raw[key] = merged
        elif key in raw:
            logger.info(f"Server reported no {key}; keeping the {key} already in the document")

    return document


def dump_document(document: dict[str, Any], path: Path) -> str:
    """Serialize the document, as JSON for ``.json`` paths and YAML otherwise."""
    if path.suffix.lower() == JSON_SUFFIX:
        return orjson.dumps(document, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n"
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def save_document(document: dict[str, Any], path: Path) -> None:
    """Overwrite ``path`` with the serialized document."""
    path.write_text(dump_document(document, path), encoding="utf-8")
    logger.debug(f"Wrote {path}")


__all__ = [
    "scaffold_document",
    "load_document",
    "ensure_server",
    "assemble_document",
    "dump_document",
    "save_document",
]
