#!/usr/bin/env python3
# src/generate_x_mcp/sync.py
"""
One generation run: fetch from the server, merge into the document, write it back.
"""

import logging

from .client import fetch_server_snapshot
from .config import SyncOptions
from .document import assemble_document, ensure_server, load_document, save_document, scaffold_document
from .models import SyncResult

logger = logging.getLogger(__name__)


async def generate(options: SyncOptions) -> SyncResult:
    """Fetch the server's capabilities and write them into the OpenAPI document.

    Args:
        options: Validated run options.

    Returns:
        Where the document was written and whether it was newly created.
    """
    snapshot = await fetch_server_snapshot(
        options.server_url,
        headers=options.headers,
        connect_delay=options.connect_delay,
        timeout=options.timeout,
    )
    server_name = snapshot.server_info.get("name", "unknown")
    server_version = snapshot.server_info.get("version", "unknown")
    logger.info(f"Connected to {server_name} {server_version}")
    logger.info(f"Server capabilities: {snapshot.capabilities}")

    path = options.openapi_file.resolve()
    document = load_document(path)
    created = document is None
    if document is None:
        logger.info(f"{path} not found, scaffolding a new document")
        document = scaffold_document()

    ensure_server(document, options.server_url)
    assemble_document(document, snapshot, replace_empty=options.replace_empty)
    save_document(document, path)

    return SyncResult(
        path=path,
        created=created,
        tools=len(snapshot.tools),
        prompts=len(snapshot.prompts),
        resources=len(snapshot.resources),
    )


__all__ = ["generate"]
