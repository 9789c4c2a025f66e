#!/usr/bin/env python3
# src/generate_x_mcp/client.py
"""
MCP client - fetch a capability snapshot from a running server.

Connects over streamable HTTP with the official MCP SDK and lists tools,
prompts and resources, each only if the server advertises it.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from mcp import ClientSession
from mcp.client.streamable_http import streamablehttp_client
from mcp.types import Implementation

from .constants import (
    CLIENT_NAME,
    CLIENT_VERSION,
    DEFAULT_CONNECT_DELAY,
    DEFAULT_TIMEOUT,
    HEADER_SEPARATOR,
    KEY_PROMPTS,
    KEY_RESOURCES,
    KEY_TOOLS,
)
from .models import ServerSnapshot

logger = logging.getLogger(__name__)


def parse_headers(values: Iterable[str] | None) -> dict[str, str]:
    """Parse ``"Key: Value"`` strings into a header mapping.

    Each entry is split on the first ``": "``. Entries without both a key and
    a value are dropped.
    """
    headers: dict[str, str] = {}
    for value in values or ():
        key, _, header_value = value.partition(HEADER_SEPARATOR)
        if key and header_value:
            headers[key] = header_value
        else:
            logger.debug(f"Ignoring malformed header: {value!r}")
    return headers


def _dump(model: Any) -> dict[str, Any]:
    """Convert an SDK model into the plain mapping stored in the document."""
    result: dict[str, Any] = model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return result


async def _collect_pages(list_page: Callable[..., Awaitable[Any]], key: str) -> list[dict[str, Any]]:
    """Call a paginated list method until ``nextCursor`` runs out."""
    items: list[dict[str, Any]] = []
    cursor: str | None = None
    while True:
        result = await list_page(cursor) if cursor else await list_page()
        items.extend(_dump(item) for item in getattr(result, key))
        cursor = result.nextCursor
        if not cursor:
            break
        logger.debug(f"Fetching next page of {key} (cursor={cursor})")
    return items


async def fetch_server_snapshot(
    server_url: str,
    headers: dict[str, str] | None = None,
    connect_delay: float = DEFAULT_CONNECT_DELAY,
    timeout: float = DEFAULT_TIMEOUT,
) -> ServerSnapshot:
    """Connect to an MCP server and fetch everything it exposes.

    Args:
        server_url: Streamable HTTP endpoint of the server.
        headers: Extra HTTP headers sent with every request.
        connect_delay: Seconds to wait after initialization before listing.
        timeout: HTTP timeout in seconds.

    Returns:
        The server's capabilities and its tools, prompts and resources.
    """
    logger.info(f"Connecting to MCP server at {server_url}")
    if headers:
        logger.debug(f"Sending extra headers: {sorted(headers)}")

    async with streamablehttp_client(server_url, headers=headers or None, timeout=timeout) as (read, write, _):
        async with ClientSession(
            read, write, client_info=Implementation(name=CLIENT_NAME, version=CLIENT_VERSION)
        ) as session:
            init_result = await session.initialize()
            if connect_delay > 0:
                await asyncio.sleep(connect_delay)

            advertised = init_result.capabilities
            snapshot = ServerSnapshot(
                capabilities=_dump(advertised),
                server_info=_dump(init_result.serverInfo),
            )

            if advertised.tools is not None:
                snapshot.tools = await _collect_pages(session.list_tools, KEY_TOOLS)
            if advertised.prompts is not None:
                snapshot.prompts = await _collect_pages(session.list_prompts, KEY_PROMPTS)
            if advertised.resources is not None:
                snapshot.resources = await _collect_pages(session.list_resources, KEY_RESOURCES)

    logger.info(
        f"Fetched {len(snapshot.tools)} tools, {len(snapshot.prompts)} prompts, "
        f"{len(snapshot.resources)} resources"
    )
    return snapshot


__all__ = ["parse_headers", "fetch_server_snapshot"]
