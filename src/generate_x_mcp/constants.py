#!/usr/bin/env python3
"""
Top-level constants shared across the generate_x_mcp package.
"""

from typing import Any

# ---------------------------------------------------------------------------
# Client identity
# ---------------------------------------------------------------------------
CLIENT_NAME = "generate-x-mcp"
CLIENT_VERSION = "1.0.0"


# ---------------------------------------------------------------------------
# OpenAPI vendor extension
# ---------------------------------------------------------------------------
X_MCP_KEY = "x-mcp"

KEY_SERVERS = "servers"
KEY_URL = "url"
KEY_NAME = "name"
KEY_ARGUMENTS = "arguments"
KEY_CAPABILITIES = "capabilities"
KEY_TOOLS = "tools"
KEY_PROMPTS = "prompts"
KEY_RESOURCES = "resources"

# Fields owned by whoever edits the document; regeneration never overwrites them
CURATED_FIELDS = ("tags", "security")
ARGUMENT_CURATED_FIELDS = ("example",)

OPENAPI_VERSION = "3.1.0"

DEFAULT_INFO: dict[str, Any] = {
    "title": "Example MCP API",
    "description": "Example MCP API description",
    "version": "1.0.0",
    "termsOfService": "https://redocly.com/subscription-agreement/",
    "contact": {
        "email": "example@example.com",
        "url": "https://example.com",
    },
}


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_OPENAPI_FILE = "openapi.yaml"
DEFAULT_CONNECT_DELAY = 1.0
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "warning"
LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]

HEADER_SEPARATOR = ": "
JSON_SUFFIX = ".json"


# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------
ENV_OPENAPI_FILE = "XMCP_OPENAPI_FILE"
ENV_CONNECT_DELAY = "XMCP_CONNECT_DELAY"
ENV_TIMEOUT = "XMCP_TIMEOUT"
ENV_REPLACE_EMPTY = "XMCP_REPLACE_EMPTY"
ENV_LOG_LEVEL = "XMCP_LOG_LEVEL"
