#!/usr/bin/env python3
# src/generate_x_mcp/cli/__init__.py
"""
CLI entry point for generate-x-mcp.

Connects to an MCP server and writes its tools, prompts and resources into
the ``x-mcp`` section of an OpenAPI document.
"""

import argparse
import asyncio
import logging
import os
import sys

from ..client import parse_headers
from ..config import SyncOptions
from ..constants import (
    CLIENT_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OPENAPI_FILE,
    ENV_CONNECT_DELAY,
    ENV_LOG_LEVEL,
    ENV_OPENAPI_FILE,
    ENV_REPLACE_EMPTY,
    ENV_TIMEOUT,
    LOG_LEVELS,
    X_MCP_KEY,
)
from ..errors import GeneratorError
from ..sync import generate

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, level: str = DEFAULT_LOG_LEVEL) -> None:
    """Set up logging configuration. Logs go to stderr so stdout only carries results."""
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", stream=sys.stderr
    )


def _leaf_exceptions(error: BaseException) -> list[BaseException]:
    """Flatten exception groups (the MCP transport raises from a task group) into their causes."""
    if isinstance(error, BaseExceptionGroup):
        leaves: list[BaseException] = []
        for inner in error.exceptions:
            leaves.extend(_leaf_exceptions(inner))
        return leaves
    return [error]


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    from .. import __version__

    parser = argparse.ArgumentParser(
        prog=CLIENT_NAME,
        description=f"Generate the {X_MCP_KEY} section of an OpenAPI document from a running MCP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Create or update openapi.yaml from a local server
  {CLIENT_NAME} --server-url http://localhost:8000/mcp

  # Write to a specific file and authenticate
  {CLIENT_NAME} -s https://mcp.example.com/mcp -f api/openapi.yaml -H "Authorization: Bearer TOKEN"

Environment Variables:
  {ENV_OPENAPI_FILE}   Default for --openapi-file
  {ENV_CONNECT_DELAY}  Default for --connect-delay
  {ENV_TIMEOUT}        Default for --timeout
  {ENV_REPLACE_EMPTY}  Set to 1 to behave as if --replace-empty was given
  {ENV_LOG_LEVEL}      Default for --log-level
        """,
    )

    parser.add_argument(
        "-f",
        "--openapi-file",
        default=None,
        help=f"Path to the OpenAPI specification file (default: {DEFAULT_OPENAPI_FILE})",
    )
    parser.add_argument("-s", "--server-url", required=True, help="URL of the MCP server")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar='"KEY: VALUE"',
        help="Header to pass to the MCP server (repeatable)",
    )
    parser.add_argument(
        "--connect-delay",
        type=float,
        default=None,
        help="Seconds to wait after connecting before listing capabilities (default: 1.0)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds (default: 30)")
    parser.add_argument(
        "--replace-empty",
        action="store_true",
        default=None,
        help="Store empty lists when the server reports none, instead of keeping the existing entries",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).lower(),
        choices=LOG_LEVELS,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"{CLIENT_NAME} {__version__}")

    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    setup_logging(debug=args.debug, level=args.log_level)

    try:
        options = SyncOptions.from_sources(
            server_url=args.server_url,
            openapi_file=args.openapi_file,
            headers=parse_headers(args.header),
            connect_delay=args.connect_delay,
            timeout=args.timeout,
            replace_empty=args.replace_empty,
        )
        result = asyncio.run(generate(options))
    except GeneratorError as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {e.to_message()}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.debug("Generation failed", exc_info=True)
        for cause in _leaf_exceptions(e):
            print(f"Error: {type(cause).__name__}: {cause}", file=sys.stderr)
        sys.exit(1)

    if result.created:
        print(f"Successfully created {result.path}")
        print("⚠️ Please update the file with more information.")
    else:
        print(f"Successfully updated {result.path}")
    logger.info(f"Wrote {result.summary()}")


if __name__ == "__main__":
    main()
