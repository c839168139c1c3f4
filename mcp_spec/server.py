"""
MCP Server

Exposes the tool server over stdio using the mcp SDK's low-level server.
The SDK handles JSON-RPC framing, initialization and schema validation;
exceptions raised by a tool call come back to the client as an error
result (isError: true).

stdout carries protocol messages only. Logs go to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import anyio
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .adapter import SpecToolServer, create_default_server
from .config import LOG_FORMAT, LOG_LEVEL, SERVER_NAME, SERVER_VERSION, validate_config

logger = logging.getLogger(__name__)


def build_server(tool_server: SpecToolServer) -> Server:
    """Wire a tool server into an MCP low-level server."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tool_server.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        return await tool_server.call_tool(name, arguments)

    return server


async def serve(tool_server: SpecToolServer | None = None) -> None:
    """Run until the client closes stdin."""
    server = build_server(tool_server or create_default_server())

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)


def main() -> None:
    """Console entry point. Exits non-zero on any startup or connection failure."""
    try:
        validate_config()
        configure_logging()
        anyio.run(serve)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        # no-op when logging is already configured
        configure_logging("INFO")
        logger.exception("Server error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
