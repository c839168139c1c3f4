"""
Tool Server

Registry and dispatcher for the tools this server exposes. The MCP
transport, JSON-RPC framing and session lifecycle belong to the mcp SDK;
this class only answers "which tools exist" and "run this tool".

The tool server:
1. Maintains a registry of ToolDefinitions
2. Lists them in MCP format
3. Validates arguments and dispatches calls
4. Transforms handler results into MCP content blocks
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from mcp.types import TextContent, Tool
from pydantic import BaseModel

from .errors import ConfigurationError, ToolValidationError, UnknownTool
from .tools import ToolDefinition, default_tools

if TYPE_CHECKING:
    from .index import SpecIndexProvider

logger = logging.getLogger(__name__)


class SpecToolServer:
    """
    Exposes a set of ToolDefinitions through the MCP tool interface.

    CONSTRAINED INVOCATION:
    - Tools receive ONLY declared parameters (unknown args rejected)
    - Validation happens BEFORE the handler runs
    - Unknown tools and invalid arguments raise immediately
    """

    def __init__(self, tools: list[ToolDefinition] | None = None) -> None:
        self.tools: dict[str, ToolDefinition] = {}

        for tool in tools or []:
            self.register_tool(tool)

    def register_tool(self, tool: ToolDefinition) -> None:
        """
        Register a tool definition.

        Raises:
            ConfigurationError: If a tool with the same name is registered
        """
        if tool.name in self.tools:
            raise ConfigurationError(f"Duplicate tool name: {tool.name}")
        self.tools[tool.name] = tool

    def list_tools(self) -> list[Tool]:
        """Return all registered tools in MCP format."""
        return [tool.to_mcp_tool() for tool in self.tools.values()]

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[TextContent]:
        """
        Execute a tool.

        Flow:
        1. Look up tool (fail if unknown)
        2. VALIDATE arguments (fail loudly if invalid)
        3. Bind defaults and run the handler
        4. Transform the result

        Raises:
            UnknownTool: If no tool is registered under name
            ToolValidationError: If arguments do not match the parameters
        """
        if name not in self.tools:
            raise UnknownTool(name)

        tool = self.tools[name]
        arguments = arguments or {}

        validation_errors = tool.validate_arguments(arguments)
        if validation_errors:
            raise ToolValidationError(name, validation_errors)

        logger.debug("Calling tool %s with %s", name, arguments)
        result = tool.handler(**tool.bind_arguments(arguments))
        return self._result_to_content(result)

    def _result_to_content(self, result: Any) -> list[TextContent]:
        """Convert a handler result to MCP content blocks."""
        if isinstance(result, BaseModel):
            text = json.dumps(result.model_dump(by_alias=True), indent=2)
        elif isinstance(result, str):
            text = result
        else:
            text = json.dumps(result, indent=2)

        return [TextContent(type="text", text=text)]


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


def create_default_server(provider: SpecIndexProvider | None = None) -> SpecToolServer:
    """Create a tool server with the basic and specification search tools."""
    return SpecToolServer(tools=default_tools(provider))
