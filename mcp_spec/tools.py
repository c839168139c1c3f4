"""
Tool definitions for the MCP specification server.

This module contains:
- Core types: ParameterType, ToolParameter, ToolDefinition
- Aggregated tool lists built from domain modules

Domain-specific tools are isolated in the domains/ package.
To add a new domain: create domains/newdomain.py and include it in default_tools().
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from mcp.types import Tool

if TYPE_CHECKING:
    from .index import SpecIndexProvider


class ParameterType(str, Enum):
    """JSON Schema types accepted by tool parameters."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"


@dataclass
class ToolParameter:
    """
    A single declared tool argument.

    Maps directly onto one JSON Schema property:
    - type: JSON Schema type
    - description: Human-readable description for LLM agents
    - required: Whether the caller must supply it
    - default: Value bound when an optional argument is omitted
    - enum: Closed set of accepted values
    - minimum: Lower bound for numeric values
    """

    name: str
    type: ParameterType
    description: str
    required: bool = True
    default: Any = None
    enum: list[str] | None = None
    minimum: int | float | None = None

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": self.type.value,
            "description": self.description,
        }
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.default is not None:
            schema["default"] = self.default
        return schema

    def check_value(self, value: Any) -> str | None:
        """Return an error message if value does not fit, else None."""
        # bool is an int subclass but never a JSON number
        if self.type is ParameterType.STRING:
            if not isinstance(value, str):
                return f"Parameter '{self.name}' must be a string"
        elif self.type is ParameterType.INTEGER:
            if isinstance(value, bool) or not isinstance(value, int):
                return f"Parameter '{self.name}' must be an integer"
        elif self.type is ParameterType.NUMBER:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return f"Parameter '{self.name}' must be a number"

        if self.enum is not None and value not in self.enum:
            return f"Parameter '{self.name}' must be one of: {', '.join(self.enum)}"

        if self.minimum is not None and value < self.minimum:
            return f"Parameter '{self.name}' must be >= {self.minimum}"

        return None


@dataclass
class ToolDefinition:
    """
    Definition of a callable exposed as an MCP tool.

    The handler receives validated keyword arguments and returns either
    a plain string or a structured (JSON-serializable) result.
    """

    name: str
    description: str
    handler: Callable[..., Any]
    parameters: list[ToolParameter] = field(default_factory=list)

    def validate_arguments(self, arguments: dict[str, Any]) -> list[str]:
        """
        Validate arguments against this tool's parameters.

        Returns list of validation errors. Empty list = valid.

        - Unknown arguments are rejected
        - Required parameters must be present
        - Values must match the declared type, enum and minimum
        """
        errors: list[str] = []
        known = {param.name: param for param in self.parameters}

        for arg in arguments:
            if arg not in known:
                errors.append(
                    f"Unknown argument '{arg}' - tool '{self.name}' does not accept this parameter"
                )

        for param in self.parameters:
            if param.name not in arguments:
                if param.required:
                    errors.append(f"Missing required parameter: '{param.name}'")
                continue
            error = param.check_value(arguments[param.name])
            if error:
                errors.append(error)

        return errors

    def bind_arguments(self, arguments: dict[str, Any]) -> dict[str, Any]:
        """Merge declared defaults under the supplied arguments."""
        bound = {
            param.name: param.default
            for param in self.parameters
            if not param.required and param.default is not None
        }
        bound.update(arguments)
        return bound

    def to_mcp_tool(self) -> Tool:
        """Convert this definition to an MCP Tool with a JSON Schema."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema={
                "type": "object",
                "properties": {
                    param.name: param.to_schema() for param in self.parameters
                },
                "required": [param.name for param in self.parameters if param.required],
            },
        )


# -----------------------------------------------------------------------------
# Combined Tools
# -----------------------------------------------------------------------------


def default_tools(provider: SpecIndexProvider | None = None) -> list[ToolDefinition]:
    """
    All tools served by default.

    Args:
        provider: Index provider for the search tools (config-driven if None)
    """
    from .domains.basic import BASIC_TOOLS
    from .domains.spec_search import create_spec_search_tools

    return BASIC_TOOLS + create_spec_search_tools(provider)
