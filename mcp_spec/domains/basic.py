"""
Basic Tools Domain

Stateless demo tools with no document access:
- add: arithmetic sum of two numbers
- echo: returns the input text prefixed with "Echo: "
"""

from __future__ import annotations

from ..tools import ParameterType, ToolDefinition, ToolParameter


def _format_number(value: int | float) -> str:
    """Render integral floats without a trailing '.0' (2.0 + 3.0 -> '5')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def add(a: int | float, b: int | float) -> str:
    """Add two numbers together."""
    return _format_number(a + b)


def echo(text: str) -> str:
    """Echo the input text back."""
    return f"Echo: {text}"


BASIC_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="add",
        description="Add two numbers together.",
        handler=add,
        parameters=[
            ToolParameter("a", ParameterType.NUMBER, "First number"),
            ToolParameter("b", ParameterType.NUMBER, "Second number"),
        ],
    ),
    ToolDefinition(
        name="echo",
        description="Echo back the input text",
        handler=echo,
        parameters=[
            ToolParameter("text", ParameterType.STRING, "Text to echo back"),
        ],
    ),
]
