"""
Server Failure Types

Canonical failure taxonomy for the specification server.
Every failure raised inside the package is an instance of these types.
"""

from __future__ import annotations

from pathlib import Path


class SpecServerFailure(Exception):
    """Base class for all server failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ContractViolation(SpecServerFailure):
    """
    The tool call violates the declared tool contract.

    - Fatality: Fatal to the tool call.
    - MCP Representation: tool result with isError: true.
    """

    failure_category = "contract_violation"


class UnknownTool(ContractViolation):
    """Dispatch received a tool name with no registered handler."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolValidationError(ContractViolation):
    """Arguments do not match the tool's declared parameters."""

    def __init__(self, tool_name: str, errors: list[str]) -> None:
        super().__init__(
            f"Invalid arguments for tool '{tool_name}': " + "; ".join(errors)
        )
        self.tool_name = tool_name
        self.errors = errors


class DocumentUnreadable(SpecServerFailure):
    """
    The specification document is missing or cannot be read.

    - Fatality: Non-fatal. Recovered locally, the index is marked absent.
    """

    failure_category = "document_unreadable"

    def __init__(self, path: Path, *, cause: Exception | None = None) -> None:
        super().__init__(f"Cannot read specification document: {path}", cause=cause)
        self.path = path


class IndexUnavailable(SpecServerFailure):
    """
    No search index exists because the document failed to load.

    - Fatality: Non-fatal. Search tools answer with an "unavailable" message.
    """

    failure_category = "index_unavailable"


class SectionNotFound(SpecServerFailure):
    """
    Exact section lookup found no chunk with the requested section name.

    - MCP Representation: plain-text result naming the section.
    """

    failure_category = "section_not_found"

    def __init__(self, section: str) -> None:
        super().__init__(f'Section "{section}" not found in specification')
        self.section = section


class SearchExecutionFault(SpecServerFailure):
    """
    Unexpected failure while matching or ranking.

    - MCP Representation: plain-text error result.
    """

    failure_category = "search_execution_fault"


class ConfigurationError(SpecServerFailure):
    """
    The server is misconfigured and cannot operate correctly.

    - Fatality: Fatal. The process refuses to start.
    """

    failure_category = "configuration_error"
