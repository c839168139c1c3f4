"""MCP specification server package."""

from .adapter import SpecToolServer, create_default_server
from .chunker import HeadingMode, chunk_markdown
from .config import (
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SECTION,
    SERVER_NAME,
    SERVER_VERSION,
    SPEC_SECTIONS,
)
from .errors import (
    ConfigurationError,
    ContractViolation,
    DocumentUnreadable,
    IndexUnavailable,
    SearchExecutionFault,
    SectionNotFound,
    SpecServerFailure,
    ToolValidationError,
    UnknownTool,
)
from .index import SpecIndex, SpecIndexProvider
from .models import DocumentChunk, SearchHit, SearchResults, SectionContent
from .tools import ParameterType, ToolDefinition, ToolParameter, default_tools

__all__ = [
    # Tool server
    "SpecToolServer",
    "create_default_server",
    # Tools
    "ToolDefinition",
    "ToolParameter",
    "ParameterType",
    "default_tools",
    # Chunking and search
    "HeadingMode",
    "chunk_markdown",
    "SpecIndex",
    "SpecIndexProvider",
    # Config
    "SERVER_NAME",
    "SERVER_VERSION",
    "DEFAULT_SECTION",
    "DEFAULT_SEARCH_LIMIT",
    "SPEC_SECTIONS",
    # Models
    "DocumentChunk",
    "SearchHit",
    "SearchResults",
    "SectionContent",
    # Failures
    "SpecServerFailure",
    "ContractViolation",
    "UnknownTool",
    "ToolValidationError",
    "DocumentUnreadable",
    "IndexUnavailable",
    "SectionNotFound",
    "SearchExecutionFault",
    "ConfigurationError",
]
