"""
Centralized configuration for the MCP specification server.

All magic values, paths, and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import ConfigurationError

# -----------------------------------------------------------------------------
# Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "mcp-spec"
SERVER_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# Specification Document
# -----------------------------------------------------------------------------

BUNDLED_DOCUMENT_PATH = Path(__file__).parent / "data" / "specification.md"

SPEC_DOCUMENT_PATH = Path(
    os.environ.get("MCP_SPEC_DOCUMENT_PATH", str(BUNDLED_DOCUMENT_PATH))
)

# Headings of the bundled document, offered as the section lookup enum.
SPEC_SECTIONS: tuple[str, ...] = (
    "Model Context Protocol Specification",
    "Overview",
    "Key Principles",
    "Architecture",
    "Hosts, Clients and Servers",
    "Capability Negotiation",
    "Base Protocol",
    "Messages",
    "Lifecycle",
    "Transports",
    "Server Features",
    "Tools",
    "Resources",
    "Prompts",
    "Client Features",
    "Roots",
    "Sampling",
    "Utilities",
    "Ping",
    "Cancellation",
    "Progress",
    "Security and Trust",
)

# -----------------------------------------------------------------------------
# Chunking
# -----------------------------------------------------------------------------

DEFAULT_SECTION = "Overview"

HEADING_MODES = ("any", "h1")
HEADING_MODE = os.environ.get("MCP_SPEC_HEADING_MODE", "any").strip().lower()

MAX_CHUNK_LINES_RAW = os.environ.get("MCP_SPEC_MAX_CHUNK_LINES", "500")

# -----------------------------------------------------------------------------
# Search
# -----------------------------------------------------------------------------

DEFAULT_SEARCH_LIMIT = 5

SEARCH_THRESHOLD_RAW = os.environ.get("MCP_SPEC_SEARCH_THRESHOLD", "0.3")

CACHE_INDEX = os.environ.get("MCP_SPEC_CACHE_INDEX", "false").strip().lower() in (
    "1",
    "true",
    "yes",
    "on",
)

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("MCP_SPEC_LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# -----------------------------------------------------------------------------
# Parsed Values
# -----------------------------------------------------------------------------


def parse_max_chunk_lines(raw: str) -> int:
    """Parse the chunk size bound. Must be a positive integer."""
    try:
        value = int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"MCP_SPEC_MAX_CHUNK_LINES must be an integer, got {raw!r}", cause=e
        )
    if value < 1:
        raise ConfigurationError(
            f"MCP_SPEC_MAX_CHUNK_LINES must be positive, got {value}"
        )
    return value


def parse_search_threshold(raw: str) -> float:
    """Parse the fuzzy tolerance. 0.0 accepts exact matches only, 1.0 anything."""
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"MCP_SPEC_SEARCH_THRESHOLD must be a number, got {raw!r}", cause=e
        )
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(
            f"MCP_SPEC_SEARCH_THRESHOLD must be between 0 and 1, got {value}"
        )
    return value


def parse_heading_mode(raw: str) -> str:
    if raw not in HEADING_MODES:
        raise ConfigurationError(
            f"MCP_SPEC_HEADING_MODE must be one of {', '.join(HEADING_MODES)}, got {raw!r}"
        )
    return raw


def validate_config() -> None:
    """
    Fail fast on invalid configuration.

    Called once at startup, before the transport is opened.

    Raises:
        ConfigurationError: If any environment override is invalid
    """
    parse_heading_mode(HEADING_MODE)
    parse_max_chunk_lines(MAX_CHUNK_LINES_RAW)
    parse_search_threshold(SEARCH_THRESHOLD_RAW)
    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise ConfigurationError(f"MCP_SPEC_LOG_LEVEL is not a log level: {LOG_LEVEL!r}")
