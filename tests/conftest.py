"""
Shared test fixtures for the MCP specification server tests.

Provides a small specification document on disk, index providers
over it, and a tool server wired to that provider.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mcp_spec.adapter import SpecToolServer, create_default_server
from mcp_spec.chunker import HeadingMode
from mcp_spec.index import SpecIndex, SpecIndexProvider


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


SAMPLE_SPEC = """\
# Introduction
The Model Context Protocol connects language models to tools.

## Transports
Servers communicate over stdio or HTTP with server-sent events.

## Tools
Clients invoke tools with a tools/call request.

# Security
Hosts must obtain explicit user consent.
"""

SAMPLE_SECTIONS = ["Introduction", "Transports", "Tools", "Security"]


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def spec_path(tmp_path: Path) -> Path:
    """Write the sample specification to a temporary file."""
    path = tmp_path / "specification.md"
    path.write_text(SAMPLE_SPEC, encoding="utf-8")
    return path


@pytest.fixture
def provider(spec_path: Path) -> SpecIndexProvider:
    """Per-call rebuilding provider over the sample specification."""
    return SpecIndexProvider(spec_path, heading_mode=HeadingMode.ANY)


@pytest.fixture
def missing_provider(tmp_path: Path) -> SpecIndexProvider:
    """Provider whose document does not exist."""
    return SpecIndexProvider(tmp_path / "does-not-exist.md")


@pytest.fixture
def spec_index(provider: SpecIndexProvider) -> SpecIndex:
    index = provider.load()
    assert index is not None
    return index


@pytest.fixture
def tool_server(provider: SpecIndexProvider) -> SpecToolServer:
    """Tool server with all default tools, searching the sample specification."""
    return create_default_server(provider)
