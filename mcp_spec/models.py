"""
Search Models

Pydantic schemas for indexed document chunks and the payloads
returned by the specification search tools.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# -----------------------------------------------------------------------------
# Indexed Content
# -----------------------------------------------------------------------------


class DocumentChunk(BaseModel):
    """
    A contiguous, labeled span of the source document.

    Chunks are the unit of indexing and retrieval. They are rebuilt from
    scratch whenever the document is loaded and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    section: str
    line: int = Field(ge=1)
    content: str


# -----------------------------------------------------------------------------
# Tool Payloads
# -----------------------------------------------------------------------------


class SearchHit(BaseModel):
    """A single ranked match. score is 1.0 for a perfect match."""

    section: str
    line: int
    content: str
    score: float = Field(ge=0.0, le=1.0)


class SearchResults(BaseModel):
    """Response payload of search_spec."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    total_results: int = Field(alias="totalResults")
    results: list[SearchHit]


class SectionContent(BaseModel):
    """Response payload of search_spec_by_section."""

    content: str
