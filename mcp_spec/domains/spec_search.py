"""
Specification Search Domain

Tools over the bundled MCP specification document:
- search_spec: ranked fuzzy search, top-K
- search_spec_by_section: exact lookup by enumerated section name

Every call loads the document through the index provider. Failures are
answered as text, never raised: this is a tool-call boundary and the
calling agent expects a readable result.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_SEARCH_LIMIT, SPEC_SECTIONS
from ..errors import IndexUnavailable, SectionNotFound
from ..index import SpecIndexProvider
from ..models import SearchResults, SectionContent
from ..tools import ParameterType, ToolDefinition, ToolParameter

logger = logging.getLogger(__name__)


def no_results_message(query: str) -> str:
    return f'No results found for query: "{query}"'


def error_message(error: Exception) -> str:
    return f"Error searching specification: {error}"


class SpecSearchHandlers:
    """Tool handlers bound to one index provider."""

    def __init__(self, provider: SpecIndexProvider) -> None:
        self.provider = provider

    def search_spec(
        self, query: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> SearchResults | str:
        try:
            index = self.provider.require()
            results = index.search(query, limit)
            if not results.results:
                return no_results_message(query)
            return results
        except IndexUnavailable as e:
            return str(e)
        except Exception as e:
            logger.exception("search_spec failed for query %r", query)
            return error_message(e)

    def search_spec_by_section(self, query: str) -> SectionContent | str:
        try:
            index = self.provider.require()
            return SectionContent(content=index.get_section(query).content)
        except (IndexUnavailable, SectionNotFound) as e:
            return str(e)
        except Exception as e:
            logger.exception("search_spec_by_section failed for %r", query)
            return error_message(e)


def create_spec_search_tools(
    provider: SpecIndexProvider | None = None,
) -> list[ToolDefinition]:
    """Build the search tools, using the config-driven provider if none is given."""
    handlers = SpecSearchHandlers(provider or SpecIndexProvider.from_config())

    return [
        ToolDefinition(
            name="search_spec",
            description=(
                "Fuzzy full-text search over the MCP specification. "
                "Returns the best matching sections with line numbers and scores."
            ),
            handler=handlers.search_spec,
            parameters=[
                ToolParameter(
                    "query", ParameterType.STRING, "Free-text search query"
                ),
                ToolParameter(
                    "limit",
                    ParameterType.INTEGER,
                    "Maximum number of results to return",
                    required=False,
                    default=DEFAULT_SEARCH_LIMIT,
                    minimum=1,
                ),
            ],
        ),
        ToolDefinition(
            name="search_spec_by_section",
            description="Return the full text of one section of the MCP specification.",
            handler=handlers.search_spec_by_section,
            parameters=[
                ToolParameter(
                    "query",
                    ParameterType.STRING,
                    "Section name",
                    enum=list(SPEC_SECTIONS),
                ),
            ],
        ),
    ]
