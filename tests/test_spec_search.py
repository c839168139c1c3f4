"""
Tests for the specification search tool handlers.

Handlers must always answer with a payload or a readable message,
never raise.
"""

import pytest

from mcp_spec.domains.spec_search import SpecSearchHandlers
from mcp_spec.models import SearchResults, SectionContent


@pytest.fixture
def handlers(provider):
    return SpecSearchHandlers(provider)


@pytest.fixture
def unavailable_handlers(missing_provider):
    return SpecSearchHandlers(missing_provider)


class TestSearchSpec:
    """Tests for free-text search."""

    def test_returns_results(self, handlers):
        result = handlers.search_spec("stdio")

        assert isinstance(result, SearchResults)
        assert result.query == "stdio"
        assert result.total_results >= 1
        assert result.results[0].section == "Transports"

    def test_serialized_keys(self, handlers):
        payload = handlers.search_spec("stdio").model_dump(by_alias=True)

        assert set(payload) == {"query", "totalResults", "results"}
        assert set(payload["results"][0]) == {"section", "line", "content", "score"}

    def test_limit_applies_after_counting(self, handlers):
        result = handlers.search_spec("tools", limit=1)

        assert len(result.results) == 1
        assert result.total_results >= 2

    def test_no_results(self, handlers):
        assert handlers.search_spec("zzqxj") == 'No results found for query: "zzqxj"'

    def test_index_unavailable(self, unavailable_handlers):
        message = unavailable_handlers.search_spec("tools")

        assert isinstance(message, str)
        assert "not initialized" in message

    def test_unexpected_error_becomes_text(self, handlers, monkeypatch):
        def boom():
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(handlers.provider, "require", boom)

        assert handlers.search_spec("tools") == "Error searching specification: disk on fire"


class TestSearchSpecBySection:
    """Tests for exact section lookup."""

    def test_found(self, handlers):
        result = handlers.search_spec_by_section("Security")

        assert result == SectionContent(
            content="# Security\nHosts must obtain explicit user consent."
        )

    def test_not_found_names_section(self, handlers):
        message = handlers.search_spec_by_section("Prompts")

        assert message == 'Section "Prompts" not found in specification'

    def test_index_unavailable(self, unavailable_handlers):
        assert "not initialized" in unavailable_handlers.search_spec_by_section("Tools")

    def test_unexpected_error_becomes_text(self, handlers, monkeypatch):
        def boom():
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(handlers.provider, "require", boom)

        assert handlers.search_spec_by_section("Tools").startswith(
            "Error searching specification"
        )
