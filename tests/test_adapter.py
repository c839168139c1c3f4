"""
Tests for the tool server.

Exercises dispatch, validation and result conversion without the
MCP transport.
"""

import json

import pytest

from mcp_spec.adapter import SpecToolServer
from mcp_spec.errors import ConfigurationError, ToolValidationError, UnknownTool
from mcp_spec.tools import ParameterType, ToolDefinition, ToolParameter


class TestSpecToolServer:
    """Tests for registration and listing."""

    def test_list_tools(self, tool_server):
        tools = tool_server.list_tools()

        names = [t.name for t in tools]
        assert names == ["add", "echo", "search_spec", "search_spec_by_section"]

    def test_duplicate_registration_rejected(self, tool_server):
        duplicate = ToolDefinition(name="echo", description="again", handler=str)

        with pytest.raises(ConfigurationError):
            tool_server.register_tool(duplicate)

    def test_empty_server(self):
        assert SpecToolServer().list_tools() == []


class TestCallTool:
    """Tests for tool dispatch."""

    @pytest.mark.asyncio
    async def test_add(self, tool_server):
        content = await tool_server.call_tool("add", {"a": 2, "b": 3})

        assert len(content) == 1
        assert content[0].type == "text"
        assert content[0].text == "5"

    @pytest.mark.asyncio
    async def test_echo(self, tool_server):
        content = await tool_server.call_tool("echo", {"text": "hi"})

        assert content[0].text == "Echo: hi"

    @pytest.mark.asyncio
    async def test_unknown_tool(self, tool_server):
        with pytest.raises(UnknownTool) as exc_info:
            await tool_server.call_tool("nonexistent", {})
        assert "Unknown tool" in str(exc_info.value)
        assert exc_info.value.tool_name == "nonexistent"

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, tool_server):
        with pytest.raises(ToolValidationError) as exc_info:
            await tool_server.call_tool("add", {"a": "two", "b": 3})
        assert exc_info.value.errors == ["Parameter 'a' must be a number"]

    @pytest.mark.asyncio
    async def test_missing_arguments(self, tool_server):
        with pytest.raises(ToolValidationError):
            await tool_server.call_tool("echo", None)

    @pytest.mark.asyncio
    async def test_search_spec_payload(self, tool_server):
        content = await tool_server.call_tool("search_spec", {"query": "stdio"})
        payload = json.loads(content[0].text)

        assert payload["query"] == "stdio"
        assert payload["totalResults"] >= 1
        assert payload["results"][0]["section"] == "Transports"
        assert payload["results"][0]["line"] == 4
        assert payload["results"][0]["score"] == 1.0

    @pytest.mark.asyncio
    async def test_search_spec_default_limit(self, spec_path):
        from mcp_spec.adapter import create_default_server
        from mcp_spec.index import SpecIndexProvider

        loose = SpecIndexProvider(spec_path, threshold=1.0)
        server = create_default_server(loose)

        content = await server.call_tool("search_spec", {"query": "protocol"})
        payload = json.loads(content[0].text)

        assert payload["totalResults"] == 4
        assert len(payload["results"]) == 4

        content = await server.call_tool("search_spec", {"query": "protocol", "limit": 1})
        assert len(json.loads(content[0].text)["results"]) == 1

    @pytest.mark.asyncio
    async def test_search_spec_limit_must_be_positive(self, tool_server):
        with pytest.raises(ToolValidationError):
            await tool_server.call_tool("search_spec", {"query": "x", "limit": 0})

    @pytest.mark.asyncio
    async def test_search_spec_no_results_is_text(self, tool_server):
        content = await tool_server.call_tool("search_spec", {"query": "zzqxj"})

        assert content[0].text == 'No results found for query: "zzqxj"'

    @pytest.mark.asyncio
    async def test_section_lookup_payload(self, tool_server):
        content = await tool_server.call_tool("search_spec_by_section", {"query": "Tools"})

        assert json.loads(content[0].text) == {
            "content": "## Tools\nClients invoke tools with a tools/call request."
        }

    @pytest.mark.asyncio
    async def test_section_lookup_rejects_unlisted_name(self, tool_server):
        with pytest.raises(ToolValidationError):
            await tool_server.call_tool("search_spec_by_section", {"query": "Nope"})

    @pytest.mark.asyncio
    async def test_dict_result_serialized_as_json(self):
        server = SpecToolServer(
            tools=[
                ToolDefinition(
                    name="info",
                    description="Structured result",
                    handler=lambda key: {"key": key},
                    parameters=[ToolParameter("key", ParameterType.STRING, "Key")],
                )
            ]
        )

        content = await server.call_tool("info", {"key": "v"})

        assert json.loads(content[0].text) == {"key": "v"}
