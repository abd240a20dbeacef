"""Unit tests for toolgate.tools.base (the registry)."""

from toolgate.tools.base import TOOL_REGISTRY, clear_registry, get_all_tools, get_tool, register_tools
from toolgate.tools.schemas import ToolDefinition


class TestRegisterTools:
    """Tests for register_tools()."""

    def test_registers_only_valid(self, sink):
        """Invalid entries never reach the registry."""
        names = register_tools({
            "echo": {"description": "Echo"},
            "broken": {"description": "d", "parameters": {"type": "array", "properties": {}}},
            "empty": None,
        }, sink)

        assert names == ["echo"]
        assert list(TOOL_REGISTRY) == ["echo"]

    def test_registered_as_models(self, sink):
        """Stored entries are ToolDefinition models named by their key."""
        register_tools({"echo": {"name": "other", "description": "Echo"}}, sink)

        tool = get_tool("echo")
        assert isinstance(tool, ToolDefinition)
        assert tool.name == "echo"

    def test_replaces_same_name(self, sink):
        """Registering a name again replaces the old definition."""
        register_tools({"echo": {"description": "v1"}}, sink)
        register_tools({"echo": {"description": "v2"}}, sink)

        assert len(get_all_tools()) == 1
        assert get_tool("echo").description == "v2"

    def test_unknown_tool(self):
        assert get_tool("missing") is None

    def test_clear(self, sink):
        register_tools({"echo": {"description": "Echo"}}, sink)
        clear_registry()
        assert get_all_tools() == []
