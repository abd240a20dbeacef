"""
Tool registry for ToolGate.
NOTE:
1. Only definitions that pass validation ever reach TOOL_REGISTRY.
2. The registry key is always the tool's name, so tools/list never shows a tool under a name it does not answer to.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from .schemas import ToolDefinition
from .validation import DiagnosticSink, validate_and_filter_tools

logger = logging.getLogger(__name__)

# In-memory storage for all registered tools
TOOL_REGISTRY: dict[str, ToolDefinition] = {}


def get_all_tools() -> list[ToolDefinition]:
    """Return all registered tools."""
    return list(TOOL_REGISTRY.values())


def get_tool(name: str) -> ToolDefinition | None:
    """Get a tool by name."""
    return TOOL_REGISTRY.get(name)


def clear_registry() -> None:
    """Forget every registered tool."""
    TOOL_REGISTRY.clear()


def register_tools(tools: Mapping[str, Any], sink: Optional[DiagnosticSink] = None) -> list[str]:
    """
    Validate raw tool definitions and register the ones that pass.

    Usage:
        register_tools({
            "echo": {"description": "Returns what you send",
                     "parameters": {"type": "object", "properties": {"message": {"type": "string"}}}},
        })

    A tool registered under an existing name replaces it.

    Returns:
        Names of the tools that were registered, in input order
    """
    valid_tools = validate_and_filter_tools(tools, sink)

    for name, definition in valid_tools.items():
        TOOL_REGISTRY[name] = ToolDefinition.model_validate(definition)

    logger.info("Registered %d of %d tools", len(valid_tools), len(tools))
    return list(valid_tools)
