"""
Load raw tool definitions from a JSON file.

The file holds one object keyed by tool name:

    {
      "search": {"description": "Finds things", "paramsSchema": {"type": "object"}},
      "echo": {"description": "Echo", "parameters": {"type": "object", "properties": {}}}
    }

Entries are returned as-is; validation happens later.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .base import register_tools
from .errors import ToolConfigError

logger = logging.getLogger(__name__)


def load_tool_definitions(path: str | Path) -> dict[str, Any]:
    """Read the tools file.

    Raises:
        ToolConfigError: If the file is missing, not JSON, or not a JSON object
    """
    path = Path(path)

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ToolConfigError(f"Tools file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ToolConfigError(f"Tools file is not valid JSON: {path} ({e})") from e

    if not isinstance(data, dict):
        raise ToolConfigError(
            f"Tools file must contain a JSON object keyed by tool name, got {type(data).__name__}"
        )

    return data


def register_tools_file(path: str | Path) -> list[str]:
    """Load the tools file and register the definitions that pass validation.

    Returns:
        Names of the registered tools, in file order
    """
    names = register_tools(load_tool_definitions(path))
    logger.info("Loaded %d tools from %s: %s", len(names), path, ", ".join(names))
    return names
