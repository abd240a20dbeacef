"""
MCP utilities - handler functions for processing requests.
"""
import logging
from collections.abc import Mapping
from typing import Any

from .models import (
    MCPError,
    MCPRequest,
    MCPResponse,
    ToolsValidateResult,
    ERROR_INTERNAL_ERROR,
    ERROR_INVALID_PARAMS,
    ERROR_METHOD_NOT_FOUND,
)
from ..tools.base import get_all_tools
from ..tools.validation import validate_and_filter_tools

logger = logging.getLogger(__name__)


def error_response(request: MCPRequest, code: int, message: str) -> dict:
    """JSON-RPC error envelope."""
    return MCPResponse(
        id=request.id,
        error=MCPError(code=code, message=message).model_dump(exclude_none=True),
    ).model_dump(exclude_none=True)


def validate_tools(tools: Mapping[str, Any]) -> ToolsValidateResult:
    """Filter tool definitions and list the names that were dropped."""
    valid = validate_and_filter_tools(tools)
    rejected = [name for name in tools if name not in valid]
    return ToolsValidateResult(valid=valid, rejected=rejected)


def handle_tools_list(request: MCPRequest) -> dict:
    """
    Handle tools/list request.
    Returns all registered tools in MCP format.
    """
    try:
        tools_json = [tool.to_schema().model_dump() for tool in get_all_tools()]

        return MCPResponse(
            id=request.id,
            result={"tools": tools_json},
        ).model_dump(exclude_none=True)
    except Exception as e:
        logger.exception("tools/list failed")
        return error_response(request, ERROR_INTERNAL_ERROR, str(e))


def handle_tools_validate(request: MCPRequest) -> dict:
    """
    Handle tools/validate request.
    params.tools is a mapping of tool name to definition.
    """
    tools = (request.params or {}).get("tools")
    if not isinstance(tools, Mapping):
        return error_response(
            request,
            ERROR_INVALID_PARAMS,
            "params.tools must be an object keyed by tool name",
        )

    try:
        result = validate_tools(tools)
        return MCPResponse(
            id=request.id,
            result=result.model_dump(),
        ).model_dump(exclude_none=True)
    except Exception as e:
        logger.exception("tools/validate failed")
        return error_response(request, ERROR_INTERNAL_ERROR, str(e))


HANDLERS = {
    "tools/list": handle_tools_list,
    "tools/validate": handle_tools_validate,
}


def dispatch(request: MCPRequest) -> dict:
    """Route a request to its handler by method name."""
    handler = HANDLERS.get(request.method)
    if handler is None:
        return error_response(
            request,
            ERROR_METHOD_NOT_FOUND,
            f"Method '{request.method}' not found",
        )
    return handler(request)
