"""
MCP protocol models - JSON-RPC 2.0 format.
"""
from typing import Any, Optional, Union
from pydantic import BaseModel, Field


# ============ BASE MODELS ============

class MCPRequest(BaseModel):
    """Base request - all MCP requests have these fields."""
    jsonrpc: str = Field(default="2.0")
    id: Union[int, str] = Field(...)
    method: str = Field(...)
    params: Optional[dict[str, Any]] = Field(default=None)


class MCPResponse(BaseModel):
    """Base response - carries either result or error."""
    jsonrpc: str = Field(default="2.0")
    id: Union[int, str] = Field(...)
    result: Optional[dict[str, Any]] = Field(default=None)
    error: Optional[dict[str, Any]] = Field(default=None)


# ============ TOOLS/VALIDATE ============

class ToolsValidateResult(BaseModel):
    """Outcome of validating a batch of tool definitions."""
    valid: dict[str, dict[str, Any]] = Field(..., description="Definitions that passed, name set to key")
    rejected: list[str] = Field(default_factory=list, description="Names that were dropped, in input order")


# ============ ERROR HANDLING ============

class MCPError(BaseModel):
    """Error structure."""
    code: int = Field(...)
    message: str = Field(...)
    data: Optional[dict[str, Any]] = Field(default=None)


# Error codes
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INVALID_PARAMS = -32602
ERROR_INTERNAL_ERROR = -32603
