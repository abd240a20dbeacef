"""
MCP server - FastAPI routes for JSON-RPC requests.
"""
from fastapi import APIRouter

from .models import MCPRequest
from .utils import dispatch

router = APIRouter()


@router.post("/mcp")
async def mcp_endpoint(request: MCPRequest):
    """
    Main MCP endpoint.
    Routes tools/list and tools/validate; anything else is method-not-found.
    """
    return dispatch(request)
