"""
ToolGate - Main FastAPI application.
"""
import logging

from fastapi import FastAPI

from .config import get_settings
from .logging_setup import setup_logging
from .mcp.server import router as mcp_router

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="ToolGate",
    description="Validates tool definitions before they reach an agent",
    version="0.1.0"
)

# Include MCP router
app.include_router(mcp_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "ToolGate",
        "version": "0.1.0",
        "status": "operational"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event():
    """
    Run on startup.
    Load tool definitions from TOOLGATE_TOOLS_FILE, if configured.
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("ToolGate starting...")

    if not settings.tools_file:
        logger.info("No TOOLGATE_TOOLS_FILE configured, starting with an empty registry")
        return

    from .tools.loader import register_tools_file

    register_tools_file(settings.tools_file)


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
