"""
ToolGate settings, read from the environment (and a .env file if present).
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .tools.errors import ToolConfigError


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""
    tools_file: Optional[str] = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def get_settings() -> Settings:
    """Build Settings from TOOLGATE_* environment variables."""
    load_dotenv()

    port = os.getenv("TOOLGATE_PORT", "8000")
    try:
        port_number = int(port)
    except ValueError as e:
        raise ToolConfigError(f"TOOLGATE_PORT must be an integer, got {port!r}") from e

    return Settings(
        tools_file=os.getenv("TOOLGATE_TOOLS_FILE") or None,
        log_level=os.getenv("TOOLGATE_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("TOOLGATE_HOST", "0.0.0.0"),
        port=port_number,
    )
