"""
Shared logging utilities for Zoom MCP Server tools.
"""
import logging
from pathlib import Path

# Tool logger names mapped to their log files under logs/tools/
TOOL_LOG_FILES = {
    "users": "user-management.log",
    "meetings": "meeting-management.log",
    "scopes": "scope-management.log",
}


def configure_tool_logger(tool_name: str, level: int = logging.INFO, logs_dir: Path = Path("logs")) -> logging.Logger:
    """Attach a file handler for a tool logger under ``logs/tools``."""
    logger = logging.getLogger(f"zoom.tools.{tool_name}")
    logger.setLevel(level)

    # Clear any existing handlers to avoid duplicates
    logger.handlers.clear()

    tools_logs_dir = logs_dir / "tools"
    tools_logs_dir.mkdir(parents=True, exist_ok=True)
    log_filename = TOOL_LOG_FILES.get(tool_name, f"{tool_name}.log")

    handler = logging.FileHandler(tools_logs_dir / log_filename, mode='a')
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)

    # Keep tool messages out of server.log
    logger.propagate = False
    return logger


def get_tool_logger(tool_name: str) -> logging.Logger:
    """Get a tool logger.

    Args:
        tool_name: The tool name (e.g., 'users', 'meetings', 'scopes')

    Returns:
        The ``zoom.tools.<tool_name>`` logger; handlers are attached by
        ``configure_tool_logger`` at server startup.
    """
    return logging.getLogger(f"zoom.tools.{tool_name}")
