#!/usr/bin/env python3
"""
Zoom MCP Server - Main Entry Point

FastMCP-based server for Zoom user and meeting management.
"""

import asyncio
import argparse
import logging
import signal
import sys
import time
from pathlib import Path

from fastmcp import FastMCP
from starlette.responses import JSONResponse

from zoom_mcp_server import __version__
from zoom_mcp_server.core.config import ZoomConfig
from zoom_mcp_server.core.exceptions import ZoomAuthError
from zoom_mcp_server.core.logging_utils import TOOL_LOG_FILES, configure_tool_logger
from zoom_mcp_server.core import dependency_injection as di
from zoom_mcp_server.services import ZoomIntegrationService
from zoom_mcp_server.tools import get_sorted_tools
from zoom_mcp_server.prompts import schedule_meeting, onboard_user
from zoom_mcp_server.resources import server_status, health_check


def setup_logging(config: ZoomConfig, transport_mode: str) -> logging.Logger:
    """Set up logging configuration."""
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)

    level = getattr(logging, config.log_level.upper())
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    server_file_handler = logging.FileHandler(logs_dir / "server.log", mode='a')
    server_file_handler.setFormatter(formatter)
    root_logger.addHandler(server_file_handler)

    # stdout carries the JSON protocol under stdio transport
    if transport_mode != "stdio":
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        root_logger.addHandler(stdout_handler)

    for tool_name in TOOL_LOG_FILES:
        configure_tool_logger(tool_name, level=level, logs_dir=logs_dir)

    server_logger = logging.getLogger("zoom.server")
    server_logger.setLevel(level)
    return server_logger


def abort_startup(reason: str, hint: str) -> None:
    print(reason)
    print(hint)
    print("Server startup aborted.")
    sys.exit(1)


async def main():
    """Main server function."""
    parser = argparse.ArgumentParser(
        description="Zoom MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Usage:
  python main.py                                          # Start with stdio transport
  python main.py --transport streamable-http --port 8000  # Start streamable HTTP server
  python main.py --read-only                              # Start in read-only mode
  python main.py --log-level DEBUG                        # Enable debug logging

Note: --host and --port are only applicable with --transport streamable-http
        """
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http"],
        default="stdio",
        help="Transport mode (default: stdio)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for HTTP transport (default: 8000)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host IP address to bind to for HTTP transport (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Enable read-only mode"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)"
    )

    args = parser.parse_args()

    config = ZoomConfig()
    config.log_level = args.log_level
    config.read_only_mode = config.read_only_mode or args.read_only
    config.transport = args.transport

    logger = setup_logging(config, args.transport)

    if not config.is_oauth_configured():
        abort_startup(
            "Zoom credentials not configured.",
            "Please set ZOOM_ACCOUNT_ID, ZOOM_CLIENT_ID and ZOOM_CLIENT_SECRET in .env file or environment variables.",
        )

    logger.info(f"Configuration: {config.api_base_url}, Read-only: {config.read_only_mode}")

    # Authenticate once; every tool call reuses this token
    logger.info("Authenticating with Zoom...")
    try:
        service = ZoomIntegrationService.from_config(config)
    except ZoomAuthError as e:
        logger.error(f"Authentication failed: {e}")
        abort_startup(
            "Zoom authentication failed.",
            "Please check your credentials and network connectivity.",
        )

    granted_scopes = [s for s in service.token.scopes if s]
    logger.info("Authentication successful")
    logger.info(f"Granted scopes: {granted_scopes}")

    di.set_dependencies(config, service)

    mcp = FastMCP("zoom-server")

    sorted_tools = get_sorted_tools()
    logger.info("Registering tools:")
    for tool_name, tool_func in sorted_tools.items():
        mcp.tool(tags={"management"})(tool_func)
        logger.info(f"  + Registered: {tool_name}")

    mcp.prompt()(schedule_meeting)
    mcp.prompt()(onboard_user)

    mcp.resource("zoom://server/status")(server_status)
    mcp.resource("zoom://server/health")(health_check)

    if args.transport == "streamable-http":
        @mcp.custom_route("/health", methods=["GET"])
        async def http_health_check(request):
            """HTTP health check endpoint for monitoring tools."""
            return JSONResponse({
                "status": "healthy" if service.token.access_token else "degraded",
                "timestamp": time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime()),
                "server": {
                    "name": config.server_name,
                    "version": __version__,
                    "transport": args.transport,
                    "host": args.host,
                    "port": args.port
                },
                "configuration": {
                    "read_only_mode": config.read_only_mode,
                    "api_base_url": config.api_base_url
                },
                "scopes": granted_scopes
            })

        @mcp.custom_route("/tools", methods=["GET"])
        async def http_tools_list(request):
            """HTTP tools endpoint for quick tool discovery."""
            tools_info = []
            for tool_name, tool_func in sorted_tools.items():
                description = "Zoom management tool"
                if tool_func.__doc__:
                    description = tool_func.__doc__.strip().split('\n')[0]
                tools_info.append({"name": tool_name, "description": description})

            return JSONResponse({
                "server": config.server_name,
                "total_tools": len(tools_info),
                "tools": tools_info,
                "timestamp": time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime())
            })

        logger.info("HTTP endpoints registered: /health and /tools")

    shutdown_requested = False

    def signal_handler(signum, frame):
        """Handle shutdown signals gracefully."""
        nonlocal shutdown_requested
        logger.info("Graceful shutdown initiated")
        shutdown_requested = True

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        if args.transport == "stdio":
            logger.info("Starting stdio transport")
            await mcp.run_stdio_async()
        else:
            logger.info(f"Starting streamable HTTP transport on {args.host}:{args.port}")
            server_task = asyncio.create_task(
                mcp.run_http_async(host=args.host, port=args.port)
            )

            while not shutdown_requested and not server_task.done():
                await asyncio.sleep(0.1)

            if shutdown_requested:
                logger.info("Shutdown requested, stopping HTTP server...")
                server_task.cancel()
                try:
                    await server_task
                except asyncio.CancelledError:
                    pass
                logger.info("HTTP server stopped gracefully")

    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received, shutting down gracefully...")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)
    finally:
        logger.info("Cleaning up resources...")
        service.close()
        di.clear_dependencies()
        for handler in logging.getLogger().handlers:
            handler.flush()
        logger.info("Server shutdown complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    basic_logger = logging.getLogger("zoom.startup")
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        basic_logger.info("Server stopped by user")
