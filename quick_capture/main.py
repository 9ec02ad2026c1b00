#!/usr/bin/env python3
"""
Quick Capture MCP Server

This module provides the main entry point for the Quick Capture server.
"""

import sys
import traceback

from mcp.server.fastmcp import FastMCP

from quick_capture.utils.logger import get_logger, setup_logger
from quick_capture.utils.config import get_config
from quick_capture.mcp.tools import setup_tools

# Get logger
logger = get_logger(__name__)

# Get configuration
config = get_config()

# Create FastMCP application
mcp = FastMCP(
    name=config["server_name"],
)

setup_tools(mcp)


def main() -> None:
    """
    Main entry point for the Quick Capture server.
    """
    setup_logger("quick_capture")
    try:
        logger.info("Starting MCP server")
        mcp.run()
    except Exception as e:
        logger.error(f"Error running MCP server: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
