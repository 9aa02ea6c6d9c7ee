"""FastMCP server initialization and startup."""

import logging
import os

from mcp.server.fastmcp import FastMCP

from obsidian_finder.config import get_vault
from obsidian_finder.constants import LOG_LEVEL, LOG_LEVEL_ENV, SERVER_NAME

# Initialize logger (stderr, so the stdio transport stays clean)
_level_name = os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL).upper()
logging.basicConfig(level=getattr(logging, _level_name, logging.INFO))
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP(SERVER_NAME)

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Load the vault and start the MCP server with stdio transport.

    Raises:
        ValueError: If the vault root is not configured; the server does not
            start without it.
    """
    vault = get_vault()
    logger.info("Starting Obsidian Finder MCP Server for vault '%s' at %s", vault.name, vault.path)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
