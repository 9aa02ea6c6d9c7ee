"""Obsidian Finder MCP Server

Note management over an Obsidian vault via Model Context Protocol.
"""

from obsidian_finder.config import get_vault, load_vault
from obsidian_finder.data_models import LineHit, Note, SearchMatch, SearchResults, Vault, VaultNode
from obsidian_finder.errors import (
    AlreadyExists,
    InvalidPath,
    IOFailure,
    MetadataParseError,
    NotFound,
    ObsidianError,
)
from obsidian_finder.server import mcp, run_server

# Import tools to register them with the MCP server
from obsidian_finder import tools  # noqa: F401

__version__ = "1.0.0"
__all__ = [
    "get_vault",
    "load_vault",
    "LineHit",
    "Note",
    "SearchMatch",
    "SearchResults",
    "Vault",
    "VaultNode",
    "AlreadyExists",
    "InvalidPath",
    "IOFailure",
    "MetadataParseError",
    "NotFound",
    "ObsidianError",
    "mcp",
    "run_server",
]
