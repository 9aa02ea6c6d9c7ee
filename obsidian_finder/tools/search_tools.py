"""Search and discovery tools for Obsidian vault operations.

This module contains MCP tool wrappers for search and discovery operations:
- search_notes: Line-level substring search over note contents
- list_notes: List markdown files in the vault or a folder
"""
from __future__ import annotations

from typing import Any

from obsidian_finder.config import get_vault
from obsidian_finder.server import mcp
from obsidian_finder.tools._errors import translate_errors
from obsidian_finder.models import ListNotesInput, SearchNotesInput
from obsidian_finder.core.search_operations import (
    list_notes as list_notes_core,
    search_notes as search_notes_core,
)

# ==============================================================================
# DISCOVERY & SEARCH TOOLS
# ==============================================================================


@mcp.tool()
async def search_notes(input: SearchNotesInput) -> dict[str, Any]:
    """Search for content in notes.

    Substring match on every line of each note body, and of the frontmatter
    YAML when includeFrontmatter is set. Results follow folder traversal
    order (depth-first, sorted by name); there is no relevance ranking.

    Args:
        input (SearchNotesInput): Validated input containing:
            - query (str): Search query
            - includeFrontmatter (bool): Also search frontmatter
            - caseSensitive (bool): Case sensitive matching (default False)
            - path (str, optional): Restrict to a subfolder

    Returns:
        {
            "query": str,
            "matches": [
                {"path": str, "hits": [{"line": int, "text": str, "section": "body" | "frontmatter"}]}
            ],
            "skipped": [{"path": str, "error": str}]  # Notes that could not be parsed
        }

    Error Handling:
        - Subfolder not found → Error
    """
    with translate_errors():
        results = search_notes_core(
            get_vault(),
            input.query,
            include_frontmatter=input.include_frontmatter,
            case_sensitive=input.case_sensitive,
            folder=input.path,
        )
    return results.as_payload()


@mcp.tool()
async def list_notes(input: ListNotesInput) -> dict[str, Any]:
    """List markdown files in vault.

    Args:
        input (ListNotesInput): Validated input containing:
            - path (str, optional): Subfolder path relative to vault root
            - recursive (bool): List files recursively

    Returns:
        {"path": str | None, "notes": [str, ...]}

    Error Handling:
        - Subfolder not found → Error
    """
    with translate_errors():
        notes = list_notes_core(get_vault(), folder=input.path, recursive=input.recursive)
    return {
        "path": input.path,
        "notes": notes,
    }
