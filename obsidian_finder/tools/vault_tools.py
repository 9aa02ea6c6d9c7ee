"""MCP tools for vault structure."""

from typing import Any

from obsidian_finder.config import get_vault
from obsidian_finder.server import mcp
from obsidian_finder.tools._errors import translate_errors
from obsidian_finder.models import VaultStructureInput
from obsidian_finder.core.structure_operations import get_vault_structure as get_vault_structure_core


@mcp.tool()
async def get_vault_structure(input: VaultStructureInput) -> dict[str, Any]:
    """Get hierarchical structure of the Obsidian vault.

    Folders are listed even when empty; only markdown files appear as leaves.
    Symlinks and other file types are omitted.

    Args:
        input (VaultStructureInput): Validated input containing:
            - path (str, optional): Subfolder to start from

    Returns:
        {
            "name": str,
            "path": str,       # "." for the vault root
            "type": "directory",
            "children": [ {"name", "path", "type": "file"} | {... "type": "directory", "children": [...]} ]
        }

    Error Handling:
        - Subfolder not found → Error
    """
    with translate_errors():
        tree = get_vault_structure_core(get_vault(), input.path)
    return tree.as_payload()
