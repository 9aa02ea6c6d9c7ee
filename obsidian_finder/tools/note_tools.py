"""Note management MCP tools.

This module provides MCP tool wrappers for note CRUD and metadata operations:
- Create new notes
- Edit note content
- Move/rename notes
- Delete notes
- Read frontmatter metadata

All tools delegate to core operations in obsidian_finder.core.
"""
from __future__ import annotations

from typing import Any

from obsidian_finder.config import get_vault
from obsidian_finder.server import mcp
from obsidian_finder.tools._errors import translate_errors
from obsidian_finder.models import (
    CreateNoteInput,
    EditNoteInput,
    MoveNoteInput,
    DeleteNoteInput,
    GetMetadataInput,
)
from obsidian_finder.core.note_operations import (
    create_note as create_note_core,
    edit_note as edit_note_core,
    move_note as move_note_core,
    delete_note as delete_note_core,
)
from obsidian_finder.core.frontmatter_operations import get_metadata as get_metadata_core


# ==============================================================================
# CREATE / UPDATE OPERATIONS
# ==============================================================================

@mcp.tool()
async def create_note(input: CreateNoteInput) -> dict[str, Any]:
    """Create a new note in the Obsidian vault (fails if it exists).

    Parent folders are created automatically. When metadata is given it is
    written as a YAML frontmatter block before the content.

    Args:
        input (CreateNoteInput): Validated input containing:
            - path (str): Path relative to vault root, e.g. "Projects/Plan.md"
            - content (str): Markdown content (can be empty)
            - metadata (dict, optional): Frontmatter fields

    Returns:
        {
            "path": str,
            "absolute_path": str,
            "metadata": dict,
            "body": str,
            "content": str  # Stored text including frontmatter
        }

    Error Handling:
        - Note exists → Error, use edit_note() instead
        - Path escapes the vault → Error
        - Metadata not representable as YAML → Error
    """
    with translate_errors():
        note = create_note_core(get_vault(), input.path, input.content, input.metadata)
    return note.as_payload()


@mcp.tool()
async def edit_note(input: EditNoteInput) -> dict[str, Any]:
    """Edit an existing note in the Obsidian vault.

    Replaces the note body. Existing frontmatter is preserved. With
    updateMetadata=true, a frontmatter block at the start of content is
    merged into the existing frontmatter (new values win).

    Args:
        input (EditNoteInput): Validated input containing:
            - path (str): Path relative to vault root
            - content (str): New markdown content
            - updateMetadata (bool): Merge frontmatter embedded in content

    Returns:
        Same shape as create_note().

    Error Handling:
        - Note not found → Error, use create_note() instead
        - Malformed frontmatter (stored or supplied) → Error
    """
    with translate_errors():
        note = edit_note_core(get_vault(), input.path, input.content, input.update_metadata)
    return note.as_payload()


@mcp.tool()
async def move_note(input: MoveNoteInput) -> dict[str, Any]:
    """Move or rename a note.

    Content and frontmatter are preserved byte-for-byte. Destination folders
    are created automatically. Never overwrites an existing note.

    Args:
        input (MoveNoteInput): Validated input containing:
            - oldPath (str): Current path relative to vault root
            - newPath (str): New path relative to vault root

    Returns:
        {"old_path": str, "new_path": str, "status": "moved", "message": str}

    Error Handling:
        - Source not found → Error
        - Destination already exists → Error
    """
    with translate_errors():
        result = move_note_core(get_vault(), input.old_path, input.new_path)
    result["message"] = "Note moved successfully"
    return result


# ==============================================================================
# DELETE OPERATIONS
# ==============================================================================

@mcp.tool()
async def delete_note(input: DeleteNoteInput) -> dict[str, Any]:
    """Delete a note from the vault (permanent, single file only).

    Always confirm with the user before calling.

    Args:
        input (DeleteNoteInput): Validated input containing:
            - path (str): Path relative to vault root

    Returns:
        {"path": str, "status": "deleted", "message": str}

    Error Handling:
        - Note not found → Error, use list_notes() to find the correct path
    """
    with translate_errors():
        result = delete_note_core(get_vault(), input.path)
    result["message"] = "Note deleted successfully"
    return result


# ==============================================================================
# METADATA OPERATIONS
# ==============================================================================

@mcp.tool()
async def get_metadata(input: GetMetadataInput) -> dict[str, Any]:
    """Get YAML frontmatter metadata from a note (body is not returned).

    Args:
        input (GetMetadataInput): Validated input containing:
            - path (str): Path relative to vault root

    Returns:
        {"path": str, "metadata": dict}  # {} when the note has no frontmatter

    Error Handling:
        - Note not found → Error
        - Frontmatter is not valid YAML → Error
    """
    with translate_errors():
        metadata = get_metadata_core(get_vault(), input.path)
    return {
        "path": input.path,
        "metadata": metadata,
    }
