"""Core business logic for note CRUD operations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from obsidian_finder.core.frontmatter_operations import (
    load_note,
    merge_frontmatter,
    note_from_text,
    serialize_frontmatter,
    split_incoming_content,
    validate_frontmatter,
)
from obsidian_finder.core.vault_operations import (
    ensure_vault_ready,
    note_display_name,
    resolve_note_path,
    write_text_atomic,
)
from obsidian_finder.data_models import Note, Vault
from obsidian_finder.errors import AlreadyExists, IOFailure, NotFound

logger = logging.getLogger(__name__)


def create_note(
    vault: Vault,
    path: str,
    content: str,
    metadata: Optional[Mapping[str, Any]] = None,
) -> Note:
    """Create a markdown note with optional frontmatter.

    Args:
        vault: Vault the note should reside in.
        path: Note path relative to the vault root; folders separated by ``/``.
        content: Markdown body to write.
        metadata: Optional frontmatter mapping placed before the body.

    Returns:
        The created :class:`Note`.

    Raises:
        AlreadyExists: If the note already exists.
        InvalidPath: If ``path`` escapes the vault.
        MetadataParseError: If ``metadata`` is not serializable frontmatter.
        IOFailure: If the file cannot be written.
    """
    ensure_vault_ready(vault)
    target_path = resolve_note_path(vault, path)
    note_name = note_display_name(vault, target_path)

    if target_path.exists():
        raise AlreadyExists(f"Note '{note_name}' already exists in vault '{vault.name}'.")

    sanitized = validate_frontmatter(metadata) if metadata else {}
    text = serialize_frontmatter(sanitized, content)
    write_text_atomic(target_path, text)

    logger.info("Created note '%s' in vault '%s'", note_name, vault.name)
    return note_from_text(vault, target_path, text)


def edit_note(
    vault: Vault,
    path: str,
    content: str,
    update_metadata: bool = False,
) -> Note:
    """Replace the body of an existing note, optionally merging frontmatter.

    When ``update_metadata`` is ``False`` the existing frontmatter is kept and
    ``content`` becomes the body verbatim. When ``True``, ``content`` may start
    with its own frontmatter block: those fields are merged onto the existing
    ones (incoming wins) and the remainder becomes the body.

    Args:
        vault: Vault metadata.
        path: Note path relative to the vault root.
        content: New markdown content.
        update_metadata: Whether to merge frontmatter embedded in ``content``.

    Returns:
        The updated :class:`Note`.

    Raises:
        NotFound: If the note does not exist.
        MetadataParseError: If the stored or supplied frontmatter is invalid.
        IOFailure: If the file cannot be read or written.
    """
    existing = load_note(vault, path)
    incoming, body = split_incoming_content(content, update_metadata)

    metadata = existing.metadata
    if incoming:
        metadata = merge_frontmatter(existing.metadata, incoming)

    text = serialize_frontmatter(metadata, body)
    write_text_atomic(existing.absolute_path, text)

    logger.info(
        "Edited note '%s' in vault '%s' (metadata_fields_updated=%s)",
        existing.path,
        vault.name,
        ", ".join(incoming) if incoming else "none",
    )
    return note_from_text(vault, existing.absolute_path, text)


def delete_note(vault: Vault, path: str) -> dict[str, Any]:
    """Delete a single markdown note.

    Returns:
        A dictionary summarizing the deletion.

    Raises:
        NotFound: If the note does not exist.
        IOFailure: If the file cannot be removed.
    """
    ensure_vault_ready(vault)
    target_path = resolve_note_path(vault, path)
    note_name = note_display_name(vault, target_path)
    if not target_path.is_file():
        raise NotFound(f"Note '{note_name}' not found in vault '{vault.name}'.")

    try:
        target_path.unlink()
    except FileNotFoundError as exc:
        raise NotFound(f"Note '{note_name}' not found in vault '{vault.name}'.") from exc
    except OSError as exc:
        raise IOFailure(f"Could not delete note '{note_name}': {exc}") from exc

    logger.info("Deleted note '%s' in vault '%s'", note_name, vault.name)
    return {
        "path": note_name,
        "status": "deleted",
    }


def move_note(vault: Vault, old_path: str, new_path: str) -> dict[str, Any]:
    """Move or rename a note without touching its content.

    The file is renamed as-is; frontmatter is never parsed or rewritten.

    Returns:
        A dictionary with the old and new vault-relative paths.

    Raises:
        NotFound: If the original note cannot be located.
        AlreadyExists: If anything exists at the destination, including the
            source itself when both paths are the same.
        InvalidPath: If either path escapes the vault.
        IOFailure: If the rename fails.
    """
    ensure_vault_ready(vault)
    source = resolve_note_path(vault, old_path)
    destination = resolve_note_path(vault, new_path)
    old_display = note_display_name(vault, source)
    new_display = note_display_name(vault, destination)

    if not source.is_file():
        raise NotFound(f"Note '{old_display}' not found in vault '{vault.name}'.")

    if destination.exists():
        raise AlreadyExists(f"Note '{new_display}' already exists in vault '{vault.name}'.")

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        source.rename(destination)
    except OSError as exc:
        raise IOFailure(f"Could not move note '{old_display}' to '{new_display}': {exc}") from exc

    logger.info(
        "Moved note from '%s' to '%s' in vault '%s'",
        old_display,
        new_display,
        vault.name,
    )
    return {
        "old_path": old_display,
        "new_path": new_display,
        "status": "moved",
    }
