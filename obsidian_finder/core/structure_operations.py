"""Hierarchical vault structure enumeration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from obsidian_finder.core.vault_operations import (
    is_markdown_file,
    note_display_name,
    resolve_folder_path,
    sorted_entries,
)
from obsidian_finder.data_models import Vault, VaultNode

logger = logging.getLogger(__name__)


def _build_directory_node(vault: Vault, directory: Path) -> VaultNode:
    children: list[VaultNode] = []
    for entry in sorted_entries(directory):
        if entry.is_symlink():
            continue
        if entry.is_dir():
            children.append(_build_directory_node(vault, entry))
        elif is_markdown_file(entry):
            children.append(
                VaultNode(
                    name=entry.name,
                    path=note_display_name(vault, entry),
                    type="file",
                )
            )

    return VaultNode(
        name=directory.name,
        path=note_display_name(vault, directory),
        type="directory",
        children=children,
    )


def get_vault_structure(vault: Vault, folder: Optional[str] = None) -> VaultNode:
    """Build the directory tree of the vault or of one of its folders.

    Directories are always included, even when they contain no notes, so the
    tree stays navigable. Symlinks and non-markdown files are left out.

    Args:
        vault: Vault metadata.
        folder: Optional starting folder relative to the vault root.

    Returns:
        The root :class:`VaultNode` with children sorted by name.

    Raises:
        NotFound: If ``folder`` does not exist.
        InvalidPath: If ``folder`` escapes the vault.
    """
    root = resolve_folder_path(vault, folder)
    logger.debug("Building structure of '%s' in vault '%s'", folder or ".", vault.name)
    return _build_directory_node(vault, root)
