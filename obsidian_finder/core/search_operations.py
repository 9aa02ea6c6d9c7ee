"""Search and discovery operations for notes."""

from __future__ import annotations

import logging
from typing import Optional

from obsidian_finder.core.frontmatter_operations import frontmatter_text, parse_frontmatter
from obsidian_finder.core.vault_operations import (
    iter_markdown_files,
    note_display_name,
    read_note_text,
    resolve_folder_path,
)
from obsidian_finder.data_models import LineHit, SearchMatch, SearchResults, Vault
from obsidian_finder.errors import IOFailure, MetadataParseError

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _match_lines(text: str, needle: str, case_sensitive: bool, section: str) -> list[LineHit]:
    """Return one :class:`LineHit` per line of ``text`` containing ``needle``.

    Only ``\\n`` ends a line, matching how editors number them.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    hits: list[LineHit] = []
    for number, line in enumerate(lines, start=1):
        line = line.removesuffix("\r")
        candidate = line if case_sensitive else line.casefold()
        if needle in candidate:
            hits.append(LineHit(line=number, text=line, section=section))
    return hits


# ==============================================================================
# SEARCH OPERATIONS
# ==============================================================================


def search_notes(
    vault: Vault,
    query: str,
    include_frontmatter: bool = False,
    case_sensitive: bool = False,
    folder: Optional[str] = None,
) -> SearchResults:
    """Search note bodies (and optionally frontmatter) line by line.

    Notes are scanned depth-first in name order, and matches are returned in
    that order without any ranking.

    Args:
        vault: Vault metadata.
        query: Substring to look for.
        include_frontmatter: When ``True`` also search the YAML text of each
            note's frontmatter.
        case_sensitive: When ``False`` both query and lines are case-folded.
        folder: Optional folder (relative to the vault root) to restrict the
            search to.

    Returns:
        A :class:`SearchResults` with matches plus the notes that had to be
        skipped because they could not be read or parsed.

    Raises:
        NotFound: If ``folder`` does not exist.
        InvalidPath: If ``folder`` escapes the vault.
    """
    root = resolve_folder_path(vault, folder)
    needle = query if case_sensitive else query.casefold()
    results = SearchResults(query=query)

    for note_path in iter_markdown_files(root, recursive=True):
        relative = note_display_name(vault, note_path)
        try:
            metadata, body = parse_frontmatter(read_note_text(note_path))
        except (IOFailure, MetadataParseError) as exc:
            logger.warning("Skipping note '%s' during search: %s", relative, exc)
            results.skipped.append({"path": relative, "error": str(exc)})
            continue

        hits: list[LineHit] = []
        if include_frontmatter and metadata:
            hits.extend(_match_lines(frontmatter_text(metadata), needle, case_sensitive, "frontmatter"))
        hits.extend(_match_lines(body, needle, case_sensitive, "body"))

        if hits:
            results.matches.append(SearchMatch(path=relative, hits=hits))

    logger.info(
        "Search for '%s' in vault '%s' matched %d notes (%d skipped)",
        query,
        vault.name,
        len(results.matches),
        len(results.skipped),
    )
    return results


def list_notes(
    vault: Vault,
    folder: Optional[str] = None,
    recursive: bool = False,
) -> list[str]:
    """List markdown notes under the vault root or a folder.

    Args:
        vault: Vault metadata.
        folder: Optional folder relative to the vault root.
        recursive: When ``True`` walk subfolders depth-first in name order;
            otherwise only the folder's immediate notes are returned.

    Returns:
        Vault-relative note paths (with ``.md``).

    Raises:
        NotFound: If ``folder`` does not exist.
        InvalidPath: If ``folder`` escapes the vault.
    """
    root = resolve_folder_path(vault, folder)
    return [
        note_display_name(vault, path)
        for path in iter_markdown_files(root, recursive=recursive)
    ]
