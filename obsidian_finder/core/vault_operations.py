"""Path resolution, sandbox enforcement and filesystem helpers for the vault."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Iterator
from pathlib import Path, PureWindowsPath
from typing import Optional

from obsidian_finder.constants import NOTE_SUFFIX
from obsidian_finder.data_models import Vault
from obsidian_finder.errors import InvalidPath, IOFailure, NotFound

logger = logging.getLogger(__name__)


# ==============================================================================
# PATH RESOLUTION
# ==============================================================================


def ensure_vault_ready(vault: Vault) -> None:
    """Ensure the vault directory is accessible before performing operations.

    Raises:
        NotFound: If the vault path does not exist or is not a directory.
    """
    if not vault.path.is_dir():
        raise NotFound(f"Vault '{vault.name}' is not accessible at {vault.path}")


def construct_note_path(identifier: str) -> str:
    """Append the ``.md`` suffix to a note identifier unless it already has one.

    Examples:
        >>> construct_note_path("Folder/My Note")
        'Folder/My Note.md'
        >>> construct_note_path("Docs/Overview.MD")
        'Docs/Overview.MD'
    """
    if identifier.lower().endswith(NOTE_SUFFIX):
        return identifier
    return f"{identifier}{NOTE_SUFFIX}"


def resolve_vault_path(vault: Vault, relative: str) -> Path:
    """Resolve a caller-supplied relative path to an absolute path inside the vault.

    ``..`` segments are allowed as long as the normalized result stays inside
    the vault. Symlinks are followed for the containment check only, so a link
    pointing outside the vault is rejected, while the returned path still names
    the link itself rather than its target.

    Args:
        vault: Vault metadata.
        relative: ``/``-separated path relative to the vault root.

    Returns:
        The lexically normalized absolute :class:`Path` within ``vault.path``.

    Raises:
        InvalidPath: If the path is empty, contains NUL bytes, is absolute, or
            escapes the vault root.
    """
    if not isinstance(relative, str) or not relative.strip():
        raise InvalidPath("Path cannot be empty.")

    if "\x00" in relative:
        raise InvalidPath("Path cannot contain null bytes.")

    if relative.startswith(("/", "\\")) or PureWindowsPath(relative).drive:
        raise InvalidPath(f"Path must be relative to the vault root: '{relative}'")

    vault_root = vault.path.resolve(strict=False)
    candidate = Path(os.path.normpath(vault_root / relative))
    if not candidate.is_relative_to(vault_root):
        raise InvalidPath(f"Path '{relative}' escapes the vault root.")

    try:
        target = candidate.resolve(strict=False)
    except (OSError, RuntimeError) as exc:
        raise InvalidPath(f"Path '{relative}' cannot be resolved: {exc}") from exc

    if not target.is_relative_to(vault_root):
        raise InvalidPath(f"Path '{relative}' escapes the vault root.")

    return candidate


def resolve_note_path(vault: Vault, relative: str) -> Path:
    """Resolve a note identifier (with or without ``.md``) inside the vault."""
    if not isinstance(relative, str) or not relative.strip():
        raise InvalidPath("Note path cannot be empty.")
    return resolve_vault_path(vault, construct_note_path(relative))


def resolve_folder_path(vault: Vault, folder: Optional[str]) -> Path:
    """Resolve an optional folder path, defaulting to the vault root.

    Raises:
        InvalidPath: If ``folder`` escapes the vault.
        NotFound: If the folder does not exist or is not a directory.
    """
    ensure_vault_ready(vault)
    if folder is None:
        return vault.path.resolve(strict=False)

    target = resolve_vault_path(vault, folder)
    if not target.is_dir():
        raise NotFound(f"Folder '{folder}' not found in vault '{vault.name}'.")
    return target


def note_display_name(vault: Vault, path: Path) -> str:
    """Convert an absolute vault path into a forward-slash relative path.

    The vault root itself renders as ``"."``.
    """
    relative = path.relative_to(vault.path.resolve(strict=False))
    return relative.as_posix()


# ==============================================================================
# TRAVERSAL
# ==============================================================================


def is_markdown_file(path: Path) -> bool:
    """Return True for regular, non-symlinked ``.md`` files."""
    return (
        path.suffix.lower() == NOTE_SUFFIX
        and not path.is_symlink()
        and path.is_file()
    )


def sorted_entries(folder: Path) -> list[Path]:
    """Return the entries of ``folder`` sorted by name.

    Raises:
        IOFailure: If the directory cannot be listed.
    """
    try:
        return sorted(folder.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise IOFailure(f"Could not list folder '{folder}': {exc}") from exc


def iter_markdown_files(folder: Path, recursive: bool = True) -> Iterator[Path]:
    """Yield markdown files under ``folder`` depth-first, in name order.

    Symlinks are never followed, so the walk cannot leave the vault or loop.
    """
    for entry in sorted_entries(folder):
        if entry.is_symlink():
            logger.debug("Skipping symlink '%s'", entry)
            continue
        if entry.is_dir():
            if recursive:
                yield from iter_markdown_files(entry, recursive=True)
        elif is_markdown_file(entry):
            yield entry


# ==============================================================================
# FILE I/O
# ==============================================================================


def read_note_text(path: Path) -> str:
    """Read a note as UTF-8 text without newline translation.

    Raises:
        IOFailure: If the file cannot be read or is not valid UTF-8.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise IOFailure(f"Note '{path.name}' is not UTF-8 encoded and cannot be processed.") from exc
    except OSError as exc:
        raise IOFailure(f"Could not read note '{path.name}': {exc}") from exc


def _file_mode(path: Path) -> int:
    """Permission bits for a rewrite of ``path``: its current mode, else 0666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` via a temp file in the same folder and a rename.

    Readers see either the previous content or the new content, never a
    partially written file. An existing file keeps its permission bits, and a
    symlink at ``path`` is written through to its target.

    Raises:
        IOFailure: If the parent folder cannot be created or the write fails.
    """
    if path.is_symlink():
        path = path.resolve(strict=False)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=path.parent,
        )
    except OSError as exc:
        raise IOFailure(f"Could not prepare write for '{path.name}': {exc}") from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        os.chmod(tmp_path, _file_mode(path))
        os.replace(tmp_path, path)
    except (OSError, UnicodeError) as exc:
        _discard(tmp_path)
        raise IOFailure(f"Could not write note '{path.name}': {exc}") from exc
    except Exception:
        _discard(tmp_path)
        raise


def _discard(tmp_path: str) -> None:
    if os.path.exists(tmp_path):
        os.unlink(tmp_path)
