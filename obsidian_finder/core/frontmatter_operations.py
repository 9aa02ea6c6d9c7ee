"""YAML frontmatter codec and metadata operations."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

import yaml
from frontmatter.default_handlers import YAMLHandler

from obsidian_finder.constants import FRONTMATTER_DELIMITER, MAX_FRONTMATTER_BYTES
from obsidian_finder.core.vault_operations import (
    ensure_vault_ready,
    note_display_name,
    read_note_text,
    resolve_note_path,
)
from obsidian_finder.data_models import Note, Vault
from obsidian_finder.errors import MetadataParseError, NotFound

logger = logging.getLogger(__name__)


class NoteYAMLHandler(YAMLHandler):
    """YAML frontmatter handler whose delimiter never swallows blank lines.

    The stock boundary pattern allows trailing ``\\s*`` on the delimiter line,
    which eats empty lines at the top of the body. Restricting it to
    horizontal whitespace keeps the body byte-for-byte intact.
    """

    FM_BOUNDARY = re.compile(r"^-{3,}[ \t]*\r?$", re.MULTILINE)


_HANDLER = NoteYAMLHandler()


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _convert(value: Any) -> Any:
    """Normalize YAML-loaded values into plain JSON-friendly Python values."""
    if isinstance(value, Mapping):
        return {str(k): _convert(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_convert(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def _strip_leading_newline(text: str) -> str:
    if text.startswith("\r\n"):
        return text[2:]
    if text.startswith("\n"):
        return text[1:]
    return text


# ==============================================================================
# CODEC
# ==============================================================================


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split raw note text into ``(metadata, body)``.

    Args:
        text: Raw markdown text, possibly starting with a frontmatter block.

    Returns:
        A tuple of ``(metadata, body)``. When the text has no frontmatter block
        (or the opening delimiter is never closed) ``metadata`` is empty and
        ``body`` is ``text`` unchanged.

    Raises:
        MetadataParseError: If the block exists but is not a YAML mapping.
    """
    if not text or not _HANDLER.detect(text):
        return {}, text

    try:
        raw_block, remainder = _HANDLER.split(text)
    except ValueError:
        return {}, text

    try:
        loaded = _HANDLER.load(raw_block)
    except yaml.YAMLError as exc:
        raise MetadataParseError(f"Frontmatter contains invalid YAML: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, Mapping):
        raise MetadataParseError(
            f"Frontmatter must be a mapping of key/value pairs, got {type(loaded).__name__}."
        )

    return _convert(loaded), _strip_leading_newline(remainder)


def serialize_frontmatter(metadata: Mapping[str, Any], body: str) -> str:
    """Serialize metadata and body back into note text.

    Args:
        metadata: Frontmatter mapping. Empty mapping omits the block.
        body: Markdown body (without frontmatter).

    Returns:
        ``body`` alone when ``metadata`` is empty, otherwise a delimited YAML
        block (keys in insertion order) followed by ``body``. A body that
        itself opens with a delimiter line gets an empty block in front so it
        is never read back as metadata.

    Raises:
        MetadataParseError: If the metadata cannot be represented as YAML.
    """
    if not metadata:
        if body and _HANDLER.detect(body):
            return f"{FRONTMATTER_DELIMITER}\n{FRONTMATTER_DELIMITER}\n{body}"
        return body

    try:
        block = _HANDLER.export(dict(metadata), sort_keys=False)
    except yaml.YAMLError as exc:
        raise MetadataParseError(f"Frontmatter cannot be serialized to YAML: {exc}") from exc

    return f"{FRONTMATTER_DELIMITER}\n{block}\n{FRONTMATTER_DELIMITER}\n{body}"


def frontmatter_text(metadata: Mapping[str, Any]) -> str:
    """Return the canonical YAML text of ``metadata`` without delimiters."""
    if not metadata:
        return ""
    return _HANDLER.export(dict(metadata), sort_keys=False)


def merge_frontmatter(existing: Mapping[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow-merge ``incoming`` onto ``existing`` without mutating either.

    Incoming keys overwrite same-named keys; existing keys missing from
    ``incoming`` are retained. Existing keys keep their position, new keys
    are appended.
    """
    merged = dict(existing)
    merged.update(incoming)
    return merged


def validate_frontmatter(metadata: Any) -> dict[str, Any]:
    """Sanitize caller-supplied metadata prior to serialization.

    Coerces dates to ISO strings and tuples to lists, enforces string keys,
    and rejects values outside the supported kinds (str, int, float, bool,
    None, list, mapping). Also enforces a size limit on the serialized block.

    Args:
        metadata: Mapping supplied by the caller.

    Returns:
        A new, sanitized dictionary in the same key order.

    Raises:
        MetadataParseError: If the metadata is not a mapping, contains invalid
            keys or types, or exceeds the permitted size.
    """
    if not isinstance(metadata, Mapping):
        raise MetadataParseError("Frontmatter must be a dictionary of key/value pairs.")

    def _sanitize(value: Any, path: str) -> Any:
        if isinstance(value, (str, int, float, bool)) or value is None:
            return value
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        if isinstance(value, (list, tuple)):
            return [_sanitize(item, f"{path}[{index}]") for index, item in enumerate(value)]
        if isinstance(value, Mapping):
            nested: dict[str, Any] = {}
            for sub_key, sub_value in value.items():
                if not isinstance(sub_key, str) or not sub_key.strip():
                    raise MetadataParseError(f"Frontmatter key '{path}.{sub_key}' must be a non-empty string.")
                nested[sub_key] = _sanitize(sub_value, f"{path}.{sub_key}")
            return nested
        raise MetadataParseError(f"Frontmatter field '{path}' uses unsupported type '{type(value).__name__}'.")

    sanitized: dict[str, Any] = {}
    for key, value in metadata.items():
        if not isinstance(key, str) or not key.strip():
            raise MetadataParseError("Frontmatter keys must be non-empty strings.")
        sanitized[key] = _sanitize(value, key)

    dumped = frontmatter_text(sanitized)
    if len(dumped.encode("utf-8")) > MAX_FRONTMATTER_BYTES:
        raise MetadataParseError(
            f"Frontmatter exceeds maximum size of {MAX_FRONTMATTER_BYTES // 1024}KB."
        )

    return sanitized


# ==============================================================================
# NOTE LOADING
# ==============================================================================


def note_from_text(vault: Vault, target_path: Path, text: str) -> Note:
    """Build a :class:`Note` from raw stored text."""
    metadata, body = parse_frontmatter(text)
    return Note(
        path=note_display_name(vault, target_path),
        absolute_path=target_path,
        metadata=metadata,
        body=body,
        content=text,
    )


def load_note(vault: Vault, path: str) -> Note:
    """Resolve, read and parse an existing note.

    Raises:
        InvalidPath: If ``path`` escapes the vault.
        NotFound: If the note does not exist.
        IOFailure: If the file cannot be read or decoded.
        MetadataParseError: If its frontmatter is malformed.
    """
    ensure_vault_ready(vault)
    target_path = resolve_note_path(vault, path)
    if not target_path.is_file():
        raise NotFound(f"Note '{path}' not found in vault '{vault.name}'.")

    return note_from_text(vault, target_path, read_note_text(target_path))


# ==============================================================================
# FRONTMATTER OPERATIONS
# ==============================================================================


def get_metadata(vault: Vault, path: str) -> dict[str, Any]:
    """Return the frontmatter mapping of a note, discarding its body.

    Args:
        vault: Vault metadata.
        path: Note path relative to the vault root.

    Returns:
        The metadata mapping; empty when the note has no frontmatter.
    """
    note = load_note(vault, path)
    logger.debug("Read frontmatter for note '%s' (%d fields)", note.path, len(note.metadata))
    return note.metadata


def split_incoming_content(content: str, update_metadata: bool) -> tuple[Optional[dict[str, Any]], str]:
    """Interpret edit content as ``(incoming_metadata, body)``.

    With ``update_metadata`` the content is parsed for an embedded frontmatter
    block; otherwise the whole content is the body and no metadata is taken.
    """
    if not update_metadata:
        return None, content

    incoming, body = parse_frontmatter(content)
    return validate_frontmatter(incoming), body
