"""Data models for the vault and the values returned by core operations."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class Vault:
    """The configured vault root.

    ``path`` is absolute and resolved once at load time; every note path is
    resolved against it.
    """

    name: str
    path: Path


@dataclass
class Note:
    """A persisted note: optional frontmatter plus markdown body."""

    path: str
    absolute_path: Path
    metadata: dict[str, Any]
    body: str
    content: str

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "path": self.path,
            "absolute_path": str(self.absolute_path),
            "metadata": self.metadata,
            "body": self.body,
            "content": self.content,
        }


@dataclass(frozen=True)
class LineHit:
    """A single matching line. ``line`` is 1-based within ``section``."""

    line: int
    text: str
    section: str = "body"

    def as_payload(self) -> dict[str, Any]:
        return {"line": self.line, "text": self.text, "section": self.section}


@dataclass
class SearchMatch:
    """All matching lines found in one note."""

    path: str
    hits: list[LineHit] = field(default_factory=list)

    def as_payload(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "hits": [hit.as_payload() for hit in self.hits],
        }


@dataclass
class SearchResults:
    """Outcome of a search: matches in traversal order plus skipped files.

    ``skipped`` holds ``{"path", "error"}`` entries for notes that could not be
    read or parsed. They do not abort the search but are reported here.
    """

    query: str
    matches: list[SearchMatch] = field(default_factory=list)
    skipped: list[dict[str, str]] = field(default_factory=list)

    def as_payload(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "matches": [match.as_payload() for match in self.matches],
            "skipped": list(self.skipped),
        }


@dataclass
class VaultNode:
    """Node of the vault structure tree (a markdown file or a directory)."""

    name: str
    path: str
    type: str
    children: Optional[list[VaultNode]] = None

    def as_payload(self) -> dict[str, Any]:
        """Return a nested, serializable payload representation."""
        payload: dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "type": self.type,
        }
        if self.children is not None:
            payload["children"] = [child.as_payload() for child in self.children]
        return payload
