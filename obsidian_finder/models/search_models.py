"""Pydantic input models for search and discovery operations.

This module defines input models for search and discovery tools:
- Search note contents line by line
- List notes in the vault or a folder
"""

from __future__ import annotations

from pydantic import ConfigDict, Field, field_validator

from .base import BaseFolderInput


class SearchNotesInput(BaseFolderInput):
    """Input model for search_notes tool.

    Substring search over note bodies (and optionally frontmatter). Results
    are line-level hits in traversal order.

    Examples:
        >>> SearchNotesInput(query="hello")
        >>> SearchNotesInput(query="status: draft", include_frontmatter=True, case_sensitive=True)
    """

    query: str = Field(
        min_length=1,
        description=(
            "Search query. Matched as a substring against each line. "
            "Examples: 'meeting', 'TODO', 'status: draft'"
        )
    )

    include_frontmatter: bool = Field(
        False,
        description="Include frontmatter in search."
    )

    case_sensitive: bool = Field(
        False,
        description="Case sensitive search."
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate search query is not empty."""
        if not v.strip():
            raise ValueError(
                "Search query cannot be empty. "
                "Provide a search term to find in note contents."
            )
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"query": "meeting"},
                {"query": "Draft", "includeFrontmatter": True, "caseSensitive": True, "path": "Projects"}
            ]
        }
    )


class ListNotesInput(BaseFolderInput):
    """Input model for list_notes tool.

    Examples:
        >>> ListNotesInput()
        >>> ListNotesInput(path="Projects", recursive=True)
    """

    recursive: bool = Field(
        False,
        description="List files recursively (depth-first, sorted by name)."
    )
