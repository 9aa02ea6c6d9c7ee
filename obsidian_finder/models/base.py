"""Base Pydantic models for MCP tool input validation.

This module defines base models that provide common validation patterns
for note and folder operations. Other input models inherit from these bases.

Base Models:
- BaseToolInput: Shared configuration (camelCase wire names, snake_case attributes)
- BaseNoteInput: Adds a required note ``path``
- BaseFolderInput: Adds an optional folder ``path`` (omit for the vault root)

Only shape is validated here. Containment in the vault and existence checks
happen in the core operations, which know the vault contents.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def validate_relative_path(value: str, label: str = "Path") -> str:
    """Shared shape validation for vault-relative paths.

    Enforces:
    - Non-empty after stripping whitespace
    - No null bytes
    - Relative path only (no leading '/')

    Args:
        value: The path to validate
        label: Field label used in error messages

    Returns:
        The stripped path

    Raises:
        ValueError: If the path is empty, contains null bytes, or is absolute
    """
    cleaned = value.strip()

    if not cleaned:
        raise ValueError(
            f"{label} cannot be empty. "
            "Provide a path relative to the vault root like 'Projects/Plan.md'."
        )

    if "\x00" in cleaned:
        raise ValueError(f"{label} cannot contain null bytes.")

    if cleaned.startswith("/"):
        raise ValueError(
            f"{label} must be a relative path within the vault. "
            "Do not start with '/'. "
            f"Invalid path: '{cleaned}'"
        )

    return cleaned


class BaseToolInput(BaseModel):
    """Common configuration for every tool input model.

    Fields are exposed in camelCase to MCP clients (``updateMetadata``,
    ``caseSensitive``) and accepted in snake_case from Python callers.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BaseNoteInput(BaseToolInput):
    """Base model for operations targeting a single note."""

    path: str = Field(
        min_length=1,
        description=(
            "Path to the note relative to vault root. "
            "The .md extension is optional. "
            "Examples: 'Daily Notes/2025-10-27.md', 'Projects/New Project'."
        ),
        examples=["Daily Notes/2025-10-27.md", "Projects/New Project", "README"]
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate the note path shape."""
        return validate_relative_path(v, "Note path")


class BaseFolderInput(BaseToolInput):
    """Base model for operations with an optional starting folder."""

    path: Optional[str] = Field(
        None,
        description=(
            "Subfolder path relative to vault root. "
            "Omit to use the vault root."
        ),
        examples=["Projects", "Daily Notes/2025"]
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: Optional[str]) -> Optional[str]:
        """Validate folder path; blank values mean the vault root."""
        if v is None or not v.strip() or v.strip() in {".", "./"}:
            return None
        return validate_relative_path(v, "Folder path")
