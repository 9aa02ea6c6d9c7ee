"""Pydantic input models for note CRUD operations.

This module defines input models for basic note management operations:
- Create new notes
- Edit note content
- Move/rename notes
- Delete notes
"""

from __future__ import annotations

from typing import Any, Optional
from pydantic import ConfigDict, Field, field_validator, model_validator

from .base import BaseNoteInput, BaseToolInput, validate_relative_path


class CreateNoteInput(BaseNoteInput):
    """Input model for create_note tool.

    Creates a new markdown file with optional frontmatter. Fails if the note
    already exists. Parent folders are created automatically.

    Examples:
        >>> CreateNoteInput(path="Projects/New Project.md", content="# New Project")
        >>> CreateNoteInput(path="a/b.md", content="hello", metadata={"tag": "x"})
    """

    content: str = Field(
        description=(
            "Note content in markdown format. "
            "Can be empty string to create a blank note."
        )
    )

    metadata: Optional[dict[str, Any]] = Field(
        None,
        description="Optional YAML frontmatter metadata written before the content.",
        examples=[{"tags": ["project"], "status": "active"}]
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "path": "Projects/New Project.md",
                    "content": "# New Project\n\nGoals:\n- Goal 1",
                    "metadata": {"status": "planned"}
                }
            ]
        }
    )


class EditNoteInput(BaseNoteInput):
    """Input model for edit_note tool.

    Replaces the body of an existing note. By default the existing
    frontmatter is kept untouched. With ``update_metadata`` the content may
    begin with its own frontmatter block, whose fields are merged onto the
    existing ones.

    Examples:
        >>> EditNoteInput(path="My Note.md", content="world")
        >>> EditNoteInput(path="My Note.md", content="---\\nstatus: done\\n---\\nBody", update_metadata=True)
    """

    content: str = Field(
        description=(
            "New note content in markdown format. "
            "With updateMetadata, a leading frontmatter block is merged into the note's metadata."
        )
    )

    update_metadata: bool = Field(
        False,
        description=(
            "If True, merge frontmatter embedded in content into existing frontmatter. "
            "If False, keep existing frontmatter and replace only the body."
        )
    )


class MoveNoteInput(BaseToolInput):
    """Input model for move_note tool.

    Moves or renames a note. Content is preserved byte-for-byte.

    Examples:
        >>> MoveNoteInput(old_path="Old Name.md", new_path="Archive/Old Name.md")
    """

    old_path: str = Field(
        min_length=1,
        description="Current path relative to vault root. Example: 'Inbox/Idea.md'"
    )

    new_path: str = Field(
        min_length=1,
        description="New path relative to vault root. Example: 'Projects/Idea.md'"
    )

    @field_validator('old_path', 'new_path')
    @classmethod
    def validate_paths(cls, v: str) -> str:
        """Validate both note paths using the shared path rules."""
        return validate_relative_path(v, "Note path")

    @model_validator(mode='after')
    def validate_paths_different(self) -> 'MoveNoteInput':
        """Validate that old_path and new_path are different."""
        if self.old_path == self.new_path:
            raise ValueError(
                "Old path and new path must be different. "
                f"Both are set to '{self.old_path}'."
            )
        return self


class DeleteNoteInput(BaseNoteInput):
    """Input model for delete_note tool.

    Permanently removes a single note file. No trash, no undo.
    """


class GetMetadataInput(BaseNoteInput):
    """Input model for get_metadata tool."""
