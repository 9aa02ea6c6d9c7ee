"""Pydantic input models for MCP tool validation.

This package defines Pydantic models that validate the arguments of every
MCP tool once, at the boundary, before they reach the core operations.

Architecture:
- base: Shared configuration and path validation (BaseNoteInput, BaseFolderInput)
- note_models: Input models for note CRUD and metadata operations
- search_models: Input models for search and listing
- vault_models: Input models for vault structure

Usage:
    from obsidian_finder.models import CreateNoteInput, SearchNotesInput
"""

from .base import BaseToolInput, BaseNoteInput, BaseFolderInput
from .note_models import (
    CreateNoteInput,
    EditNoteInput,
    MoveNoteInput,
    DeleteNoteInput,
    GetMetadataInput,
)
from .search_models import (
    SearchNotesInput,
    ListNotesInput,
)
from .vault_models import VaultStructureInput

__all__ = [
    # Base models
    "BaseToolInput",
    "BaseNoteInput",
    "BaseFolderInput",
    # Note models
    "CreateNoteInput",
    "EditNoteInput",
    "MoveNoteInput",
    "DeleteNoteInput",
    "GetMetadataInput",
    # Search models
    "SearchNotesInput",
    "ListNotesInput",
    # Vault models
    "VaultStructureInput",
]
