"""Pydantic input models for vault structure operations."""

from __future__ import annotations

from .base import BaseFolderInput


class VaultStructureInput(BaseFolderInput):
    """Input model for get_vault_structure tool.

    Examples:
        >>> VaultStructureInput()
        >>> VaultStructureInput(path="Projects")
    """
