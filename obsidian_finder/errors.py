"""Domain errors raised by the note repository.

Every core operation fails with one of these. The tool layer turns them into
``INVALID_REQUEST`` protocol errors; anything else escalates unmodified.
"""


class ObsidianError(Exception):
    """Base class for all vault errors. ``str(error)`` is shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPath(ObsidianError):
    """Path is empty, malformed, or resolves outside the vault root."""


class NotFound(ObsidianError):
    """Referenced note or folder does not exist."""


class AlreadyExists(ObsidianError):
    """Create or move target already exists."""


class MetadataParseError(ObsidianError):
    """Frontmatter is present but is not a valid YAML mapping."""


class IOFailure(ObsidianError):
    """Underlying read, write or rename failed."""
