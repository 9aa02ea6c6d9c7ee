"""Module-level constants for the Obsidian Finder MCP server."""

# Configuration
VAULT_PATH_ENV = "OBSIDIAN_VAULT_PATH"
LOG_LEVEL_ENV = "OBSIDIAN_FINDER_LOG_LEVEL"

# Server identity
SERVER_NAME = "obsidian-finder"

# Notes
NOTE_SUFFIX = ".md"
FRONTMATTER_DELIMITER = "---"

# Limits
MAX_FRONTMATTER_BYTES = 10_240

# Logging
LOG_LEVEL = "INFO"
