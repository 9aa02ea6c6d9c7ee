"""Configuration loading for the vault root."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from obsidian_finder.constants import VAULT_PATH_ENV
from obsidian_finder.data_models import Vault

logger = logging.getLogger(__name__)


def load_vault(environ: Optional[Mapping[str, str]] = None) -> Vault:
    """Load and validate the vault root from the environment.

    Args:
        environ: Mapping to read settings from. Defaults to ``os.environ``.

    Returns:
        A :class:`Vault` whose path is absolute and resolved.

    Raises:
        ValueError: If ``OBSIDIAN_VAULT_PATH`` is unset or blank, or does not
            point at an existing directory.
    """
    env = os.environ if environ is None else environ

    raw_path = env.get(VAULT_PATH_ENV, "")
    if not raw_path.strip():
        raise ValueError(f"{VAULT_PATH_ENV} environment variable is required")

    resolved_path = Path(raw_path.strip()).expanduser()
    try:
        resolved_path = resolved_path.resolve(strict=False)
    except RuntimeError:
        # resolve can raise on symlink loops; fall back to the expanded path
        resolved_path = resolved_path.absolute()

    if not resolved_path.is_dir():
        raise ValueError(f"{VAULT_PATH_ENV} does not point to a directory: {resolved_path}")

    vault = Vault(name=resolved_path.name or str(resolved_path), path=resolved_path)
    logger.debug("Loaded vault '%s' at %s", vault.name, vault.path)
    return vault


@lru_cache(maxsize=1)
def get_vault() -> Vault:
    """Return the process-wide vault, loading it on first use."""
    return load_vault()
