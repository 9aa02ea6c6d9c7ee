import pytest

from obsidian_finder.config import get_vault
from obsidian_finder.data_models import Vault


@pytest.fixture
def vault(tmp_path):
    """An empty vault rooted in a fresh temporary directory."""
    vault_path = tmp_path / "vault"
    vault_path.mkdir()
    return Vault(name="test", path=vault_path.resolve())


@pytest.fixture
def write_note(vault):
    """Write raw text to a vault-relative path, creating folders as needed."""

    def _write(relative: str, content: str):
        note_path = vault.path / relative
        note_path.parent.mkdir(parents=True, exist_ok=True)
        note_path.write_text(content, encoding="utf-8")
        return note_path

    return _write


@pytest.fixture
def configured_vault(vault, monkeypatch):
    """Point OBSIDIAN_VAULT_PATH at the temporary vault for tool-level tests."""
    monkeypatch.setenv("OBSIDIAN_VAULT_PATH", str(vault.path))
    get_vault.cache_clear()
    yield vault
    get_vault.cache_clear()
