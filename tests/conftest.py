"""Shared test fixtures."""

from pathlib import Path

import pytest

from vaultsite.config import PublishConfig


@pytest.fixture
def config() -> PublishConfig:
    """Publish config with the original default routes."""
    return PublishConfig(base_route="/notes", slug_style="original")


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault directory with sample notes."""
    vault = tmp_path / "vault"
    vault.mkdir()

    (vault / "Home.md").write_text("# Home\n\nSee [[todo]] and [[Ideas|my ideas]].\n")
    (vault / "Ideas.md").write_text("# Ideas\n\n![[diagram.png]]\n\n![[missing-note]]\n")

    notes = vault / "notes"
    notes.mkdir()
    (notes / "todo.md").write_text("- [ ] Publish the vault\n\nBack to [[Home]]")

    # Duplicate basename in two folders
    (vault / "a").mkdir()
    (vault / "b").mkdir()
    (vault / "a" / "x.md").write_text("first x")
    (vault / "b" / "x.md").write_text("second x links [[x]]")

    # Excluded by default config
    private = vault / "private"
    private.mkdir()
    (private / "secret.md").write_text("do not publish")

    obsidian = vault / ".obsidian"
    obsidian.mkdir()
    (obsidian / "workspace.md").write_text("hidden")

    attachments = vault / "attachments"
    attachments.mkdir()
    (attachments / "diagram.png").write_bytes(b"\x89PNG\r\n")

    return vault
