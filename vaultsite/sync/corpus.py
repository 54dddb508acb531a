"""Vault scanner - lists the notes a sync run starts from."""

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class VaultCorpus:
    """Markdown notes of a vault, addressed by vault-relative POSIX paths."""

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path

    def paths(self) -> list[str]:
        """All note paths in scan order (sorted, hidden folders skipped)."""
        found = []
        for md_file in self.vault_path.rglob("*.md"):
            rel = md_file.relative_to(self.vault_path)
            # Skip hidden folders
            if any(part.startswith(".") for part in rel.parts):
                continue
            if not md_file.is_file():
                continue
            found.append(rel.as_posix())

        found.sort()
        logger.debug(f"Found {len(found)} notes in {self.vault_path}")
        return found

    def read(self, path: str) -> str:
        return (self.vault_path / path).read_text(encoding="utf-8")

    def files(self, extensions: frozenset[str]) -> list[str]:
        """Non-note files with one of the given extensions (no leading dot)."""
        found = []
        for file_path in self.vault_path.rglob("*"):
            rel = file_path.relative_to(self.vault_path)
            if any(part.startswith(".") for part in rel.parts):
                continue
            if not file_path.is_file():
                continue
            if file_path.suffix.lower().lstrip(".") in extensions:
                found.append(rel.as_posix())
        return sorted(found)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield ``(path, text)`` pairs for every note."""
        for path in self.paths():
            yield path, self.read(path)
