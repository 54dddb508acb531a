"""Filesystem helpers for writing the site content directory."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class SiteFileSystem:
    """Writes into the vault, refusing any path that escapes it."""

    def __init__(self, vault_path: Path, dry_run: bool = False) -> None:
        self.vault_path = vault_path.resolve()
        self.dry_run = dry_run

    def validate_path(self, path: str | Path) -> Path:
        """Resolve a vault-relative path and make sure it stays inside the vault."""
        path = str(path)
        if path.startswith("/"):
            path = path[1:]

        full_path = (self.vault_path / path).resolve()

        try:
            full_path.relative_to(self.vault_path)
        except ValueError as e:
            raise ValueError(f"Path escapes vault: {path}") from e

        if full_path == self.vault_path:
            raise ValueError(f"Refusing to use the vault root as an output directory: {path!r}")

        return full_path

    def reset_directory(self, path: str | Path) -> Path:
        """Delete a directory (if present) and recreate it empty."""
        full_path = self.validate_path(path)

        if self.dry_run:
            logger.info(f"[dry] reset {full_path.relative_to(self.vault_path)}/")
            return full_path

        if full_path.exists():
            shutil.rmtree(full_path)
        full_path.mkdir(parents=True, exist_ok=True)
        return full_path

    def write_text(self, path: str | Path, content: str) -> Path:
        """Write a file, creating parent directories as needed."""
        full_path = self.validate_path(path)

        if self.dry_run:
            logger.info(f"[dry] write {full_path.relative_to(self.vault_path)}")
            return full_path

        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
        return full_path

    def copy_file(self, source: str | Path, dest: str | Path) -> Path:
        """Copy a vault file to another location inside the vault."""
        source_path = self.vault_path / source
        dest_path = self.validate_path(dest)

        if self.dry_run:
            logger.info(f"[dry] copy {source} -> {dest_path.relative_to(self.vault_path)}")
            return dest_path

        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source_path, dest_path)
        return dest_path
