"""Sync engine - publishes selected notes into the site content directory."""

import logging
from dataclasses import dataclass
from pathlib import Path

from vaultsite.config import PublishConfig
from vaultsite.publish import (
    ContentRewriter,
    build_index,
    is_excluded,
    normalize_path,
    select_notes,
)
from vaultsite.publish.note_index import MD_SUFFIX, strip_md_suffix
from vaultsite.publish.rewriter import IMAGE_EXTENSIONS, asset_name

from .corpus import VaultCorpus
from .fs import SiteFileSystem

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Counts reported at the end of a sync run."""

    synced: int = 0
    skipped: int = 0
    unresolved: int = 0
    ambiguous: int = 0
    assets: int = 0

    def to_dict(self) -> dict:
        return {
            "synced": self.synced,
            "skipped": self.skipped,
            "unresolved": self.unresolved,
            "ambiguous": self.ambiguous,
            "assets": self.assets,
        }


class SyncEngine:
    """Runs one publish pass over a vault.

    Every run scans the vault, selects notes, builds a fresh index, and
    rewrites each selected note into ``content_dir``. Read and write errors
    propagate to the caller.
    """

    def __init__(self, vault_path: Path, config: PublishConfig, dry_run: bool = False) -> None:
        self.vault_path = vault_path
        self.config = config
        self.dry_run = dry_run
        self.corpus = VaultCorpus(vault_path)
        self.fs = SiteFileSystem(vault_path, dry_run=dry_run)

    def is_output(self, path: str) -> bool:
        """True for files this engine itself writes."""
        path = normalize_path(path)
        for output_dir in (self.config.content_dir, self.config.assets_dir):
            output_dir = normalize_path(output_dir)
            if output_dir and (path == output_dir or path.startswith(f"{output_dir}/")):
                return True
        return False

    def note_paths(self) -> list[str]:
        """Every note in the vault except previously published output."""
        return [path for path in self.corpus.paths() if not self.is_output(path)]

    def selected_notes(self) -> list[str]:
        """Notes that pass the include/exclude rules, in scan order."""
        return select_notes(self.note_paths(), self.config)

    def output_path(self, note_path: str) -> str:
        """Vault-relative destination of a published note.

        Notes keep their vault path so files line up with the link URLs.
        """
        return f"{self.config.content_dir.rstrip('/')}/{strip_md_suffix(note_path)}{MD_SUFFIX}"

    def sync(self) -> SyncResult:
        all_paths = self.note_paths()
        logger.info(f"Scanning vault: {self.vault_path} ({len(all_paths)} notes)")

        to_sync = select_notes(all_paths, self.config)
        if not to_sync:
            logger.error("No notes to sync. Check your include/exclude settings.")
            return SyncResult(synced=0, skipped=len(all_paths))

        self.fs.reset_directory(self.config.content_dir)

        index = build_index(to_sync)
        rewriter = ContentRewriter(index, to_sync, self.config)
        for name, found in index.ambiguous().items():
            logger.debug(f"Basename {name!r} is shared by {len(found)} notes")

        result = SyncResult(skipped=len(all_paths) - len(to_sync))
        for note_path in to_sync:
            rewritten = rewriter.rewrite_note(self.corpus.read(note_path))
            result.unresolved += len(rewritten.unresolved)
            result.ambiguous += len(rewritten.ambiguous)

            dest = self.output_path(note_path)
            self.fs.write_text(dest, rewritten.text)
            result.synced += 1
            logger.debug(f"  {note_path} -> {dest}")

        logger.info(
            f"Synced {result.synced} notes to {self.config.content_dir} "
            f"({result.skipped} skipped, {result.unresolved} unresolved links, "
            f"{result.ambiguous} ambiguous links)"
        )
        return result

    def copy_assets(self) -> int:
        """Copy published images into ``assets_dir``, flattened by file name.

        Embedded images are linked as ``/assets/<name>``, so two images with
        the same name in different folders cannot both be published; the first
        in scan order is kept. The directory is rebuilt on every call so
        removed images stop being published.
        """
        self.fs.reset_directory(self.config.assets_dir)
        copied: dict[str, str] = {}

        for source in self.corpus.files(IMAGE_EXTENSIONS):
            if self.is_output(source) or is_excluded(source, self.config.exclude):
                continue

            name = asset_name(source)
            if name in copied:
                logger.warning(f"Asset name clash: {source} skipped, already copied {copied[name]}")
                continue

            self.fs.copy_file(source, f"{self.config.assets_dir.rstrip('/')}/{name}")
            copied[name] = source

        logger.info(f"Copied {len(copied)} assets to {self.config.assets_dir}")
        return len(copied)
