"""Vault scanning and publishing to the site content directory."""

from .corpus import VaultCorpus
from .engine import SyncEngine, SyncResult
from .fs import SiteFileSystem

__all__ = [
    "SiteFileSystem",
    "SyncEngine",
    "SyncResult",
    "VaultCorpus",
]
