"""Resolve wikilink targets to note paths."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .note_index import NoteIndex, strip_md_suffix

logger = logging.getLogger(__name__)


class ResolutionStatus(Enum):
    """Outcome of resolving one link target."""

    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"  # several notes share the basename; first one used
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolutionResult:
    """Result of resolving a single link target."""

    target: str
    status: ResolutionStatus
    path: str | None = None
    candidates: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.path is not None

    @property
    def is_ambiguous(self) -> bool:
        return self.status is ResolutionStatus.AMBIGUOUS


class LinkResolver:
    """Maps ``[[target]]`` strings onto the notes of one sync run.

    Targets containing a ``/`` are tried as vault-relative paths first. Bare
    names, and paths that matched nothing, are looked up by basename. When a
    basename is shared, the note scanned first wins and a warning is logged.
    """

    def __init__(self, index: NoteIndex, all_paths: Iterable[str]) -> None:
        self.index = index
        self.all_paths = tuple(all_paths)

    def resolve(self, target: str) -> ResolutionResult:
        target = target.strip()
        if not target:
            logger.warning("Link resolution failed: empty link target")
            return ResolutionResult(target=target, status=ResolutionStatus.UNRESOLVED)

        normalized = strip_md_suffix(target)

        if "/" in target:
            path = self._resolve_path(normalized)
            if path is not None:
                return ResolutionResult(
                    target=target,
                    status=ResolutionStatus.RESOLVED,
                    path=path,
                    candidates=(path,),
                )

        return self._resolve_basename(target, normalized)

    def _resolve_path(self, normalized: str) -> str | None:
        """Exact vault-relative path lookup."""
        if self.index.has_path(normalized):
            return normalized

        # Slow path for corpus entries that were not indexed as given
        for note_path in self.all_paths:
            if strip_md_suffix(note_path) == normalized:
                return normalized

        return None

    def _resolve_basename(self, target: str, basename: str) -> ResolutionResult:
        matches = self.index.candidates(basename)

        if not matches:
            logger.warning(f'Link resolution failed: "{target}" - note not found')
            return ResolutionResult(target=target, status=ResolutionStatus.UNRESOLVED)

        if len(matches) > 1:
            logger.warning(
                f'Link resolution ambiguous: "{target}" matches multiple notes: '
                f"{', '.join(matches)}; using {matches[0]}"
            )
            return ResolutionResult(
                target=target,
                status=ResolutionStatus.AMBIGUOUS,
                path=matches[0],
                candidates=matches,
            )

        return ResolutionResult(
            target=target,
            status=ResolutionStatus.RESOLVED,
            path=matches[0],
            candidates=matches,
        )
