"""Basename index over the notes selected for one sync run."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

MD_SUFFIX = ".md"


def strip_md_suffix(path: str) -> str:
    """Drop a trailing ``.md``; the suffix is not part of a note's identity."""
    if path.endswith(MD_SUFFIX):
        return path[: -len(MD_SUFFIX)]
    return path


def basename_of(path: str) -> str:
    """Last path segment without ``.md``. Empty for degenerate paths."""
    return strip_md_suffix(path).split("/")[-1]


@dataclass(frozen=True)
class NoteIndex:
    """Basename -> note paths, in the order the notes were scanned.

    Built once per run by :func:`build_index` and read-only afterwards, so one
    index can be shared by any number of rewriters.
    """

    by_basename: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    paths: frozenset[str] = frozenset()

    def candidates(self, basename: str) -> tuple[str, ...]:
        return self.by_basename.get(basename, ())

    def has_path(self, path: str) -> bool:
        return strip_md_suffix(path) in self.paths

    def ambiguous(self) -> dict[str, tuple[str, ...]]:
        """Basenames shared by more than one note."""
        return {name: found for name, found in self.by_basename.items() if len(found) > 1}

    def basenames(self) -> list[str]:
        return list(self.by_basename)

    def __len__(self) -> int:
        """Number of indexed note paths."""
        return len(self.paths)


def build_index(paths: Iterable[str]) -> NoteIndex:
    """Index note paths by basename in a single pass.

    Paths with an empty basename cannot be looked up by name and are left out
    of the basename map, but stay in the path set for exact-path links.
    """
    by_basename: dict[str, list[str]] = {}
    all_paths: set[str] = set()

    for note_path in paths:
        path_without_ext = strip_md_suffix(note_path)
        all_paths.add(path_without_ext)

        basename = path_without_ext.split("/")[-1]
        if not basename:
            continue

        by_basename.setdefault(basename, []).append(path_without_ext)

    return NoteIndex(
        by_basename=MappingProxyType({name: tuple(found) for name, found in by_basename.items()}),
        paths=frozenset(all_paths),
    )
