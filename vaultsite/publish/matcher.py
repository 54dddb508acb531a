"""Include/exclude rules deciding which notes get published."""

import logging
import re
from collections.abc import Iterable

from vaultsite.config import PublishConfig

logger = logging.getLogger(__name__)

_MULTI_SLASH_RE = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Trim, use forward slashes, collapse repeats and drop outer slashes."""
    path = path.strip().replace("\\", "/")
    path = _MULTI_SLASH_RE.sub("/", path)
    return path.strip("/")


def is_excluded(path: str, patterns: Iterable[str]) -> bool:
    """Check whether a path falls under any exclude pattern.

    A pattern matches when the path starts with it, or when it appears as a
    folder anywhere below the root. The prefix case has no segment boundary
    check, so ``private`` also excludes ``private-notes/``.
    """
    normalized = normalize_path(path)

    for pattern in patterns:
        normalized_pattern = normalize_path(pattern)
        if not normalized_pattern:
            continue

        if normalized.startswith(normalized_pattern):
            return True
        if f"/{normalized_pattern}/" in normalized or f"/{normalized_pattern}" in normalized:
            return True

    return False


def is_included(path: str, patterns: Iterable[str]) -> bool:
    """Check whether a path is covered by the include patterns.

    No patterns means the whole vault is published. ``""`` or ``"."`` among
    the patterns also matches everything.
    """
    patterns = list(patterns)
    if not patterns:
        return True

    normalized = normalize_path(path)

    for pattern in patterns:
        normalized_pattern = normalize_path(pattern)
        if normalized_pattern in ("", "."):
            return True
        if normalized.startswith(normalized_pattern):
            return True

    return False


def should_publish(path: str, config: PublishConfig) -> bool:
    """Exclusion is checked first and always wins."""
    if is_excluded(path, config.exclude):
        logger.debug(f"{path} excluded")
        return False

    included = is_included(path, config.include)
    logger.debug(f"{path} include check: {included}")
    return included


def select_notes(all_paths: Iterable[str], config: PublishConfig) -> list[str]:
    """Filter the corpus down to the notes to publish, keeping scan order."""
    return [path for path in all_paths if should_publish(path, config)]
