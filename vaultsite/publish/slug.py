"""Turn note paths into site routes."""

import re

from vaultsite.config import PublishConfig, SlugStyle

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def to_slug(text: str, style: SlugStyle = "kebab") -> str:
    """Slugify one path segment.

    ``kebab`` lowercases and collapses every run of non-alphanumeric
    characters into a single hyphen. A segment with no ASCII letters or
    digits would slug to nothing, so it is kept as written. ``original``
    leaves the text alone.
    """
    if style == "kebab":
        slug = _NON_ALNUM_RE.sub("-", text.lower()).strip("-")
        return slug or text
    return text


def slug_path(path: str, style: SlugStyle = "kebab") -> str:
    """Slugify each segment of a slash-separated path."""
    return "/".join(to_slug(segment, style) for segment in path.split("/"))


def note_url(path: str, config: PublishConfig) -> str:
    """Link target written into published notes: ``{base_route}/{path}``."""
    return f"{config.base_route}/{path}"


def route_for(path: str, config: PublishConfig) -> str:
    """Route the site generator serves a note at, after slugging."""
    return f"{config.base_route}/{slug_path(path, config.slug_style)}"
