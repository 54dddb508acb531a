"""Note selection and link resolution."""

from .matcher import is_excluded, is_included, normalize_path, select_notes, should_publish
from .note_index import NoteIndex, basename_of, build_index, strip_md_suffix
from .resolver import LinkResolver, ResolutionResult, ResolutionStatus
from .rewriter import (
    ContentRewriter,
    EmbedKind,
    LinkToken,
    RewrittenNote,
    TokenKind,
    classify_embed,
    find_tokens,
    rewrite,
)
from .slug import note_url, route_for, slug_path, to_slug

__all__ = [
    "ContentRewriter",
    "EmbedKind",
    "LinkResolver",
    "LinkToken",
    "NoteIndex",
    "ResolutionResult",
    "ResolutionStatus",
    "RewrittenNote",
    "TokenKind",
    "basename_of",
    "build_index",
    "classify_embed",
    "find_tokens",
    "is_excluded",
    "is_included",
    "normalize_path",
    "note_url",
    "rewrite",
    "route_for",
    "select_notes",
    "should_publish",
    "slug_path",
    "strip_md_suffix",
    "to_slug",
]
