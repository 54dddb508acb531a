"""Rewrite wikilinks and embeds into plain markdown links."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from vaultsite.config import PublishConfig

from .note_index import NoteIndex
from .resolver import LinkResolver, ResolutionResult, ResolutionStatus
from .slug import note_url

# [[target]] or [[target|alias]], but not the inside of an ![[embed]]
_WIKILINK_RE = re.compile(r"(?<!!)\[\[([^\]|]*)(?:\|([^\]]*))?\]\]")
# ![[target]]
_EMBED_RE = re.compile(r"!\[\[([^\]]*)\]\]")

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "svg", "webp"})

ASSETS_ROUTE = "/assets"


class TokenKind(Enum):
    LINK = "link"
    EMBED = "embed"


class EmbedKind(Enum):
    """What an ``![[embed]]`` points at, decided by its file extension."""

    IMAGE_ASSET = "image_asset"
    NOTE_EMBED = "note_embed"


@dataclass(frozen=True)
class LinkToken:
    """One ``[[link]]`` or ``![[embed]]`` found in a note."""

    raw: str
    target: str
    kind: TokenKind
    alias: str | None = None

    @property
    def display(self) -> str:
        return self.alias if self.alias else self.target

    @classmethod
    def from_match(cls, match: re.Match, kind: TokenKind) -> "LinkToken":
        alias = None
        if kind is TokenKind.LINK and match.group(2) is not None:
            alias = match.group(2).strip() or None
        return cls(raw=match.group(0), target=match.group(1).strip(), kind=kind, alias=alias)


@dataclass
class RewrittenNote:
    """Rewritten text plus the links that could not be cleanly resolved."""

    text: str
    issues: list[ResolutionResult] = field(default_factory=list)

    @property
    def unresolved(self) -> list[ResolutionResult]:
        return [r for r in self.issues if r.status is ResolutionStatus.UNRESOLVED]

    @property
    def ambiguous(self) -> list[ResolutionResult]:
        return [r for r in self.issues if r.status is ResolutionStatus.AMBIGUOUS]


def classify_embed(target: str) -> EmbedKind:
    """Images become assets; anything else is treated as a note."""
    _, dot, extension = target.rpartition(".")
    if dot and extension.lower() in IMAGE_EXTENSIONS:
        return EmbedKind.IMAGE_ASSET
    return EmbedKind.NOTE_EMBED


def asset_name(target: str) -> str:
    """File name an embedded image is published under."""
    return target.split("/")[-1]


class ContentRewriter:
    """Rewrites note text against the index of one sync run.

    Links are rewritten first, then embeds. The link pattern never matches
    right after a ``!`` so embeds are left for the second pass.
    """

    def __init__(self, index: NoteIndex, all_paths: Iterable[str], config: PublishConfig) -> None:
        self.config = config
        self.resolver = LinkResolver(index, all_paths)

    def rewrite(self, text: str) -> str:
        return self.rewrite_note(text).text

    def rewrite_note(self, text: str) -> RewrittenNote:
        issues: list[ResolutionResult] = []

        def _resolve(target: str) -> ResolutionResult:
            result = self.resolver.resolve(target)
            if result.status is not ResolutionStatus.RESOLVED:
                issues.append(result)
            return result

        def _link(match: re.Match) -> str:
            token = LinkToken.from_match(match, TokenKind.LINK)
            result = _resolve(token.target)
            if not result.ok:
                # Drop the brackets rather than publish a dead link
                return token.display
            return f"[{token.display}]({note_url(result.path, self.config)})"

        def _embed(match: re.Match) -> str:
            token = LinkToken.from_match(match, TokenKind.EMBED)

            if classify_embed(token.target) is EmbedKind.IMAGE_ASSET:
                name = asset_name(token.target)
                return f"![{name}]({ASSETS_ROUTE}/{name})"

            result = _resolve(token.target)
            if not result.ok:
                return token.raw
            return f"[{token.target}]({note_url(result.path, self.config)})"

        rewritten = _WIKILINK_RE.sub(_link, text)
        rewritten = _EMBED_RE.sub(_embed, rewritten)
        return RewrittenNote(text=rewritten, issues=issues)


def find_tokens(text: str) -> list[LinkToken]:
    """All link and embed tokens in a note, in document order."""
    found = [(m.start(), LinkToken.from_match(m, TokenKind.LINK)) for m in _WIKILINK_RE.finditer(text)]
    found += [(m.start(), LinkToken.from_match(m, TokenKind.EMBED)) for m in _EMBED_RE.finditer(text)]
    return [token for _, token in sorted(found, key=lambda item: item[0])]


def rewrite(text: str, index: NoteIndex, all_paths: Iterable[str], config: PublishConfig) -> str:
    """Rewrite one note's text. Convenience wrapper around :class:`ContentRewriter`."""
    return ContentRewriter(index, all_paths, config).rewrite(text)
