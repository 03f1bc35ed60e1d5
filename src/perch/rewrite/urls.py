"""Internal URL rewriting for flat static output.

Turns router-style links into links to the flat entry files produced by
export, relative to the document that contains them::

    "/"                    -> "index.html"
    "/about"               -> "about.html"
    "/product/123"         -> "product.html?id=123"
    "/type/20?games=50"    -> "type.html?id=20&games=50"
    "/public/css/app.css"  -> "public/css/app.css"

Anything that cannot be rewritten confidently is returned exactly as
authored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit

from perch.config import ExportConfig
from perch.routing.entry import map_page_to_entry
from perch.routing.matcher import match_route
from perch.routing.relative import make_relative_path
from perch.routing.tree import FileSystemTree, PageTree

logger = logging.getLogger("perch.rewrite")

# Absolute and protocol-relative URLs
_EXTERNAL_RE = re.compile(r"^(?:https?:)?//", re.IGNORECASE)

# URI schemes that never point at a page
_SPECIAL_SCHEME_RE = re.compile(r"^(?:mailto|tel|javascript|data):", re.IGNORECASE)


class UrlKind(Enum):
    """Classification of a URL found in an HTML attribute."""

    EMPTY = "empty"
    ANCHOR = "anchor"
    EXTERNAL = "external"
    SPECIAL_SCHEME = "special-scheme"
    INTERNAL = "internal"

    @property
    def rewritable(self) -> bool:
        return self is UrlKind.INTERNAL


def classify_url(url: str) -> UrlKind:
    """Classify *url*; only ``INTERNAL`` URLs are candidates for rewriting.

    Examples::

        ""                      -> EMPTY
        "#top"                  -> ANCHOR
        "https://example.com/"  -> EXTERNAL
        "//cdn.example.com/x"   -> EXTERNAL
        "mailto:a@b.com"        -> SPECIAL_SCHEME
        "/product/123"          -> INTERNAL
    """
    trimmed = url.strip()
    if not trimmed:
        return UrlKind.EMPTY
    if trimmed.startswith("#"):
        return UrlKind.ANCHOR
    if _EXTERNAL_RE.match(trimmed):
        return UrlKind.EXTERNAL
    if _SPECIAL_SCHEME_RE.match(trimmed):
        return UrlKind.SPECIAL_SCHEME
    return UrlKind.INTERNAL


@dataclass(frozen=True, slots=True)
class RewriteContext:
    """Everything needed to rewrite the URLs of one document.

    Attributes:
        tree: The page tree routes are resolved against.
        current: Build path of the document being rewritten
            (e.g. ``games/index.html``).
        config: Export configuration (extensions, index name, asset dirs).
    """

    tree: PageTree
    current: str
    config: ExportConfig = field(default_factory=ExportConfig)

    @classmethod
    def for_directory(
        cls,
        pages_dir: str | Path,
        current: str,
        config: ExportConfig | None = None,
    ) -> RewriteContext:
        """Build a context for a page tree on disk."""
        return cls(
            tree=FileSystemTree(pages_dir),
            current=current,
            config=config or ExportConfig(pages_dir=pages_dir),
        )


def _with_suffix(path: str, query: str, fragment: str) -> str:
    if query:
        path += "?" + query
    if fragment:
        path += "#" + fragment
    return path


def rewrite_url(url: str, ctx: RewriteContext) -> str:
    """Rewrite one internal URL to point at its flat entry file.

    Args:
        url: The attribute value as authored.
        ctx: Rewrite context for the containing document.

    Returns:
        The rewritten URL, or *url* unchanged when it is out of scope
        (anchor, external, special scheme, unparsable) or an
        unresolvable relative reference.
    """
    kind = classify_url(url)
    if not kind.rewritable:
        return url

    trimmed = url.strip()
    try:
        parts: SplitResult = urlsplit(trimmed)
    except ValueError:
        logger.debug("Leaving unparsable URL %r unchanged", url)
        return url

    if parts.scheme or parts.netloc:
        # Some other scheme (about:, ftp:, ...); not ours to rewrite
        return url

    config = ctx.config
    path, query, fragment = parts.path, parts.query, parts.fragment

    # Site root
    if path in ("", "/"):
        target = make_relative_path(ctx.current, config.index_entry)
        return _with_suffix(target, query, fragment)

    relative = path.lstrip("/")

    # Asset directories are copied verbatim, never routed
    first = relative.split("/", 1)[0]
    if "/" in relative and first in config.asset_dirs:
        target = make_relative_path(ctx.current, relative)
        return _with_suffix(target, query, fragment)

    match = match_route(
        relative,
        ctx.tree,
        page_extension=config.page_extension,
        index_name=config.index_name,
    )
    if match is None:
        if trimmed.startswith("/"):
            # Not a page; most likely a static file referenced from the root
            target = make_relative_path(ctx.current, relative)
            logger.debug("No page for %r in %s, linking %r literally", url, ctx.current, target)
            return _with_suffix(target, query, fragment)
        return url

    entry = map_page_to_entry(
        match.page,
        page_extension=config.page_extension,
        entry_extension=config.entry_extension,
        index_name=config.index_name,
    )

    # Route values first; the URL's own query string wins on collision
    merged = dict(match.params)
    merged.update(parse_qsl(query, keep_blank_values=True))

    target = make_relative_path(ctx.current, entry.destination)
    rewritten = _with_suffix(target, urlencode(merged), fragment)
    logger.debug("Rewrote %r -> %r in %s", url, rewritten, ctx.current)
    return rewritten
