"""Attribute-level URL rewriting for generated HTML.

Scans for ``href``, ``action`` and ``src`` assignments and rewrites each
value independently.  The scan is a plain pattern match: it does not
know whether an attribute sits inside a real tag, a comment, or a
script string.
"""

import re

from perch.rewrite.urls import RewriteContext, rewrite_url

# Matches: href="/path", ACTION = '/path', src='/img.png'
_URL_ATTR_PATTERN = re.compile(
    r"""\b(href|action|src)(\s*=\s*)(['"])([^'"]*)(['"])""",
    re.IGNORECASE,
)


def rewrite_html(html: str, ctx: RewriteContext) -> str:
    """Rewrite every URL attribute in *html* for the document at ``ctx.current``.

    Attribute names, the ``=`` operator and quote characters are left as
    they were; only the value changes.
    """

    def _replace(match: re.Match[str]) -> str:
        attr, operator, open_quote, url, close_quote = match.groups()
        return f"{attr}{operator}{open_quote}{rewrite_url(url, ctx)}{close_quote}"

    return _URL_ATTR_PATTERN.sub(_replace, html)


def extract_urls(html: str) -> list[tuple[str, str]]:
    """Return ``(attribute, url)`` pairs the rewriter would visit, in order."""
    return [(match.group(1), match.group(4)) for match in _URL_ATTR_PATTERN.finditer(html)]
