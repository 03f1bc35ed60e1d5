"""URL rewriting for flat static output.

``rewrite_url`` rewrites a single attribute value; ``rewrite_html``
applies it to every ``href``/``action``/``src`` in a document.
"""

from perch.rewrite.html import extract_urls, rewrite_html
from perch.rewrite.urls import RewriteContext, UrlKind, classify_url, rewrite_url

__all__ = [
    "RewriteContext",
    "UrlKind",
    "classify_url",
    "extract_urls",
    "rewrite_html",
    "rewrite_url",
]
