"""Perch — flat static export for bracketed page trees.

Compiles a page tree with ``[name]`` dynamic segments into flat files and
rewrites every internal link so the result works as plain files, with no
server-side rewrite rules.  Dynamic values move from the path into the
query string::

    /product/123  ->  product.html?id=123

Basic usage::

    from perch import ExportConfig, StaticExporter

    StaticExporter(ExportConfig(pages_dir="pages", output_dir="dist")).export()

Rewriting a single document::

    from perch import RewriteContext, rewrite_html

    ctx = RewriteContext.for_directory("pages", current="games/index.html")
    html = rewrite_html(html, ctx)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "EntryMapping",
    "ExportConfig",
    "ExportError",
    "FileSystemTree",
    "PerchError",
    "RewriteContext",
    "RouteConflictError",
    "RouteMatch",
    "StaticExporter",
    "make_relative_path",
    "map_page_to_entry",
    "match_route",
    "rewrite_html",
    "rewrite_url",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast and defers loading kida until export is
    actually used.
    """
    if name == "ExportConfig":
        from perch.config import ExportConfig

        return ExportConfig

    if name == "StaticExporter":
        from perch.export.exporter import StaticExporter

        return StaticExporter

    if name in ("RewriteContext", "rewrite_url"):
        from perch.rewrite import urls as _urls

        return getattr(_urls, name)

    if name == "rewrite_html":
        from perch.rewrite.html import rewrite_html

        return rewrite_html

    if name in (
        "EntryMapping",
        "FileSystemTree",
        "RouteMatch",
        "make_relative_path",
        "map_page_to_entry",
        "match_route",
    ):
        from perch import routing as _routing

        return getattr(_routing, name)

    if name in ("ConfigurationError", "ExportError", "PerchError", "RouteConflictError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
