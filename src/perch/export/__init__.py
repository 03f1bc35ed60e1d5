"""Static export of bracketed page trees.

Conventions::

    pages/
      _layout.html          # Partial, not exported
      index.html            # -> index.html
      about.html            # -> about.html
      product/
        [id].html           # -> product.html?id=...
      games/
        [name]/
          [id].html         # -> games/index.html?name=...&id=...
"""

from perch.export.discovery import discover_pages
from perch.export.exporter import StaticExporter
from perch.export.templating import create_environment, render_page
from perch.export.types import ExportedFile, ExportResult, PageEntry

__all__ = [
    "ExportResult",
    "ExportedFile",
    "PageEntry",
    "StaticExporter",
    "create_environment",
    "discover_pages",
    "render_page",
]
