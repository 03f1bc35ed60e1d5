"""Page discovery for static export.

Walks the pages directory tree and collects every page file together
with the flat entry it compiles to.  Names starting with ``_`` (layouts,
partials) or ``.`` are skipped.

The walk also rejects trees that cannot be exported unambiguously:

- two different dynamic names side by side in one directory
  (``[id].html`` next to ``[slug]/``): request matching would depend on
  listing order;
- two pages that flatten to the same destination
  (``product.html`` and ``product/[id].html`` both become ``product.html``).
"""

from __future__ import annotations

import logging
from pathlib import Path

from perch.config import ExportConfig
from perch.errors import RouteConflictError
from perch.export.types import PageEntry
from perch.routing.entry import map_page_to_entry
from perch.routing.segments import dynamic_name

logger = logging.getLogger("perch.export")


def discover_pages(pages_dir: str | Path, config: ExportConfig | None = None) -> list[PageEntry]:
    """Walk a pages directory and discover all pages.

    Args:
        pages_dir: Path to the pages directory.
        config: Export configuration; defaults to ``ExportConfig()``.

    Returns:
        Discovered pages in walk order (each directory sorted by name).

    Raises:
        FileNotFoundError: If *pages_dir* is not a directory.
        RouteConflictError: If the tree is ambiguous (see module docs).
    """
    config = config or ExportConfig(pages_dir=pages_dir)
    root = Path(pages_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Pages directory not found: {root}")

    pages: list[PageEntry] = []
    _walk_directory(root, root, config=config, pages=pages)
    _check_destinations(pages)
    return pages


def _walk_directory(
    directory: Path,
    root: Path,
    *,
    config: ExportConfig,
    pages: list[PageEntry],
) -> None:
    """Recursively walk a directory, collecting pages."""
    items = [
        item
        for item in sorted(directory.iterdir())
        if not item.name.startswith(("_", "."))
    ]
    _check_dynamic_siblings(directory, root, items, config)

    for item in items:
        if item.is_dir():
            _walk_directory(item, root, config=config, pages=pages)
            continue
        if not item.name.endswith(config.page_extension):
            continue

        source = item.relative_to(root).as_posix()
        mapping = map_page_to_entry(
            source,
            page_extension=config.page_extension,
            entry_extension=config.entry_extension,
            index_name=config.index_name,
        )
        pages.append(
            PageEntry(
                source=source,
                destination=mapping.destination,
                param_names=mapping.param_names,
            )
        )


def _check_dynamic_siblings(
    directory: Path,
    root: Path,
    items: list[Path],
    config: ExportConfig,
) -> None:
    """Reject directories holding more than one distinct dynamic name."""
    names: dict[str, Path] = {}
    for item in items:
        if item.is_file() and not item.name.endswith(config.page_extension):
            continue
        name = dynamic_name(item.name, config.page_extension)
        if name is not None:
            names.setdefault(name, item)

    if len(names) > 1:
        relative = directory.relative_to(root).as_posix()
        where = f"'{relative}'" if relative != "." else "the pages root"
        raise RouteConflictError(
            f"Conflicting dynamic segments in {where}",
            tuple(item.relative_to(root).as_posix() for item in names.values()),
        )


def _check_destinations(pages: list[PageEntry]) -> None:
    """Reject pages that would overwrite each other in the build output."""
    seen: dict[str, PageEntry] = {}
    for page in pages:
        other = seen.get(page.destination)
        if other is not None:
            raise RouteConflictError(
                f"Pages map to the same entry {page.destination!r}",
                (other.source, page.source),
            )
        seen[page.destination] = page
        logger.debug("Discovered %s -> %s", page.source, page.destination)
