"""Static export — render a page tree to flat, rewrite-free HTML files.

Each page is rendered with kida, every internal link is rewritten to
point at the flat entry files relative to the page, and the result is
written to its entry destination.  Dynamic values travel in the query
string, so the output can be served by any static host without rewrite
rules.
"""

import logging
import shutil
import time
from pathlib import Path

from perch.config import ExportConfig
from perch.errors import ExportError
from perch.export.discovery import discover_pages
from perch.export.templating import create_environment, render_page
from perch.export.types import ExportedFile, ExportResult, PageEntry
from perch.rewrite.html import rewrite_html
from perch.rewrite.urls import RewriteContext
from perch.routing.tree import FileSystemTree

logger = logging.getLogger("perch.export")


class StaticExporter:
    """Exports a page tree as flat static files.

    Usage::

        result = StaticExporter(ExportConfig(pages_dir="pages", output_dir="dist")).export()
        print(result.total_pages)
    """

    __slots__ = ("_config", "_tree")

    def __init__(self, config: ExportConfig) -> None:
        self._config = config
        self._tree = FileSystemTree(config.pages_dir)

    def export(self) -> ExportResult:
        """Run the full export pipeline and return the result.

        Pipeline order:
            1. Discover and validate pages
            2. Clean and create the output directory
            3. Render, rewrite and write every page
            4. Copy the static directory

        Raises:
            RouteConflictError: If the page tree is ambiguous.
            ExportError: If a page fails to render or write.
        """
        start = time.perf_counter()
        output_dir = Path(self._config.output_dir)

        pages = discover_pages(self._config.pages_dir, self._config)
        self._prepare_output(output_dir)

        files: list[ExportedFile] = []
        files.extend(self._render_pages(pages, output_dir))
        files.extend(self._copy_static(output_dir))

        elapsed = (time.perf_counter() - start) * 1000
        result = ExportResult(files=tuple(files), output_dir=output_dir, duration_ms=elapsed)
        logger.info(
            "Exported %d pages and %d assets to %s in %.1f ms",
            result.total_pages,
            result.total_assets,
            output_dir,
            elapsed,
        )
        return result

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _prepare_output(self, output_dir: Path) -> None:
        """Remove (when configured) and recreate the output directory."""
        if self._config.clean and output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    def _render_pages(self, pages: list[PageEntry], output_dir: Path) -> list[ExportedFile]:
        env = create_environment(self._config)
        results: list[ExportedFile] = []

        for page in pages:
            t0 = time.perf_counter()
            try:
                html = render_page(env, page)
            except Exception as exc:
                msg = f"Failed to render page {page.source!r}: {exc}"
                raise ExportError(msg) from exc

            html = self.rewrite(html, page.destination)
            filepath = output_dir / page.destination
            try:
                size = self._write_html(filepath, html)
            except OSError as exc:
                msg = f"Failed to write {filepath}: {exc}"
                raise ExportError(msg) from exc

            elapsed = (time.perf_counter() - t0) * 1000
            logger.info("%s -> %s", page.source, page.destination)
            results.append(
                ExportedFile(
                    source=page.source,
                    output_path=filepath,
                    kind="page",
                    size_bytes=size,
                    duration_ms=elapsed,
                )
            )

        return results

    def _copy_static(self, output_dir: Path) -> list[ExportedFile]:
        """Copy the static directory into the output under its own name."""
        static_dir = self._config.static_dir
        if static_dir is None:
            return []
        static_root = Path(static_dir)
        if not static_root.is_dir():
            logger.warning("Static directory %s not found, skipping", static_root)
            return []

        results: list[ExportedFile] = []
        for item in sorted(static_root.rglob("*")):
            if not item.is_file():
                continue
            t0 = time.perf_counter()
            relative = item.relative_to(static_root)
            target = output_dir / static_root.name / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(item, target)
            results.append(
                ExportedFile(
                    source=f"{static_root.name}/{relative.as_posix()}",
                    output_path=target,
                    kind="asset",
                    size_bytes=target.stat().st_size,
                    duration_ms=(time.perf_counter() - t0) * 1000,
                )
            )
        return results

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def rewrite(self, html: str, destination: str) -> str:
        """Rewrite the links of a document that will live at *destination*."""
        ctx = RewriteContext(tree=self._tree, current=destination, config=self._config)
        return rewrite_html(html, ctx)

    @staticmethod
    def _write_html(filepath: Path, html: str) -> int:
        """Write HTML content to a file, creating parent dirs as needed.

        Returns the size in bytes of the written file.
        """
        filepath.parent.mkdir(parents=True, exist_ok=True)
        data = html.encode("utf-8")
        filepath.write_bytes(data)
        return len(data)
