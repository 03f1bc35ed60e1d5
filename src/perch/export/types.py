"""Data models for static export.

Immutable frozen dataclasses describing discovered pages and the files
written during an export run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True, slots=True)
class PageEntry:
    """A page file discovered in the page tree.

    Attributes:
        source: Page-tree path relative to the pages root
            (e.g. ``product/[id].html``).  Also the kida template name.
        destination: Build path the rendered page is written to.
        param_names: Dynamic names whose values arrive as query
            parameters, left to right.
    """

    source: str
    destination: str
    param_names: tuple[str, ...] = ()

    @property
    def is_dynamic(self) -> bool:
        return bool(self.param_names)


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during export.

    Attributes:
        source: Page-tree path or static file path it came from.
        output_path: Filesystem path of the written file.
        kind: ``"page"`` for rendered pages, ``"asset"`` for copied files.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to produce this file.
    """

    source: str
    output_path: Path
    kind: Literal["page", "asset"]
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Aggregate result of a full static export."""

    files: tuple[ExportedFile, ...]
    output_dir: Path
    duration_ms: float

    @property
    def total_pages(self) -> int:
        return sum(1 for f in self.files if f.kind == "page")

    @property
    def total_assets(self) -> int:
        return sum(1 for f in self.files if f.kind == "asset")
