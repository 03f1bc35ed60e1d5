"""Export configuration.

ExportConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from perch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Export configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ExportConfig(pages_dir="site/pages", output_dir="dist")
    """

    # Page tree
    pages_dir: str | Path = "pages"
    page_extension: str = ".html"
    index_name: str = "index"

    # Output
    output_dir: str | Path = "build"
    entry_extension: str = ".html"
    clean: bool = True  # Remove output_dir before writing

    # Static files (copied into the output under their own directory name)
    static_dir: str | Path | None = "public"

    # Root-relative URLs under these directories are taken literally, never routed
    asset_dirs: tuple[str, ...] = ("api", "public")

    # Templates
    component_dirs: tuple[str | Path, ...] = ()  # Shared partials outside the page tree
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        for name in ("page_extension", "entry_extension"):
            value = getattr(self, name)
            if not value.startswith(".") or len(value) < 2:
                msg = f"{name} must start with '.' and name an extension, got {value!r}"
                raise ConfigurationError(msg)
        if not self.index_name or "/" in self.index_name:
            msg = f"index_name must be a plain file stem, got {self.index_name!r}"
            raise ConfigurationError(msg)
        for asset_dir in self.asset_dirs:
            if not asset_dir or "/" in asset_dir:
                msg = f"asset_dirs entries must be single directory names, got {asset_dir!r}"
                raise ConfigurationError(msg)

    @property
    def index_page(self) -> str:
        """File name of a directory's index page in the page tree."""
        return self.index_name + self.page_extension

    @property
    def index_entry(self) -> str:
        """File name of a directory's index entry in the build output."""
        return self.index_name + self.entry_extension
