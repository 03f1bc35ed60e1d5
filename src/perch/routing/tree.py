"""Read-only page-tree access.

The matcher only needs three questions answered about the page tree:
does a file exist, does a directory exist, and what does a directory
contain.  ``PageTree`` is the structural protocol for those questions;
``FileSystemTree`` answers them from a directory on disk.

Paths passed to a tree are relative to its root, slash-separated, with
``""`` meaning the root itself.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class PageTree(Protocol):
    """A read-only view of a page tree."""

    def is_file(self, path: str) -> bool: ...
    def is_dir(self, path: str) -> bool: ...
    def list_dir(self, path: str) -> list[str]: ...


class FileSystemTree:
    """Page tree backed by a directory on disk.

    Listings are sorted so that resolution does not depend on the
    filesystem's directory order.
    """

    __slots__ = ("_root",)

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: str) -> Path:
        return self._root / path if path else self._root

    def is_file(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def is_dir(self, path: str) -> bool:
        return self._resolve(path).is_dir()

    def list_dir(self, path: str) -> list[str]:
        directory = self._resolve(path)
        if not directory.is_dir():
            return []
        return sorted(item.name for item in directory.iterdir())

    def __repr__(self) -> str:
        return f"FileSystemTree({str(self._root)!r})"


def join(*parts: str) -> str:
    """Join tree-relative path parts, skipping empty ones."""
    return "/".join(part for part in parts if part)
