"""Shared fixtures: a realistic page tree on disk."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from perch.routing.tree import FileSystemTree

PAGE_FILES = (
    "index.html",
    "about.html",
    "_layout.html",
    "product/[id].html",
    "type/[id].html",
    "games/[name]/[id].html",
    "docs/index.html",
    "docs/intro.html",
    "blog/[slug]/index.html",
    "blog/[slug]/comments.html",
)


def make_tree(root: Path, files: Iterable[str]) -> Path:
    """Create empty-ish page files (and their directories) under *root*."""
    for name in files:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"<p>{name}</p>\n", encoding="utf-8")
    return root


@pytest.fixture
def page_tree(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Factory building a page tree from a list of file names."""

    def _build(files: Iterable[str]) -> Path:
        return make_tree(tmp_path / "tree", files)

    return _build


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    return make_tree(tmp_path / "pages", PAGE_FILES)


@pytest.fixture
def tree(pages_dir: Path) -> FileSystemTree:
    return FileSystemTree(pages_dir)
