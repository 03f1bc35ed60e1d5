"""Tests for perch.routing.entry — page-tree path to flat entry file."""

import pytest

from perch.routing.entry import map_page_to_entry
from perch.routing.segments import EntryMapping


class TestStaticPages:
    @pytest.mark.parametrize(
        "path",
        ["index.html", "about.html", "docs/intro.html", "docs/index.html", "a/b/c.html", "about"],
    )
    def test_identity(self, path: str) -> None:
        assert map_page_to_entry(path) == EntryMapping(destination=path)

    def test_backslashes_normalized(self) -> None:
        assert map_page_to_entry("docs\\intro.html").destination == "docs/intro.html"

    def test_extension_swapped(self) -> None:
        mapping = map_page_to_entry("about.kida", page_extension=".kida", entry_extension=".html")
        assert mapping.destination == "about.html"


class TestDynamicPages:
    def test_detail_page_flattens(self) -> None:
        mapping = map_page_to_entry("product/[id].html")
        assert mapping.destination == "product.html"
        assert mapping.param_names == ("id",)

    def test_without_extension(self) -> None:
        assert map_page_to_entry("type/[id]").destination == "type.html"

    def test_bare_dynamic_segment(self) -> None:
        mapping = map_page_to_entry("[slug].html")
        assert mapping.destination == "index.html"
        assert mapping.param_names == ("slug",)

    def test_only_dynamic_segments(self) -> None:
        mapping = map_page_to_entry("[a]/[b].html")
        assert mapping.destination == "index.html"
        assert mapping.param_names == ("a", "b")

    def test_two_params(self) -> None:
        mapping = map_page_to_entry("games/[name]/[id].html")
        assert mapping.destination == "games/index.html"
        assert mapping.param_names == ("name", "id")

    def test_two_statics_one_param(self) -> None:
        mapping = map_page_to_entry("shop/product/[id].html")
        assert mapping.destination == "shop/product/index.html"
        assert mapping.param_names == ("id",)

    def test_dynamic_directory_with_index(self) -> None:
        mapping = map_page_to_entry("blog/[slug]/index.html")
        assert mapping.destination == "blog/index/index.html"
        assert mapping.param_names == ("slug",)

    def test_params_in_order(self) -> None:
        mapping = map_page_to_entry("[x]/a/[y]/b/[z].html")
        assert mapping.param_names == ("x", "y", "z")
        assert mapping.destination == "a/b/index.html"

    def test_custom_extensions_and_index(self) -> None:
        mapping = map_page_to_entry(
            "games/[name]/[id].kida",
            page_extension=".kida",
            entry_extension=".htm",
            index_name="default",
        )
        assert mapping.destination == "games/default.htm"


class TestParamCount:
    @pytest.mark.parametrize(
        ("path", "count"),
        [
            ("index.html", 0),
            ("product/[id].html", 1),
            ("games/[name]/[id].html", 2),
            ("[a]/[b]/[c].html", 3),
        ],
    )
    def test_matches_bracketed_segments(self, path: str, count: int) -> None:
        assert len(map_page_to_entry(path).param_names) == count
