"""Tests for perch.rewrite.html — attribute scanning and substitution."""

import pytest

from perch.rewrite.html import extract_urls, rewrite_html
from perch.rewrite.urls import RewriteContext
from perch.routing.tree import FileSystemTree


@pytest.fixture
def ctx(tree: FileSystemTree) -> RewriteContext:
    return RewriteContext(tree=tree, current="index.html")


class TestRewriteHtml:
    def test_anchor_href(self, ctx: RewriteContext) -> None:
        html = '<a href="/product/123">Product</a>'
        assert rewrite_html(html, ctx) == '<a href="product.html?id=123">Product</a>'

    def test_form_action(self, ctx: RewriteContext) -> None:
        html = "<form action='/type/3?games=1' method=\"get\">"
        assert rewrite_html(html, ctx) == "<form action='type.html?id=3&games=1' method=\"get\">"

    def test_img_src(self, tree: FileSystemTree) -> None:
        ctx = RewriteContext(tree=tree, current="games/index.html")
        html = '<img src="/public/logo.png" alt="logo">'
        assert rewrite_html(html, ctx) == '<img src="../public/logo.png" alt="logo">'

    def test_case_insensitive_attribute(self, ctx: RewriteContext) -> None:
        assert rewrite_html('<A HREF="/about">', ctx) == '<A HREF="about.html">'

    def test_operator_whitespace_preserved(self, ctx: RewriteContext) -> None:
        assert rewrite_html('<a href = "/about">', ctx) == '<a href = "about.html">'

    def test_multiple_attributes(self, ctx: RewriteContext) -> None:
        html = (
            '<nav><a href="/">Home</a> <a href="/games/zelda/7">Zelda</a>'
            '<script src="/public/app.js"></script></nav>'
        )
        expected = (
            '<nav><a href="index.html">Home</a> <a href="games/index.html?name=zelda&id=7">Zelda</a>'
            '<script src="public/app.js"></script></nav>'
        )
        assert rewrite_html(html, ctx) == expected

    def test_other_attributes_untouched(self, ctx: RewriteContext) -> None:
        html = '<a hx-get="/about" title="/about" hrefs="/about">x</a>'
        assert rewrite_html(html, ctx) == html

    def test_hyphenated_attribute_suffix_matches(self, ctx: RewriteContext) -> None:
        # Purely pattern based: data-href ends in a whole word "href"
        assert rewrite_html('<a data-href="/about">', ctx) == '<a data-href="about.html">'

    def test_no_attributes(self, ctx: RewriteContext) -> None:
        html = "<p>plain text mentioning /about</p>"
        assert rewrite_html(html, ctx) == html

    def test_attribute_in_comment_is_rewritten(self, ctx: RewriteContext) -> None:
        assert rewrite_html('<!-- href="/about" -->', ctx) == '<!-- href="about.html" -->'

    @pytest.mark.parametrize("attr", ["href", "action", "src"])
    @pytest.mark.parametrize("url", ["#section", "https://example.com/x", "mailto:a@b.com"])
    def test_out_of_scope_urls_unchanged(self, ctx: RewriteContext, attr: str, url: str) -> None:
        html = f'<x {attr}="{url}">'
        assert rewrite_html(html, ctx) == html

    def test_unresolvable_relative_unchanged(self, ctx: RewriteContext) -> None:
        html = '<a href="nothing/here">x</a>'
        assert rewrite_html(html, ctx) == html


class TestExtractUrls:
    def test_pairs_in_order(self) -> None:
        html = '<a href="/a"></a><img SRC=\'/b.png\'><form action="/c">'
        assert extract_urls(html) == [("href", "/a"), ("SRC", "/b.png"), ("action", "/c")]

    def test_empty(self) -> None:
        assert extract_urls("<p>nothing</p>") == []
