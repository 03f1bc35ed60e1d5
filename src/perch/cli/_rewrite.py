"""``perch rewrite`` — rewrite the links of a single HTML document."""

import argparse
import sys
from pathlib import Path

from perch.cli._config import config_from_args
from perch.rewrite.html import extract_urls, rewrite_html
from perch.rewrite.urls import RewriteContext, rewrite_url
from perch.routing.tree import FileSystemTree


def run_rewrite(args: argparse.Namespace) -> None:
    """Write the rewritten document to stdout, or list each rewrite."""
    config = config_from_args(args)
    if args.file == "-":
        html = sys.stdin.read()
    else:
        try:
            html = Path(args.file).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc

    ctx = RewriteContext(
        tree=FileSystemTree(config.pages_dir),
        current=args.current,
        config=config,
    )

    if args.list:
        for attr, url in extract_urls(html):
            print(f"{attr}: {url} -> {rewrite_url(url, ctx)}")
        return

    sys.stdout.write(rewrite_html(html, ctx))
