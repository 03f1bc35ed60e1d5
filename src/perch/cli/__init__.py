"""Perch CLI — static export, route listing, and link rewriting.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys

_LOG_LEVELS = ("debug", "info", "warning", "error")


def _add_tree_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="info",
        help="Logging verbosity (default: info)",
    )
    parser.add_argument("--page-ext", default=".html", help="Page file extension (default: .html)")
    parser.add_argument(
        "--entry-ext", default=".html", help="Generated entry extension (default: .html)"
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — flat static export for bracketed page trees.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch build ------------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Export a page tree to static files")
    build_parser.add_argument("pages", help="Pages directory")
    build_parser.add_argument("output", help="Output directory")
    build_parser.add_argument(
        "--static-dir",
        default=None,
        help="Directory copied into the output under its own name",
    )
    build_parser.add_argument(
        "--component-dir",
        action="append",
        default=[],
        help="Extra template directory for shared partials (repeatable)",
    )
    build_parser.add_argument(
        "--no-clean",
        action="store_true",
        help="Keep existing files in the output directory",
    )
    _add_tree_options(build_parser)

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List pages and their entry files")
    routes_parser.add_argument("pages", help="Pages directory")
    _add_tree_options(routes_parser)

    # -- perch resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a request path to a page")
    resolve_parser.add_argument("pages", help="Pages directory")
    resolve_parser.add_argument("path", help="Request path (e.g. /product/123)")
    _add_tree_options(resolve_parser)

    # -- perch rewrite ----------------------------------------------------
    rewrite_parser = subparsers.add_parser("rewrite", help="Rewrite the links of an HTML file")
    rewrite_parser.add_argument("pages", help="Pages directory")
    rewrite_parser.add_argument("file", help="HTML file to rewrite ('-' for stdin)")
    rewrite_parser.add_argument(
        "--current",
        required=True,
        help="Build path the document is written to (e.g. games/index.html)",
    )
    rewrite_parser.add_argument(
        "--list",
        action="store_true",
        help="Print each URL and its rewrite instead of the document",
    )
    _add_tree_options(rewrite_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "build":
        from perch.cli._build import run_build

        run_build(args)
    elif args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from perch.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "rewrite":
        from perch.cli._rewrite import run_rewrite

        run_rewrite(args)
