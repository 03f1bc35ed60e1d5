"""``perch routes`` — list pages and the entry files they compile to.

Walks the pages directory and prints a table of PAGE, ENTRY and the
query PARAMS each entry expects.
"""

import argparse
import sys

from perch.cli._config import config_from_args
from perch.errors import PerchError
from perch.export.discovery import discover_pages


def run_routes(args: argparse.Namespace) -> None:
    """List discovered pages for a page tree."""
    config = config_from_args(args)
    try:
        pages = discover_pages(config.pages_dir, config)
    except (PerchError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not pages:
        print("No pages found.")
        return

    rows = [(page.source, page.destination, ", ".join(page.param_names)) for page in pages]

    # Column widths
    max_page = max(max(len(r[0]) for r in rows), 4)  # "PAGE" header
    max_entry = max(max(len(r[1]) for r in rows), 5)  # "ENTRY" header

    fmt = f"{{:<{max_page}}}  {{:<{max_entry}}}  {{}}"
    print(fmt.format("PAGE", "ENTRY", "PARAMS"))
    sep_len = max_page + max_entry + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(max(sep_len, 20), 80))
    for source, destination, params in rows:
        print(fmt.format(source, destination, params))
