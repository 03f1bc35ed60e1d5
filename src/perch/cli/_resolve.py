"""``perch resolve`` — show how a request path maps onto the page tree."""

import argparse
import sys

from perch.cli._config import config_from_args
from perch.routing.entry import map_page_to_entry
from perch.routing.matcher import match_route
from perch.routing.tree import FileSystemTree


def run_resolve(args: argparse.Namespace) -> None:
    """Print the matched page, captured params and entry file.

    Exits with status 1 when the path matches no page.
    """
    config = config_from_args(args)
    match = match_route(
        args.path,
        FileSystemTree(config.pages_dir),
        page_extension=config.page_extension,
        index_name=config.index_name,
    )
    if match is None:
        print(f"No page matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    entry = map_page_to_entry(
        match.page,
        page_extension=config.page_extension,
        entry_extension=config.entry_extension,
        index_name=config.index_name,
    )
    print(f"page:   {match.page}")
    print(f"entry:  {entry.destination}")
    if match.params:
        params = ", ".join(f"{name}={value}" for name, value in match.params.items())
        print(f"params: {params}")
