"""``perch build`` — export a page tree to static files."""

import argparse
import sys

from perch.cli._config import config_from_args
from perch.errors import PerchError
from perch.export.exporter import StaticExporter


def run_build(args: argparse.Namespace) -> None:
    """Run a full export and print a one-line summary."""
    config = config_from_args(args)
    try:
        result = StaticExporter(config).export()
    except (PerchError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(
        f"Exported {result.total_pages} pages and {result.total_assets} assets "
        f"to {result.output_dir} ({result.duration_ms:.1f} ms)"
    )
