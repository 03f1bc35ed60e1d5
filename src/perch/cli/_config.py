"""Build an ExportConfig from parsed CLI arguments.

Shared by every subcommand so option handling and error reporting stay
consistent.
"""

import argparse
import logging
import sys

from perch.config import ExportConfig
from perch.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> ExportConfig:
    """Translate CLI arguments into an ExportConfig.

    Exits with status 2 on invalid configuration.
    """
    kwargs: dict[str, object] = {
        "pages_dir": args.pages,
        "page_extension": args.page_ext,
        "entry_extension": args.entry_ext,
        "log_level": args.log_level,
    }
    if getattr(args, "output", None) is not None:
        kwargs["output_dir"] = args.output
    if hasattr(args, "static_dir"):
        kwargs["static_dir"] = args.static_dir
    if getattr(args, "component_dir", None):
        kwargs["component_dirs"] = tuple(args.component_dir)
    if getattr(args, "no_clean", False):
        kwargs["clean"] = False

    try:
        config = ExportConfig(**kwargs)  # type: ignore[arg-type]
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    configure_logging(config)
    return config


def configure_logging(config: ExportConfig) -> None:
    """Send log records to stderr at ``config.log_level``."""
    level = config.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("perch").setLevel(level)
