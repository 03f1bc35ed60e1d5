"""Perch exception hierarchy.

Shared across discovery, export, and the CLI so every module raises and
catches the same types.  The routing and rewriting core does not raise
for unresolvable input: a failed match is ``None`` and an out-of-scope
URL is returned unchanged.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when export configuration is invalid.

    Typically raised from ``ExportConfig.__post_init__``.
    """


class RouteConflictError(ConfigurationError):
    """Raised when a page tree cannot be exported unambiguously.

    Either two sibling entries in one directory declare different dynamic
    names (``[id].html`` next to ``[slug]/``), or two pages map to the
    same flat destination file.
    """

    def __init__(self, detail: str, paths: tuple[str, ...] = ()) -> None:
        self.detail = detail
        self.paths = paths
        if paths:
            super().__init__(f"{detail}: {', '.join(paths)}")
        else:
            super().__init__(detail)


class ExportError(PerchError):
    """Raised when a page fails to render or write during export."""
