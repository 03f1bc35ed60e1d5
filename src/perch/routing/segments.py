"""Segment parsing and routing result types.

A page-tree path segment is either static (``product``) or dynamic
(``[id]``).  All bracket-name parsing goes through :func:`parse_segment`
so the rule lives in one place.
"""

import re
from dataclasses import dataclass, field

# A dynamic segment wraps a non-empty name in square brackets
_DYNAMIC_RE = re.compile(r"^\[([^\[\]/]+)\]$")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a page-tree path.

    Static:   ``product``  (is_dynamic=False)
    Dynamic:  ``[id]``     (is_dynamic=True, name="id")
    """

    value: str
    is_dynamic: bool = False
    name: str | None = None


@dataclass(frozen=True, slots=True)
class EntryMapping:
    """Flat build destination for a page-tree path.

    Attributes:
        destination: Build path of the entry file (e.g. ``product.html``).
        param_names: Dynamic segment names, left to right.
    """

    destination: str
    param_names: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of resolving a request path against a page tree.

    Attributes:
        page: Matched page-tree path relative to the tree root
            (e.g. ``product/[id].html``).
        params: Dynamic name -> literal request segment.
    """

    page: str
    params: dict[str, str] = field(default_factory=dict)


def parse_segment(segment: str) -> PathSegment:
    """Classify a single path segment.

    Examples::

        "product" -> PathSegment("product")
        "[id]"    -> PathSegment("[id]", is_dynamic=True, name="id")
        "[]"      -> PathSegment("[]")  (empty names are static)
    """
    match = _DYNAMIC_RE.match(segment)
    if match:
        return PathSegment(value=segment, is_dynamic=True, name=match.group(1))
    return PathSegment(value=segment)


def dynamic_name(entry_name: str, extension: str = "") -> str | None:
    """Return the dynamic name of a directory entry, or ``None``.

    *extension* is removed first so ``[id].html`` and ``[id]`` both
    yield ``"id"``.
    """
    stem = entry_name
    if extension and stem.endswith(extension):
        stem = stem[: -len(extension)]
    else:
        stem = _strip_suffix(stem)
    return parse_segment(stem).name


def _strip_suffix(name: str) -> str:
    # Base name without extension; bracket contents never count as a suffix
    closing = name.rfind("]")
    dot = name.rfind(".")
    if dot > closing and dot > 0:
        return name[:dot]
    return name
