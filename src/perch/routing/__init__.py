"""Routing — page-tree resolution for flat static output.

Maps bracketed page-tree paths to flat entry files, matches request
paths back to page files, and computes portable relative paths between
build outputs.
"""

from perch.routing.entry import map_page_to_entry
from perch.routing.matcher import match_route
from perch.routing.relative import make_relative_path
from perch.routing.segments import EntryMapping, PathSegment, RouteMatch, parse_segment
from perch.routing.tree import FileSystemTree, PageTree

__all__ = [
    "EntryMapping",
    "FileSystemTree",
    "PageTree",
    "PathSegment",
    "RouteMatch",
    "make_relative_path",
    "map_page_to_entry",
    "match_route",
    "parse_segment",
]
