"""Request path -> page file resolution.

Walks the page tree one request segment at a time with a single
directory cursor.  At each level a static name wins over a dynamic
sibling; otherwise the first dynamic entry that fits the position
captures the segment.  There is no backtracking: once the cursor has
descended, a failure deeper down is a failure for the whole path.

A dynamic entry fits the last segment only as a page file
(``[id].html``), and any other segment only as a directory (``[slug]/``).
A last segment that meets nothing but a dynamic directory does not match.
Only the entry actually used records its value; dynamic entries that are
scanned but do not fit the position leave the parameters untouched, so
an unvalidated tree with differently named siblings never gains values
under names the matched page does not declare.
"""

from perch.routing.segments import RouteMatch, dynamic_name
from perch.routing.tree import PageTree, join


def match_route(
    request_path: str,
    tree: PageTree,
    *,
    page_extension: str = ".html",
    index_name: str = "index",
) -> RouteMatch | None:
    """Resolve *request_path* to a page file in *tree*.

    Examples (tree with ``index.html``, ``about.html``,
    ``product/[id].html``, ``games/[name]/[id].html``)::

        "/"              -> RouteMatch("index.html", {})
        "/about"         -> RouteMatch("about.html", {})
        "/product/123"   -> RouteMatch("product/[id].html", {"id": "123"})
        "/games/zelda/7" -> RouteMatch("games/[name]/[id].html",
                                       {"name": "zelda", "id": "7"})
        "/nope"          -> None

    Args:
        request_path: Slash-separated path without scheme, query, or
            fragment.  Leading and trailing slashes are ignored.
        tree: The page tree to search.
        page_extension: Extension of page files in the tree.
        index_name: Stem of directory index pages.

    Returns:
        The matched page path and captured parameters, or ``None`` when
        the path is not a known page route.
    """
    trimmed = request_path.strip("/")
    segments = trimmed.split("/") if trimmed else [index_name]
    index_page = index_name + page_extension
    params: dict[str, str] = {}
    cursor = ""

    if "." in segments or ".." in segments:
        # Dot segments are relative references, never routes
        return None

    if segments == [index_name] and tree.is_file(index_page):
        return RouteMatch(page=index_page, params=params)

    last = len(segments) - 1
    for i, segment in enumerate(segments):
        is_last = i == last

        if is_last:
            # 1. Page file named after the segment, then segment/index
            page = join(cursor, segment + page_extension)
            if tree.is_file(page):
                return RouteMatch(page=page, params=params)
            page = join(cursor, segment, index_page)
            if tree.is_file(page):
                return RouteMatch(page=page, params=params)

        # 2. Static directory
        directory = join(cursor, segment)
        if tree.is_dir(directory):
            cursor = directory
            continue

        # 3. Dynamic entry
        descended = False
        for item in tree.list_dir(cursor):
            name = dynamic_name(item, page_extension)
            if name is None:
                continue
            candidate = join(cursor, item)
            if is_last:
                if item.endswith(page_extension) and tree.is_file(candidate):
                    params[name] = segment
                    return RouteMatch(page=candidate, params=params)
            elif tree.is_dir(candidate):
                params[name] = segment
                cursor = candidate
                descended = True
                break

        if not descended:
            return None

    page = join(cursor, index_page)
    if tree.is_file(page):
        return RouteMatch(page=page, params=params)
    return None
