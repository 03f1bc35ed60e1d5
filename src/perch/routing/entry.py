"""Page-to-entry mapping.

Flattens a page-tree path with dynamic segments into the build file it
compiles to, plus the ordered names its values travel under as query
parameters::

    index.html                -> index.html
    about.html                -> about.html
    product/[id].html         -> product.html       (?id=...)
    games/[name]/[id].html    -> games/index.html   (?name=...&id=...)
    [slug].html               -> index.html         (?slug=...)

The build orchestrator writes each rendered page to this destination, and
the URL rewriter links to it, so both sides must agree on this function.
"""

from perch.routing.segments import EntryMapping, parse_segment


def map_page_to_entry(
    page_path: str,
    *,
    page_extension: str = ".html",
    entry_extension: str = ".html",
    index_name: str = "index",
) -> EntryMapping:
    """Map a page-tree path to its flat build destination.

    Args:
        page_path: Path relative to the page root, with or without the
            page extension.
        page_extension: Extension of page files in the tree.
        entry_extension: Extension of generated entry files.
        index_name: Stem of the index entry file.

    Returns:
        The destination build path and the dynamic names in
        left-to-right order.  Never fails.
    """
    page_path = page_path.replace("\\", "/")
    has_extension = page_path.endswith(page_extension)
    stem = page_path[: -len(page_extension)] if has_extension else page_path

    param_names: list[str] = []
    static_segments: list[str] = []
    for part in stem.split("/") if stem else []:
        segment = parse_segment(part)
        if segment.is_dynamic and segment.name is not None:
            param_names.append(segment.name)
        else:
            static_segments.append(part)

    if not param_names:
        # Plain page: keep the structure as-is
        if has_extension:
            return EntryMapping(destination=stem + entry_extension)
        return EntryMapping(destination=page_path)

    if not static_segments:
        destination = index_name + entry_extension
    elif len(static_segments) == 1 and len(param_names) == 1:
        # Detail page: product/[id] flattens to product
        destination = static_segments[0] + entry_extension
    else:
        destination = "/".join(static_segments) + "/" + index_name + entry_extension

    return EntryMapping(destination=destination, param_names=tuple(param_names))
