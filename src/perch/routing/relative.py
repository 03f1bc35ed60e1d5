"""Relative paths between build outputs.

Generated links are relative to the file that contains them, so an
exported site keeps working under any base path or straight from disk.
"""


def _split(path: str) -> list[str]:
    path = path.replace("\\", "/").strip("/")
    return path.split("/") if path else []


def make_relative_path(source: str, destination: str) -> str:
    """Compute the path from *source*'s directory to *destination*.

    Both arguments are build paths relative to the output root.  The
    result is never empty: when both point at the same place the
    destination's file name is returned, so callers can always append a
    query string or fragment.

    Examples::

        >>> make_relative_path("index.html", "product.html")
        'product.html'
        >>> make_relative_path("games/index.html", "index.html")
        '../index.html'
        >>> make_relative_path("a/b/page.html", "a/c/other.html")
        '../c/other.html'
        >>> make_relative_path("about.html", "about.html")
        'about.html'
    """
    source_dir = _split(source)[:-1]
    target = _split(destination)

    common = 0
    for left, right in zip(source_dir, target):
        if left != right:
            break
        common += 1

    parts = [".."] * (len(source_dir) - common) + target[common:]
    if not parts:
        return target[-1] if target else ""
    return "/".join(parts)
