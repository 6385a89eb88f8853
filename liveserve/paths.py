import os
from urllib.parse import unquote

from liveserve.config import DEFAULT_INDEX


def resolve_path(root, raw_path, index=DEFAULT_INDEX):
    """Map a raw request target onto a file under ``root``.

    Query string and fragment are dropped before percent-decoding. ``/``
    maps to ``index``. Returns the absolute, normalized path, or ``None``
    when the result would land outside ``root``.
    """
    path = raw_path.split("?", 1)[0].split("#", 1)[0]
    if path == "/":
        path = "/" + index

    root = os.path.abspath(root)
    rel = unquote(path).lstrip("/")
    resolved = os.path.normpath(os.path.join(root, rel))

    try:
        if os.path.commonpath([root, resolved]) != root:
            return None
    except ValueError:
        # different drives on Windows
        return None
    return resolved
