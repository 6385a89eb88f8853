import enum
import os
from types import MappingProxyType


class ContentCategory(enum.Enum):
    MARKUP = "markup"
    SCRIPT = "script"
    STYLE = "style"
    IMAGE = "image"
    DATA = "data"
    BINARY = "binary"


DEFAULT_TYPE = (ContentCategory.BINARY, "application/octet-stream")

TYPES = MappingProxyType({
    ".html": (ContentCategory.MARKUP, "text/html; charset=utf-8"),
    ".js": (ContentCategory.SCRIPT, "text/javascript; charset=utf-8"),
    ".css": (ContentCategory.STYLE, "text/css; charset=utf-8"),
    ".json": (ContentCategory.DATA, "application/json; charset=utf-8"),
    ".map": (ContentCategory.DATA, "application/json; charset=utf-8"),
    ".csv": (ContentCategory.DATA, "text/csv; charset=utf-8"),
    ".svg": (ContentCategory.IMAGE, "image/svg+xml; charset=utf-8"),
    ".png": (ContentCategory.IMAGE, "image/png"),
    ".jpg": (ContentCategory.IMAGE, "image/jpeg"),
    ".jpeg": (ContentCategory.IMAGE, "image/jpeg"),
    ".ico": (ContentCategory.IMAGE, "image/x-icon"),
})


def lookup(path):
    """Return ``(category, mime)`` for a file name, by extension."""
    ext = os.path.splitext(path)[1].lower()
    return TYPES.get(ext, DEFAULT_TYPE)
