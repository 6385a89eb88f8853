import asyncio
import logging
import os
import stat

from aiohttp import hdrs, web

from liveserve.inject import RELOAD_ROUTE, inject_live_reload
from liveserve.mime import ContentCategory, lookup

log = logging.getLogger(__name__)

NO_CACHE = {hdrs.CACHE_CONTROL: "no-store"}


def text_response(status, text):
    return web.Response(status=status, text=text, headers=NO_CACHE)


def _read(path):
    with open(path, "rb") as f:
        return f.read()


async def respond(file_path, route=RELOAD_ROUTE):
    """Serve one resolved file, injecting the reload client into markup."""
    try:
        st = await asyncio.to_thread(os.stat, file_path)
    except (OSError, ValueError):
        return text_response(404, "Not found")
    if not stat.S_ISREG(st.st_mode):
        return text_response(404, "Not found")

    category, content_type = lookup(file_path)

    try:
        body = await asyncio.to_thread(_read, file_path)
    except OSError as exc:
        log.warning("failed to read %s: %s", file_path, exc)
        return text_response(500, "Server error")

    if category is ContentCategory.MARKUP:
        html = body.decode("utf-8", errors="replace")
        body = inject_live_reload(html, route).encode("utf-8")

    headers = dict(NO_CACHE)
    headers[hdrs.CONTENT_TYPE] = content_type
    return web.Response(body=body, headers=headers)
