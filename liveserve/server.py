import logging

from aiohttp import WSMsgType, hdrs, web

from liveserve.clients import ClientRegistry
from liveserve.config import Config
from liveserve.paths import resolve_path
from liveserve.responder import respond, text_response
from liveserve.watcher import ChangeWatcher

log = logging.getLogger(__name__)

CONFIG_KEY = web.AppKey("config", Config)
REGISTRY_KEY = web.AppKey("registry", ClientRegistry)
WATCHER_KEY = web.AppKey("watcher", ChangeWatcher)


# -------- WebSocket --------
async def websocket_handler(request):
    registry = request.app[REGISTRY_KEY]
    ws = web.WebSocketResponse()
    await ws.prepare(request)
    registry.register(ws)

    try:
        async for msg in ws:
            if msg.type == WSMsgType.ERROR:
                log.debug("reload client error: %s", ws.exception())
                break
    finally:
        registry.unregister(ws)
    return ws


@web.middleware
async def upgrade_router(request, handler):
    """Send upgrades on the reload route to the websocket, drop the rest."""
    if hdrs.UPGRADE not in request.headers:
        return await handler(request)

    if request.raw_path.startswith(request.app[CONFIG_KEY].route):
        return await websocket_handler(request)

    log.debug("dropping upgrade request for %s", request.raw_path)
    if request.transport is not None:
        request.transport.abort()
    # never reaches the client; the transport is gone
    return web.Response(status=400)


# -------- HTTP handler --------
async def file_handler(request):
    config = request.app[CONFIG_KEY]
    file_path = resolve_path(config.root, request.raw_path, config.index)
    if file_path is None:
        return text_response(403, "Forbidden")
    return await respond(file_path, config.route)


# -------- Lifecycle --------
async def watch_files(app):
    watcher = app[WATCHER_KEY]
    watched = watcher.start()
    log.info("Live reload watching:")
    for path in watched:
        log.info(" - %s", path)
    yield
    watcher.stop()


async def close_clients(app):
    await app[REGISTRY_KEY].close()


def make_app(config):
    app = web.Application(middlewares=[upgrade_router])
    app[CONFIG_KEY] = config
    app[REGISTRY_KEY] = registry = ClientRegistry()
    app[WATCHER_KEY] = ChangeWatcher(registry, config.watch)
    app.router.add_get("/{path:.*}", file_handler)
    app.cleanup_ctx.append(watch_files)
    app.on_shutdown.append(close_clients)
    return app
