import logging

log = logging.getLogger(__name__)

RELOAD_SIGNAL = "reload"


class ClientRegistry:
    """Open reload channels.

    Only touched from the event loop thread; the change watcher reaches it
    through ``asyncio.run_coroutine_threadsafe``.
    """

    def __init__(self):
        self._clients = set()

    def __len__(self):
        return len(self._clients)

    def __iter__(self):
        return iter(list(self._clients))

    def __contains__(self, ws):
        return ws in self._clients

    def register(self, ws):
        self._clients.add(ws)
        log.debug("reload client connected (%d open)", len(self._clients))

    def unregister(self, ws):
        if ws in self._clients:
            self._clients.discard(ws)
            log.debug("reload client gone (%d open)", len(self._clients))

    async def broadcast_reload(self):
        """Send the reload signal to every channel; returns how many got it.

        A channel that is closed or fails to send is dropped.
        """
        sent = 0
        for ws in list(self._clients):
            if ws.closed:
                self.unregister(ws)
                continue
            try:
                await ws.send_str(RELOAD_SIGNAL)
            except (ConnectionError, RuntimeError) as exc:
                log.debug("dropping reload client: %s", exc)
                self.unregister(ws)
            else:
                sent += 1
        log.info("reload sent to %d client(s)", sent)
        return sent

    async def close(self):
        for ws in list(self._clients):
            await ws.close()
        self._clients.clear()
