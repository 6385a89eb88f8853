import asyncio
import logging
import os

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

log = logging.getLogger(__name__)

TRIGGER_EVENTS = frozenset([EVENT_TYPE_MODIFIED, EVENT_TYPE_CREATED, EVENT_TYPE_MOVED])


# -------- File watcher --------
class Watcher(FileSystemEventHandler):
    """Calls ``callback`` whenever ``path`` is written, created or moved onto."""

    def __init__(self, path, callback):
        super().__init__()
        self.path = os.path.realpath(path)
        self.callback = callback

    def on_any_event(self, event):
        if event.is_directory or event.event_type not in TRIGGER_EVENTS:
            return
        targets = (event.src_path, getattr(event, "dest_path", ""))
        # FSEvents reports symlink-free paths, e.g. /private/var for /var
        if self.path in [os.path.realpath(p) for p in targets if p]:
            log.debug("%s: %s", event.event_type, self.path)
            self.callback()


class ChangeWatcher:
    """Broadcasts a reload to ``registry`` each time a watched file changes.

    The observer runs its own thread; broadcasts are handed back to ``loop``.
    """

    def __init__(self, registry, paths, loop=None):
        self.registry = registry
        self.paths = [os.path.abspath(p) for p in paths]
        self.loop = loop
        self.observer = Observer()
        self.watched = []

    def notify(self):
        asyncio.run_coroutine_threadsafe(self.registry.broadcast_reload(), self.loop)

    def start(self):
        if self.loop is None:
            self.loop = asyncio.get_running_loop()
        for path in self.paths:
            try:
                os.stat(path)
                self.observer.schedule(Watcher(path, self.notify), os.path.dirname(path), recursive=False)
            except OSError as exc:
                log.warning("not watching %s: %s", path, exc)
                continue
            self.watched.append(path)
        self.observer.start()
        return self.watched

    def stop(self):
        if self.observer.is_alive():
            self.observer.stop()
            self.observer.join()
