"""Static dev server with live reload."""

from liveserve.clients import ClientRegistry
from liveserve.config import Config, load_config
from liveserve.server import make_app

__version__ = "0.1.0"

__all__ = ["ClientRegistry", "Config", "load_config", "make_app"]
