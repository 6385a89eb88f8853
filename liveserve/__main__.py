import logging

from aiohttp import web

from liveserve.config import load_config
from liveserve.server import make_app

log = logging.getLogger("liveserve")


def main(argv=None):
    config = load_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = make_app(config)
    log.info("Dev server running: http://%s:%d/ (root %s)", config.host, config.port, config.root)
    web.run_app(app, host=config.host, port=config.port, print=None)


if __name__ == "__main__":
    main()
