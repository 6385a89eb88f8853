import argparse
import os
from dataclasses import dataclass
from typing import Tuple

from liveserve.inject import RELOAD_ROUTE

DEFAULT_PORT = 5173
DEFAULT_INDEX = "histograms.html"
DEFAULT_WATCH = ("histograms.html", "fourthDown_histograms.json", "top5.json")


@dataclass(frozen=True)
class Config:
    root: str
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    index: str = DEFAULT_INDEX
    watch: Tuple[str, ...] = ()
    route: str = RELOAD_ROUTE
    verbose: bool = False


def build_parser(environ):
    parser = argparse.ArgumentParser(prog="liveserve", description="Static dev server with live reload")
    parser.add_argument("--host", default=environ.get("HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=environ.get("PORT", str(DEFAULT_PORT)))
    parser.add_argument("--root", default=os.getcwd(), help="directory to serve (default: cwd)")
    parser.add_argument("--index", default=DEFAULT_INDEX, help="document served for /")
    parser.add_argument("--watch", action="append", metavar="FILE",
                        help="file to watch, relative to root; repeatable")
    parser.add_argument("--route", default=RELOAD_ROUTE, help="websocket route for reload clients")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def load_config(argv=None, environ=None):
    if environ is None:
        environ = os.environ
    args = build_parser(environ).parse_args(argv)

    root = os.path.abspath(args.root)
    watch = args.watch or DEFAULT_WATCH
    route = "/" + args.route.lstrip("/")
    return Config(
        root=root,
        host=args.host,
        port=args.port,
        index=args.index,
        watch=tuple(os.path.join(root, p) for p in watch),
        route=route,
        verbose=args.verbose,
    )
