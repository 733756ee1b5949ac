"""Serve the files of one directory over HTTP."""

from __future__ import annotations

import argparse
import functools
import os
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer


def make_server(
    directory: str | os.PathLike[str] = "/tmp", host: str = "", port: int = 99
) -> ThreadingHTTPServer:
    """Create, but do not start, a server for the files under ``directory``."""
    handler = functools.partial(SimpleHTTPRequestHandler, directory=os.fspath(directory))
    return ThreadingHTTPServer((host, port), handler)


def main(argv: list[str] | None = None) -> int:
    """Serve a directory until interrupted."""
    parser = argparse.ArgumentParser(description="Serve a directory over HTTP.")
    parser.add_argument("directory", nargs="?", default="/tmp", help="directory to serve")
    parser.add_argument("--host", default="", help="address to bind")
    parser.add_argument("--port", type=int, default=99, help="port to listen on")
    args = parser.parse_args(argv)

    with make_server(args.directory, args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0