"""HTTP server that echoes requests back as JSON."""

from __future__ import annotations

import argparse
import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlsplit

_log = logging.getLogger(__name__)

_ROUTE = "/echo"


class EchoHandler(BaseHTTPRequestHandler):
    """Answers ``/echo``: POST returns the body, GET returns the request URI."""

    def do_GET(self) -> None:  # noqa: N802
        if urlsplit(self.path).path != _ROUTE:
            self._not_found()
            return
        _log.info("%s", self.path)
        self._send_json({"URI": self.path})

    def do_POST(self) -> None:  # noqa: N802
        if urlsplit(self.path).path != _ROUTE:
            self._not_found()
            return
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length).decode("utf-8", errors="replace")
        _log.info("%s", body)
        self._send_json({"body": body})

    def _send_json(self, payload: dict[str, Any]) -> None:
        data = json.dumps(payload).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def _not_found(self) -> None:
        data = b"404 page not found"
        self.send_response(404)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        _log.debug(format, *args)


def make_server(host: str = "", port: int = 8080) -> ThreadingHTTPServer:
    """Create, but do not start, an echo server bound to ``host:port``."""
    return ThreadingHTTPServer((host, port), EchoHandler)


def main(argv: list[str] | None = None) -> int:
    """Run the echo server until interrupted."""
    parser = argparse.ArgumentParser(description="Echo HTTP requests back as JSON.")
    parser.add_argument("--host", default="", help="address to bind")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    with make_server(args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0