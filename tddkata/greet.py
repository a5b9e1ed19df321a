"""Write a greeting to a stream, and serve it over HTTP."""

from __future__ import annotations

import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TextIO

DEFAULT_NAME = "Elodie"
DEFAULT_PORT = 8080


def greet(writer: TextIO, name: str) -> None:
    """Write ``Hello, <name>`` to ``writer``."""
    writer.write(f"Hello, {name}")


class _GreetHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        body = f"Hello, {DEFAULT_NAME}".encode()
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def main(argv: list[str] | None = None) -> None:
    """Greet on standard output, then serve the greeting on port 8080."""
    greet(sys.stdout, DEFAULT_NAME)
    sys.stdout.flush()
    with ThreadingHTTPServer(("", DEFAULT_PORT), _GreetHandler) as httpd:
        httpd.serve_forever()


if __name__ == "__main__":
    main()