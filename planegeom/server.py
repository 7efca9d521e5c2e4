"""HTTP server exposing the geometric algorithms as JSON endpoints."""

from __future__ import annotations

import json
import re
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, Dict, List, Optional

from planegeom.methods import (
    MethodError,
    angle_point_in_polygon_method,
    closest_pair_method,
)

DEFAULT_PORT = 8080

_ROUTES: Dict[str, Callable[[Any], Dict[str, Any]]] = {
    "/ClosestPair": closest_pair_method,
    "/AnglePointInPolygon": angle_point_in_polygon_method,
}

_PORT_PATTERN = re.compile(r"\s*([+-]?\d+)")


class _Handler(BaseHTTPRequestHandler):
    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        pass

    def _send_json(self, status: int, payload: Dict[str, Any]) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:
        if self.path == "/stop":
            self.send_response(200)
            self.send_header("Content-Length", "0")
            self.end_headers()
            threading.Thread(target=self.server.shutdown, daemon=True).start()
            return
        self._send_json(404, {"error": "Not found"})

    def do_POST(self) -> None:
        method = _ROUTES.get(self.path)
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length)
        if method is None:
            self._send_json(404, {"error": "Not found"})
            return

        try:
            data = json.loads(body)
        except ValueError as exc:
            self._send_json(400, {"error": f"Parse error: {exc}"})
            return

        try:
            output = method(data)
        except MethodError as exc:
            self._send_json(400, {"error": exc.message})
            return
        self._send_json(200, output)


def create_server(host: str = "0.0.0.0", port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
    """Bind a server to the address; GET /stop shuts it down."""
    server = ThreadingHTTPServer((host, port), _Handler)
    server.daemon_threads = True
    return server


def main(argv: Optional[List[str]] = None) -> int:
    """Serve on the port given as the first argument (default 8080)."""
    args = sys.argv[1:] if argv is None else argv
    port = DEFAULT_PORT
    if args:
        match = _PORT_PATTERN.match(args[0])
        if match is None:
            return -1
        port = int(match.group(1))

    print(f"Listening on port {port}...", file=sys.stderr)
    server = create_server("0.0.0.0", port)
    try:
        server.serve_forever()
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())