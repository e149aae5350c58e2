from http.server import BaseHTTPRequestHandler, HTTPServer
import json
import os

from html_to_ricos.logs import log_event
from html_to_ricos.service import API_INFO, RequestError, check_length, cors_origin, handle_convert

MAX_DRAIN_BYTES = 64 * 1024


class DevHandler(BaseHTTPRequestHandler):
    def _set_headers(self, status=200, length=None):
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Access-Control-Allow-Origin", cors_origin())
        self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        if length is not None:
            self.send_header("Content-Length", str(length))
        self.end_headers()

    def _send_json(self, payload, status=200):
        body = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
        self._set_headers(status, length=len(body))
        self.wfile.write(body)

    def log_message(self, format, *args):
        log_event("INFO", "http_request", route=getattr(self, "path", None), client=self.client_address[0], line=format % args)

    def do_OPTIONS(self):
        self._set_headers(204, length=0)

    def do_GET(self):
        if self.path == "/":
            return self._send_json(API_INFO)
        self._send_json({"error": "Not found"}, status=404)

    def do_POST(self):
        if self.path == "/convert":
            return self._handle_convert()
        self._send_json({"error": "Not found"}, status=404)

    def _discard_body(self, length):
        # Only drain small leftovers; the connection is closed afterwards anyway
        length = min(length, MAX_DRAIN_BYTES)
        while length > 0:
            chunk = self.rfile.read(min(length, 65536))
            if not chunk:
                break
            length -= len(chunk)

    def _handle_convert(self):
        length_header = self.headers.get("Content-Length")
        try:
            content_length = check_length(length_header)
        except RequestError as exc:
            if exc.status == 413:
                self._discard_body(int(length_header))
            self.close_connection = True
            self._send_json(exc.payload(), status=exc.status)
            return

        raw_body = self.rfile.read(content_length) if content_length > 0 else b""
        status, payload = handle_convert(raw_body, self.headers.get("Content-Type", ""))
        self._send_json(payload, status=status)


def make_server(host="0.0.0.0", port=None):
    if port is None:
        port = int(os.environ.get("PORT", "3000"))
    return HTTPServer((host, port), DevHandler)


def run():
    server = make_server()
    port = server.server_address[1]
    log_event("INFO", "server_start", port=port)
    print(f"HTML to Ricos API running on http://localhost:{port}")
    print(f"- GET  http://localhost:{port}/")
    print(f"- POST http://localhost:{port}/convert")
    server.serve_forever()


if __name__ == "__main__":
    run()
