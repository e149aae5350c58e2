from http.server import BaseHTTPRequestHandler
import json
import os
import sys


# Ensure project root is on path so we can import the converter
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from html_to_ricos.service import RequestError, check_length, cors_origin, handle_convert  # noqa: E402


class handler(BaseHTTPRequestHandler):
    def do_POST(self):
        try:
            content_length = check_length(self.headers.get("Content-Length"))
        except RequestError as exc:
            self.close_connection = True
            self._send_json(exc.payload(), status=exc.status)
            return

        raw_body = self.rfile.read(content_length) if content_length > 0 else b""
        status, payload = handle_convert(raw_body, self.headers.get("Content-Type", ""), route="/api/convert")
        self._send_json(payload, status=status)

    def do_GET(self):
        self._send_json({"error": "Use POST to submit HTML."}, status=405)

    def _send_json(self, payload, status=200):
        body = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Access-Control-Allow-Origin", cors_origin())
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)
