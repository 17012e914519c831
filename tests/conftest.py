import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from deluge_client.client import DelugeClient


LOGIN_OK = {"id": 1, "result": True, "error": None}


class FakeDeluge:
    """
    Plays the Deluge Web UI on a local port.

    auth.login is answered with `login_response`; every other method pops
    the next queued (status, body) pair, or replays the last one.
    """

    def __init__(self):
        self.login_response = LOGIN_OK
        self.responses = []
        self.requests = []
        self.cookies = []
        self.server = HTTPServer(("127.0.0.1", 0), self._handler())
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    @property
    def url(self):
        host, port = self.server.server_address
        return f"http://{host}:{port}"

    def reply(self, body, status=200):
        self.responses.append((status, body))

    def methods(self):
        return [r["method"] for r in self.requests]

    def _next_response(self, payload):
        if payload.get("method") == "auth.login":
            return 200, self.login_response
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def _handler(self):
        fake = self

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self):
                length = int(self.headers.get("Content-Length", 0))
                payload = json.loads(self.rfile.read(length))
                fake.requests.append(payload)
                fake.cookies.append(self.headers.get("Cookie"))

                if self.path != "/json":
                    self.send_response(404)
                    self.end_headers()
                    return

                status, body = fake._next_response(payload)
                data = body if isinstance(body, bytes) else json.dumps(body).encode()

                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(data)))
                if payload.get("method") == "auth.login":
                    self.send_header("Set-Cookie", "_session_id=abc123; Path=/")
                self.end_headers()
                self.wfile.write(data)

            def log_message(self, format, *args):
                pass

        return Handler

    def start(self):
        self.thread.start()

    def stop(self):
        self.server.shutdown()
        self.server.server_close()


@pytest.fixture
def deluge_server():
    server = FakeDeluge()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def client(deluge_server):
    client = DelugeClient(deluge_server.url, "pass")
    client.connect()
    yield client
    client.close()
