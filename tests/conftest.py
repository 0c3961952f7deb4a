import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest


class FakeGitHub:
    """Answers every GET with a preset status and body, recording the paths."""

    def __init__(self):
        self.status = 200
        self.body = "[]"
        self.requests = []
        self.server = HTTPServer(("127.0.0.1", 0), self._handler())
        self.url = f"http://127.0.0.1:{self.server.server_port}"

    def respond(self, body: str, status: int = 200):
        self.body = body
        self.status = status

    def _handler(self):
        fake = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                fake.requests.append((self.path, dict(self.headers)))
                data = fake.body.encode("utf-8")
                self.send_response(fake.status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(data)))
                self.end_headers()
                self.wfile.write(data)

            def log_message(self, format, *args):
                pass

        return Handler


@pytest.fixture
def github_api():
    fake = FakeGitHub()
    thread = threading.Thread(target=fake.server.serve_forever, daemon=True)
    thread.start()
    yield fake
    fake.server.shutdown()
    fake.server.server_close()


@pytest.fixture
def make_event():
    def _make(event_type, payload=None, repo_name="testuser/testrepo", **extra):
        data = {
            "type": event_type,
            "repo": {"name": repo_name},
            "payload": {} if payload is None else payload,
        }
        data.update(extra)
        return data

    return _make
