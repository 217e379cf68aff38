import sys
import threading
from http.server import ThreadingHTTPServer
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from mattylol.proxy import Success
from mattylol.vercel import make_handler

ENV_VARS = [
    "JUP_PORTFOLIO_API_KEY",
    "JUP_WALLET_ADDRESS",
    "GITHUB_OWNER",
    "GITHUB_REPO",
    "REDDIT_USERNAME",
    "WEATHER_LAT",
    "WEATHER_LON",
]


class FakeFetcher:
    """Stands in for UpstreamFetcher; replays queued results in order."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def fetch(self, endpoint, parse="json"):
        self.calls.append((endpoint, parse))
        if not self.results:
            raise AssertionError(f"unexpected upstream call to {endpoint.url}")
        return self.results.pop(0)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fetcher():
    return FakeFetcher()


def ok(body, status=200):
    return Success(status=status, body=body)


@pytest.fixture
def serve():
    """Run a route behind the Vercel handler on a local port."""
    servers = []

    def _serve(route):
        server = ThreadingHTTPServer(("127.0.0.1", 0), make_handler(route))
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        host, port = server.server_address
        return f"http://{host}:{port}"

    yield _serve

    for server in servers:
        server.shutdown()
        server.server_close()
