"""Adapter from Vercel's BaseHTTPRequestHandler entry point to a ProxyRoute."""
from http.server import BaseHTTPRequestHandler
from urllib.parse import parse_qs, urlparse

from .proxy import ProxyRequest, ProxyRoute
from .utils import get_logger

logger = get_logger(__name__)


def make_handler(route: ProxyRoute) -> type:
    """Build the ``handler`` class Vercel expects for a serverless function."""

    class handler(BaseHTTPRequestHandler):
        def _dispatch(self):
            parsed = urlparse(self.path)
            request = ProxyRequest(
                method=self.command,
                path=parsed.path,
                query=parse_qs(parsed.query, keep_blank_values=True),
            )
            response = route.handle(request)
            body = response.payload()

            self.send_response(response.status)
            self.send_header('Content-type', 'application/json')
            self.send_header('Content-Length', str(len(body)))
            for key, value in response.headers.items():
                self.send_header(key, value)
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)

        # Every method reaches the route so non-GET gets a JSON 405
        do_GET = _dispatch
        do_HEAD = _dispatch
        do_POST = _dispatch
        do_PUT = _dispatch
        do_PATCH = _dispatch
        do_DELETE = _dispatch
        do_OPTIONS = _dispatch

        def log_message(self, format, *args):
            logger.debug(f"{route.name}: {format % args}")

    return handler
