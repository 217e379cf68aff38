"""
matty.lol API proxies - local development server

Mounts every serverless route at the same path Vercel serves it from.
"""
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, Response, jsonify, request

from mattylol.proxy import ProxyRequest
from mattylol.sources import ROUTES
from mattylol.utils import get_logger

logger = get_logger("web")

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _view(route):
    def view():
        proxy_request = ProxyRequest(
            method=request.method,
            path=request.path,
            query=request.args.to_dict(flat=False),
        )
        response = route.handle(proxy_request)
        return Response(
            response.payload(),
            status=response.status,
            headers=response.headers,
            mimetype="application/json",
        )

    view.__name__ = f"proxy_{route.name.replace('-', '_')}"
    return view


def create_app(routes=None) -> Flask:
    """Create the Flask app; ``routes`` defaults to one instance of each source."""
    app = Flask(__name__)
    routes = routes if routes is not None else [route_cls() for route_cls in ROUTES]

    for route in routes:
        app.add_url_rule(route.path, view_func=_view(route), methods=METHODS)

    @app.route('/api')
    def index():
        """List mounted endpoints."""
        return jsonify({route.name: route.path for route in routes})

    return app


app = create_app()


def main(host: str = '127.0.0.1', port: int = 3000, debug: bool = True):
    """Run the development server."""
    print("=" * 50)
    print("  matty.lol API proxies")
    print(f"  http://{host}:{port}/api")
    print("=" * 50)

    # Routes share one requests.Session each
    app.run(host=host, port=port, debug=debug, threaded=False)


if __name__ == '__main__':
    main()
