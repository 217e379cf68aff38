#!/usr/bin/env python3
"""
matty.lol API proxies

Serverless routes that proxy Jupiter, GitHub, Reddit and Open-Meteo to the
browser with CDN cache headers and a uniform error envelope.

Usage:
    python main.py serve --port 3000             # Run the local dev server
    python main.py fetch jupiter-price --ids SOL  # Run one route and print it
    python main.py fetch github                   # Latest commit status
"""
import argparse
import json
import sys

from mattylol.proxy import ProxyRequest
from mattylol.sources import ROUTES
from mattylol.utils import get_logger

logger = get_logger("main")

ROUTE_NAMES = {route_cls.name: route_cls for route_cls in ROUTES}


def fetch_route(name: str, ids: str = None) -> int:
    """Run a single route once and print its response."""
    route = ROUTE_NAMES[name]()
    query = {"ids": [ids]} if ids else {}
    logger.info(f"Running {name} ({route.path})")

    response = route.handle(ProxyRequest(method="GET", path=route.path, query=query))

    print(f"HTTP {response.status}")
    for key, value in response.headers.items():
        print(f"{key}: {value}")
    print()
    print(json.dumps(response.body, indent=2, ensure_ascii=False))

    return 0 if response.status < 400 else 1


def serve(host: str, port: int, debug: bool) -> int:
    from web.app import main as run_web

    run_web(host=host, port=port, debug=debug)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="matty.lol API proxies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the local dev server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=3000)
    serve_parser.add_argument("--no-debug", action="store_true", help="Disable Flask debug mode")

    fetch_parser = subparsers.add_parser("fetch", help="Run one route and print the envelope")
    fetch_parser.add_argument("route", choices=sorted(ROUTE_NAMES))
    fetch_parser.add_argument("--ids", help="Comma-separated mint ids (jupiter-price)")

    args = parser.parse_args()

    if args.command == "serve":
        return serve(args.host, args.port, not args.no_debug)
    if args.command == "fetch":
        return fetch_route(args.route, args.ids)

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
