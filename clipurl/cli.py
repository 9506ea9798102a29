"""
Command-line interface for ClipURL.

Usage:
    clipurl serve [--host HOST] [--port PORT]
    clipurl shorten <url> [--alias ALIAS] [--api-url URL]
"""

import argparse
import sys
from typing import List, Optional

import uvicorn

from clipurl.client import ShortenerClient
from clipurl.core.config import get_settings
from clipurl.main import create_app


def serve(args: argparse.Namespace) -> int:
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(
        app,
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
        log_config=None,  # Uvicorn logs are intercepted into loguru
    )
    return 0


def shorten(args: argparse.Namespace) -> int:
    api_url = args.api_url or get_settings().BASE_URL
    with ShortenerClient(api_url) as client:
        result = client.shorten(args.url, args.alias)
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    print(result.short_url)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clipurl",
        description="Alias-based URL shortener",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (default: HOST setting)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: PORT setting)")
    serve_parser.set_defaults(func=serve)

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL under an alias")
    shorten_parser.add_argument("url", help="Long URL to shorten")
    shorten_parser.add_argument("--alias", default="", help="Desired short code")
    shorten_parser.add_argument("--api-url", help="Backend address (default: BASE_URL setting)")
    shorten_parser.set_defaults(func=shorten)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
