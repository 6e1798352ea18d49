"""
catgql server entry point.

Usage:
    python -m catgql.server
    python -m catgql.server --host 0.0.0.0 --port 8088
"""

import argparse
import sys

from catgql.core.config import get_settings


def main(argv=None):
    """Entry point for the catgql server."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="catgql server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Server host (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Server port (default: {settings.port})"
    )
    args = parser.parse_args(argv)

    print(f"Starting catgql server on {args.host}:{args.port}...")

    try:
        import uvicorn
        from catgql.server.app import create_app

        app = create_app(settings=settings)
        uvicorn.run(app, host=args.host, port=args.port)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
        sys.exit(0)
    except Exception as e:
        print(f"Server failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
