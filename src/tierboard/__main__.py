"""Entry point for the Tierboard backend."""

import argparse
import sys


def main():
    """Main entry point for the Tierboard CLI."""
    parser = argparse.ArgumentParser(
        description="Tierboard - combat tier leaderboard backend",
        prog="tierboard",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("server", help="Start the API server")
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: HOST setting, 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (default: PORT setting, 3001)",
    )
    server_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    # Client command
    client_parser = subparsers.add_parser("client", help="Start the text client")
    client_parser.add_argument(
        "--url",
        default=None,
        help="API base URL (default: API_BASE_URL setting, http://localhost:3001)",
    )

    args = parser.parse_args()

    if args.command == "server":
        import uvicorn

        from tierboard.config import get_settings

        settings = get_settings()
        uvicorn.run(
            "tierboard.server.app:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
        )

    elif args.command == "client":
        from tierboard.client.text import run

        run(args.url)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
