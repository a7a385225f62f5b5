"""CLI for running the library API server."""

import argparse
import os
import sys

import uvicorn

from common.constants import GRAPHQL_PATH
from common.env import env
from common.logger import error, setup_logging, success


def cmd_serve(args):
    """Start uvicorn serving the FastAPI app."""
    try:
        env.id_strategy()
    except ValueError as e:
        error(str(e))
        sys.exit(1)

    # Loggers created after this point, including under --reload, read LOG_LEVEL
    os.environ["LOG_LEVEL"] = args.log_level
    setup_logging(level=args.log_level)

    success(f"Serving GraphQL on http://{args.host}:{args.port}{GRAPHQL_PATH}")
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
        log_config=None,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="In-memory GraphQL API for authors and books",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the GraphQL server",
        description=(
            "Run the GraphQL server.\n\n"
            "Defaults are read from the environment (or a .env file):\n"
            "  API_HOST, API_PORT, LOG_LEVEL, CORS_ORIGINS, GRAPHIQL_ENABLED, ID_STRATEGY\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    serve_parser.add_argument(
        "--host",
        default=env.api_host(),
        help="Host to bind (default: API_HOST or 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=env.api_port(),
        help="Port to listen on (default: API_PORT or 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change",
    )
    serve_parser.add_argument(
        "--log-level",
        default=env.log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    return parser


def main():
    """Main entry point for the library API CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "serve":
        cmd_serve(args)


if __name__ == "__main__":
    main()
