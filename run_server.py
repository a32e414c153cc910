#!/usr/bin/env python3
"""FastAPI server entry point for local invocation."""

import argparse

import uvicorn
from dotenv import load_dotenv

from config.config import Config


def build_parser(config: Config) -> argparse.ArgumentParser:
    """CLI flags override SERVER_HOST / SERVER_PORT from the environment."""
    parser = argparse.ArgumentParser(description="Agent Web Actions local server")
    parser.add_argument("--host", default=config.server_host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.server_port, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    config = Config()
    missing = config.validate()
    if missing:
        print(f"Warning: {', '.join(missing)} not set; google_search will return no results.")

    args = build_parser(config).parse_args(argv)

    uvicorn.run(
        "server.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
