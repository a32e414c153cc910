"""Command-line runner: execute one agent invocation and print the envelope."""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from models.invocation import Invocation  # noqa: E402
from orchestrator.action_router import FUNCTION_GOOGLE_SEARCH, FUNCTION_SCRAPE  # noqa: E402
from orchestrator.factory import create_router_from_env  # noqa: E402

DEFAULT_ACTION_GROUP = "cli"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a web action the way the agent would")
    parser.add_argument(
        "--body",
        action="store_true",
        help="Print the decoded response body instead of the whole envelope",
    )
    parser.add_argument("--action-group", default=DEFAULT_ACTION_GROUP)

    subparsers = parser.add_subparsers(dest="command", required=True)

    scrape = subparsers.add_parser(FUNCTION_SCRAPE, help="Fetch a page and extract its text")
    scrape.add_argument("url")

    search = subparsers.add_parser(FUNCTION_GOOGLE_SEARCH, help="Run a Google search")
    search.add_argument("query")

    event = subparsers.add_parser("event", help="Replay a raw Lambda event from a JSON file")
    event.add_argument("path", type=Path)

    return parser


def build_event(args: argparse.Namespace) -> dict[str, Any]:
    """Translate parsed CLI arguments into a Lambda event."""
    if args.command == "event":
        return json.loads(args.path.read_text(encoding="utf-8"))

    if args.command == FUNCTION_SCRAPE:
        parameters = [{"name": "url", "type": "string", "value": args.url}]
    else:
        parameters = [{"name": "query", "type": "string", "value": args.query}]

    return {
        "messageVersion": "1.0",
        "actionGroup": args.action_group,
        "function": args.command,
        "parameters": parameters,
    }


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    event = build_event(args)

    router = create_router_from_env()
    response = asyncio.run(router.handle(Invocation.from_event(event)))

    if args.body:
        output = response.payload
    else:
        output = response.to_dict()
    print(json.dumps(output, indent=2, ensure_ascii=False))

    return 0 if response.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
