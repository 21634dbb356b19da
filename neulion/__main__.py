#!/usr/bin/env python3
"""
Neulion - command line entry point

Thin orchestration layer that:
1. Loads configuration
2. Builds a NeulionClient
3. Runs one catalog query and prints the result as JSON
"""

import argparse
import asyncio
import json
import sys
from datetime import datetime
from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape

from .client import NeulionClient
from .config import load_config
from .logging_config import configure_logging
from .modules.catalog import NeulionJSONEncoder
from .modules.errors import NeulionError


console = Console()
error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="neulion", description="Query the Neulion VOD catalog")
    parser.add_argument("--config", help="JSON config file (default: ./config.json, then ~/.neulionrc, then env)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search program ids")
    search.add_argument("--name", help="Program name")
    search.add_argument("--description", help="Program description")
    search.add_argument("--prog-date", type=datetime.fromisoformat, help="Program date (ISO-8601)")
    search.add_argument("--update-time", type=datetime.fromisoformat, help="Updated since (ISO-8601)")
    search.add_argument("--group-id", type=int, help="Override the configured group")

    date_range = subparsers.add_parser("range", help="Program ids for each day in [start, end)")
    date_range.add_argument("start", help="Start date (ISO-8601)")
    date_range.add_argument("end", help="End date (ISO-8601, exclusive)")

    subparsers.add_parser("categories", help="List categories of the group")

    details = subparsers.add_parser("details", help="Show details of one program")
    details.add_argument("program_id", type=int, help="Program id")

    return parser


def _search_params(args: argparse.Namespace) -> dict:
    params = {
        "name": args.name,
        "description": args.description,
        "progDate": args.prog_date,
        "updateTime": args.update_time,
        "groupId": args.group_id,
    }
    return {key: value for key, value in params.items() if value is not None}


async def run(args: argparse.Namespace) -> Any:
    config = load_config(args.config)

    async with NeulionClient(config) as api:
        if args.command == "search":
            return await api.search(_search_params(args))
        if args.command == "range":
            return await api.range(args.start, args.end)
        if args.command == "categories":
            return await api.categories()
        if args.command == "details":
            return await api.details(args.program_id)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    try:
        result = asyncio.run(run(args))
    except NeulionError as e:
        error_console.print(f"[red]{e.kind.value} error:[/red] {escape(e.message)}")
        return 1
    except ValueError as e:
        error_console.print(f"[red]{escape(str(e))}[/red]")
        return 1

    console.print_json(json.dumps(result, cls=NeulionJSONEncoder))
    return 0


if __name__ == "__main__":
    sys.exit(main())
