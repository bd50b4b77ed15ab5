"""
Command line entry point.

    python -m craft_advisor --snapshot snapshot.json recommend 2
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .adapters import SnapshotGameData
from .core.config import ConfigLoader
from .core.container import create_container, shutdown_container
from .core.exceptions import CraftAdvisorError
from .utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="craft_advisor",
        description="Recommend the most profitable items to craft from held materials."
    )
    parser.add_argument("--snapshot", required=True, help="Game data snapshot (JSON)")
    parser.add_argument("--env-file", default=None, help="Path to .env file")

    sub = parser.add_subparsers(dest="command", required=True)

    recommend = sub.add_parser("recommend", help="Show recommendations")
    recommend.add_argument("page", nargs="?", default="1")

    sub.add_parser("history", help="Show crafting history totals")
    sub.add_parser("export", help="Export recommendations to CSV")

    filter_cmd = sub.add_parser("filter", help="Set filter criteria and show recommendations")
    filter_cmd.add_argument("criteria", nargs="?", default="")

    return parser


async def run(args: argparse.Namespace) -> int:
    settings = ConfigLoader.load_config(env_file=args.env_file)
    setup_logging(settings.log_level)
    game_data = SnapshotGameData.from_file(args.snapshot)

    container = create_container(game_data, settings)
    handler = container.command_handler()

    try:
        if args.command == "recommend":
            lines = await handler.recommend(args.page)
        elif args.command == "filter":
            lines = await handler.filter(args.criteria)
            lines += await handler.recommend(1)
        elif args.command == "export":
            lines = await handler.export()
        else:
            lines = await handler.history()
    finally:
        await shutdown_container(container)

    for line in lines:
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.INFO)

    try:
        return asyncio.run(run(args))
    except (CraftAdvisorError, OSError, ValueError) as e:
        logger.error(f"craft_advisor failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
