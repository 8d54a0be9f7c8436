#!/usr/bin/env python3
"""Main entry point for Livestream Search."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from .__version__ import __version__
from .api.base import ApiError
from .api.twitch import TwitchApiClient
from .core.models import RecordDecodeError
from .core.report import print_report
from .core.settings import ConfigError, TwitchSettings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    # stdout carries the report, so logs go to stderr
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # Suppress noisy third-party loggers
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def non_negative_int(value: str) -> int:
    """argparse type for --limit."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="livestream-search",
        description="Search the live streams of a Twitch category by title.",
    )
    parser.add_argument("term", nargs="?", help="Term to search for")
    parser.add_argument(
        "-x",
        "--exclude",
        nargs="+",
        action="extend",
        default=[],
        metavar="NAME",
        help="Streamers to exclude",
    )
    parser.add_argument("-w", "--word", action="store_true", help="Search on word boundary")
    parser.add_argument(
        "-l",
        "--limit",
        type=non_negative_int,
        default=0,
        help="Limit output to n entries, 0 means all",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def run(args: argparse.Namespace, settings: TwitchSettings) -> int:
    """Fetch, filter and print streams. Returns the process exit code."""
    if args.term is not None:
        print(f'Searching for "{args.term}"', flush=True)

    async with TwitchApiClient(settings) as client:
        result = await client.fetch_all()

    if result is None:
        return 0

    entries, total = result
    print_report(
        entries,
        total,
        word=args.word,
        term=args.term,
        excluded=settings.excluded_channels,
        limit=args.limit,
    )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = TwitchSettings.from_env(exclude=args.exclude)
        settings.validate()
        return asyncio.run(run(args, settings))
    except (ConfigError, ApiError) as e:
        logger.error(str(e))
        return 1
    except RecordDecodeError as e:
        logger.error(f"Malformed stream record: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
