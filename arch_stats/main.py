#!/usr/bin/env python3
"""
ArchStats - Main entry point

Renders ArchMC player stat cards and game leaderboards to PNG files.
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import structlog

from arch_stats.application.report_service import (
    create_report_service,
    describe_failure,
)
from arch_stats.config import Config
from arch_stats.core.exceptions import ArchStatsError
from arch_stats.core.games import GameMode


logger = structlog.get_logger()


def configure_logging(config: Config) -> None:
    """Route structlog through the standard logging module."""
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    # Set httpx and httpcore loggers to WARNING to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)

    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="arch-stats", description="Render ArchMC statistics to PNG images"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    stats = subparsers.add_parser("stats", help="Render a player stat card")
    stats.add_argument("player", help="Minecraft username")
    stats.add_argument("-o", "--output", help="Output file (default: <player>_stats.png)")

    leaderboard = subparsers.add_parser("leaderboard", help="Render a game leaderboard")
    leaderboard.add_argument(
        "game", choices=[mode.value for mode in GameMode], help="Game to rank by lifetime wins"
    )
    leaderboard.add_argument("--page", type=int, default=0, help="Zero-based page index")
    leaderboard.add_argument("--size", type=int, default=None, help="Entries per page (1-10)")
    leaderboard.add_argument(
        "-o", "--output", help="Output file (default: <game>_leaderboard.png)"
    )
    return parser


async def run(args: argparse.Namespace, config: Config) -> str:
    """Generate the requested report and write it to disk.

    Returns:
        Path of the written PNG file
    """
    async with create_report_service(config) as service:
        if args.command == "stats":
            image = await service.generate_player_report(args.player)
            output = args.output or f"{args.player.strip()}_stats.png"
        else:
            image = await service.generate_leaderboard_report(args.game, args.page, args.size)
            output = args.output or f"{args.game}_leaderboard.png"

    await asyncio.to_thread(_write_file, output, image)
    logger.info("Wrote report", path=output, size_bytes=len(image))
    return output


def _write_file(path: str, data: bytes) -> None:
    with open(path, "wb") as f:
        f.write(data)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ArchStats CLI."""
    args = build_parser().parse_args(argv)

    # Load configuration
    config = Config.from_env()
    configure_logging(config)
    logger.info(
        "Starting ArchStats", environment=config.environment.value, command=args.command
    )

    try:
        output = asyncio.run(run(args, config))
    except ArchStatsError as e:
        logger.error("Report generation failed", error=str(e), error_type=type(e).__name__)
        print(describe_failure(e), file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("Could not write report", error=str(e))
        print(describe_failure(e), file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
