"""Command-line entry point for the UTR player search client."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .api_client import UTRClient
from .app import UTRApp
from .config import get_config
from .logging_config import setup_logging

logger = logging.getLogger('utr.cli')


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Search UTR for a tennis player and browse their match results",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Player name to search for immediately",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to config JSON (defaults to $UTR_CONFIG or ~/.config/utr/config.json)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for log files (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Do not write a log file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = get_config(args.config)
        level = logging.DEBUG if args.debug else getattr(logging, config.log_level)
        setup_logging(
            log_dir=Path(args.log_dir or config.log_dir),
            level=level,
            log_to_file=not args.no_log_file,
            log_to_console=False,
        )
    except (OSError, ValueError) as e:
        print(f"❌ Could not start: {e}", file=sys.stderr)
        return 1

    logger.info(f"Starting with base URL {config.base_url}")
    client = UTRClient(base_url=config.base_url, timeout=config.timeout)
    app = UTRApp(client=client, config=config, initial_query=args.name)
    app.run()
    return app.return_code or 0
