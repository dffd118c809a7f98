# Area: Shared
"""
nuggets_server.cli - Command-line interface
===========================================

Provides the CLI entry point for hosting one game.

Usage:
    nuggets-server maps/main.txt                # Random seed
    nuggets-server maps/main.txt 42             # Reproducible gold placement
    nuggets-server maps/main.txt --trace        # One line per datagram

Exit codes:
    0  game finished normally
    1  usage error, bad configuration or interrupted
    2  map file missing or invalid
    3  seed is not a non-negative integer
"""

import argparse
import sys
from typing import List, Optional

from ._runner_config import load_config
from .errors import ConfigurationError, InvalidSeedError, UsageError


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = _ArgumentParser(
        prog="nuggets-server",
        description="Nuggets game server - host one game over UDP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nuggets-server maps/main.txt
  nuggets-server maps/main.txt 42 --port 30000
  NUGGETS_TRACE=true nuggets-server maps/main.txt
        """,
    )

    parser.add_argument("map_file", help="Path to the map text file")
    parser.add_argument(
        "seed",
        nargs="?",
        help="Non-negative integer seeding the random number generator",
    )

    parser.add_argument("--port", type=int, help="UDP port to bind (default: any free port)")
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--log-file", type=str, help="Path to the JSON log file")
    parser.add_argument(
        "--trace",
        action="store_true",
        default=None,
        help="Print one line per datagram instead of the standard log",
    )

    return parser


def parse_seed(raw: Optional[str]) -> Optional[int]:
    """Parse the optional seed argument."""
    if raw is None:
        return None
    if not raw.isdigit():
        raise InvalidSeedError(raw)
    return int(raw)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    from .runner import ServerRunner

    try:
        args = build_parser().parse_args(argv)
        seed = parse_seed(args.seed)
        config = load_config(
            args.config,
            overrides={"port": args.port, "log_file": args.log_file, "trace": args.trace},
        )
        runner = ServerRunner(map_path=args.map_file, config=config, seed=seed)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("usage: nuggets-server MAP_FILE [SEED]", file=sys.stderr)
        return e.exit_code

    try:
        finished = runner.run()
    except OSError as e:
        print(f"Error: cannot bind UDP port: {e}", file=sys.stderr)
        return 1
    return 0 if finished else 1
