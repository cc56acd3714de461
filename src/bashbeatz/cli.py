"""
BashBeatz CLI - Entry point

Starts the interactive terminal player, or runs a one-shot command.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from bashbeatz import __version__

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the bashbeatz command."""
    parser = argparse.ArgumentParser(
        prog="bashbeatz",
        description="BashBeatz - browse and play a remote music catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--server-url",
        help="Music server base URL (overrides config and BASHBEATZ_SERVER_URL)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.toml (default: project, cwd, then ~/.config/bashbeatz)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for the log file",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write --server-url and --log-level into the config file",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")
    subparsers.add_parser("tree", help="Print the library tree and exit")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the bashbeatz command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    from .main import interactive_mode, load_runtime_config, print_library

    current_config = load_runtime_config(
        server_url=args.server_url,
        log_level=args.log_level,
        config_path=args.config,
        save=args.save,
    )

    if args.subcommand == "tree":
        sys.exit(print_library(current_config))

    # No subcommand - start interactive mode
    interactive_mode(current_config)


if __name__ == "__main__":
    main()
