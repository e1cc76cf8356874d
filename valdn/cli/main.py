#!/usr/bin/env python3
"""valdn CLI - validate JSON documents against path-keyed rule tables."""

import argparse
import sys
from typing import Optional, Sequence

from valdn.utils.logging import setup_logging

from .check_command import CheckCommand
from .version_command import VersionCommand


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="valdn CLI - declarative validation of nested JSON values",
        prog="valdn"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="Write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    commands = [
        CheckCommand(),
        VersionCommand(),
    ]

    command_map = {}
    for command in commands:
        cmd_parser = subparsers.add_parser(command.name, help=command.help)
        command.configure_parser(cmd_parser)
        command_map[command.name] = command

    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.command in command_map:
        return command_map[args.command].execute(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
