"""Validate a JSON document against a rule table."""

import argparse
import json
import logging
import sys
from pathlib import Path

from valdn.config import load_config
from valdn.core.api import validate_value
from valdn.exceptions.common_exceptions import ValdnException
from valdn.utils.json_utils import parse_json

from .command_base import CommandBase

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def parse_rule_option(option: str) -> tuple[str, str]:
    """`user.name=required|min:2` -> ("user.name", "required|min:2")."""
    path, sep, spec = option.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected PATH=RULES, got `{option}`")
    return path, spec


class CheckCommand(CommandBase):

    @property
    def name(self) -> str:
        return "check"

    @property
    def help(self) -> str:
        return "Validate a JSON file against a rule table"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("payload", help="JSON file to validate ('-' reads stdin)")
        parser.add_argument("--rules", "-r", help="JSON file mapping paths to rule lists")
        parser.add_argument(
            "--rule",
            action="append",
            default=[],
            type=parse_rule_option,
            metavar="PATH=RULES",
            help="Extra rule entry, e.g. --rule 'tags.*=min:2'. Overrides --rules.",
        )
        parser.add_argument("--tag-separator", default=None, help="Separator between rules in PATH=RULES")

    def _read(self, source: str) -> str:
        if source == "-":
            return sys.stdin.read()
        return Path(source).read_text(encoding="utf-8")

    def execute(self, args: argparse.Namespace) -> int:
        try:
            overrides = {"tag_separator": args.tag_separator} if args.tag_separator else {}
            config = load_config(**overrides)
            rules = parse_json(self._read(args.rules)) if args.rules else {}
            if not isinstance(rules, dict):
                print("error: rules file must contain a JSON object", file=sys.stderr)
                return EXIT_ERROR
            rules.update(dict(args.rule))
            payload = parse_json(self._read(args.payload))
            errors = validate_value(payload, rules, config=config)
        except (ValdnException, OSError) as e:
            logging.debug(f"[VALDN] check aborted: {e}")
            print(f"error: {e}", file=sys.stderr)
            return EXIT_ERROR

        print(json.dumps(errors, indent=2, sort_keys=True))
        return EXIT_INVALID if errors else EXIT_VALID
