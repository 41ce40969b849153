"""CLI entrypoint for fijos."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from fijos import __version__
from fijos.config import FijosConfig, load_config
from fijos.constants.branding import CLI_DESCRIPTION
from fijos.discovery import (
    ci_repository_path,
    ci_repository_variable,
    find_project_root,
    is_ci,
    is_running_tests,
)
from fijos.exceptions import ConfigError, FijosError
from fijos.io import dump_listing, write_listing
from fijos.model import Fixture
from fijos.reporting import build_listing_payload, render_fixture_table
from fijos.resolver import FixtureResolver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-s",
        "--start",
        type=Path,
        default=Path("."),
        help="File or directory to start discovery from (default: current directory)",
    )
    common.add_argument("-c", "--config", type=Path, help="Explicit fijos.yaml config file")
    common.add_argument("--no-ci", action="store_true", help="Ignore CI repository path variables")
    common.add_argument("-v", "--verbose", action="store_true", help="Log discovery steps")

    parser = argparse.ArgumentParser(prog="fijos", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("locate", parents=[common], help="Print the Fixtures directory")

    get = subparsers.add_parser("get", parents=[common], help="Print the path of one fixture")
    get.add_argument("name", help="Fixture filename, or its name when --extension is given")
    get.add_argument("-e", "--extension", default=None, help="Fixture extension")

    listing = subparsers.add_parser("list", parents=[common], help="List fixtures")
    listing.add_argument("-e", "--extension", default=None, help="Only fixtures with this extension")
    _add_output_flags(listing)

    find = subparsers.add_parser("find", parents=[common], help="Find fixtures whose name contains a pattern")
    find.add_argument("pattern", help="Case-insensitive substring of the fixture name")
    _add_output_flags(find)

    subparsers.add_parser("extensions", parents=[common], help="Print the extensions present")
    subparsers.add_parser("env", parents=[common], help="Show CI and test-runner detection")

    return parser


def _add_output_flags(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("--json", action="store_true", help="Print the listing as JSON")
    subparser.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON listing to a file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "env":
        return _handle_env(config)

    resolver = FixtureResolver(args.start, config=config)
    try:
        if args.command == "locate":
            print(resolver.fixtures_directory())
        elif args.command == "get":
            print(resolver.get_fixture(args.name, args.extension))
        elif args.command == "list":
            _emit_listing(args, resolver, resolver.list_fixtures(args.extension))
        elif args.command == "find":
            _emit_listing(args, resolver, resolver.find_fixtures(args.pattern))
        elif args.command == "extensions":
            for extension in resolver.available_extensions():
                print(extension)
        else:
            parser.error(f"Unsupported command: {args.command}")
    except FijosError as exc:
        print(f"Fixture error: {exc}", file=sys.stderr)
        return 1

    return 0


def _load_config(args: argparse.Namespace) -> FijosConfig:
    start = args.start.resolve()
    root = find_project_root(start) or (start if start.is_dir() else start.parent)
    logger.debug("Loading config from %s", root)
    config = load_config(root, args.config)
    if args.no_ci:
        config = replace(config, use_ci_environment=False)
    return config


def _emit_listing(args: argparse.Namespace, resolver: FixtureResolver, fixtures: list[Fixture]) -> None:
    if not (args.json or args.output):
        print(render_fixture_table(fixtures))
        return

    payload = build_listing_payload(resolver.fixtures_directory(), fixtures)
    if args.output:
        write_listing(args.output, payload)
        logger.info("Wrote %d fixtures to %s", payload["count"], args.output)
    if args.json:
        print(dump_listing(payload), end="")
    else:
        print(render_fixture_table(fixtures))


def _handle_env(config: FijosConfig) -> int:
    variable = ci_repository_variable(variables=config.ci_path_variables)
    ci_root = ci_repository_path(variables=config.ci_path_variables)
    print(f"CI detected:      {'yes' if is_ci() else 'no'}")
    print(f"Running tests:    {'yes' if is_running_tests() else 'no'}")
    if ci_root is not None and config.use_ci_environment:
        print(f"CI checkout path: {ci_root} (from {variable})")
    else:
        print("CI checkout path: -")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
