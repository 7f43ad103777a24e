"""Command line interface for scaffolding WP-CLI packages."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import DEFAULT_LICENSE, ScaffoldSettings
from .errors import ScaffoldError
from .materialize import ScaffoldReport
from .package import scaffold_package
from .package_tests import scaffold_package_tests

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffold",
        description="Generate the files needed for a WP-CLI command package",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every file written")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    subparsers = parser.add_subparsers(dest="command", required=True)

    package_parser = subparsers.add_parser(
        "package", help="generate the files needed for a basic WP-CLI command"
    )
    package_parser.add_argument("dir", help="Directory for the new package")
    package_parser.add_argument("--name", help="Name to appear in the composer.json")
    package_parser.add_argument("--description", help="Human-readable description for the package")
    package_parser.add_argument(
        "--license",
        help=f"License for the package (default: {DEFAULT_LICENSE})",
    )
    package_parser.add_argument(
        "--skip-tests",
        action="store_true",
        help="Don't generate files for integration testing",
    )

    tests_parser = subparsers.add_parser(
        "package-tests", help="generate files needed for writing Behat tests for a command"
    )
    tests_parser.add_argument("dir", help="The package directory to generate tests for")

    for subparser in (package_parser, tests_parser):
        subparser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite files that already exist",
        )
        subparser.add_argument(
            "--wp-cli-root",
            help="WP-CLI installation providing the Behat support files",
        )

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(format="%(levelname)s: %(message)s")
    logging.getLogger(__package__).setLevel(level)


def _summarize(report: ScaffoldReport, noun: str) -> None:
    if report.all_skipped:
        print(f"All {noun} files were skipped.")
    else:
        print(f"Success: Created {noun} files.")


def _handle_package(args: argparse.Namespace) -> int:
    report = scaffold_package(
        args.dir,
        name=args.name,
        description=args.description,
        license=args.license,
        skip_tests=args.skip_tests,
        force=args.force,
        settings=ScaffoldSettings.from_env(wp_cli_root=args.wp_cli_root),
        announce=lambda package_report: _summarize(package_report, "package"),
    )
    if report.tests is not None:
        _summarize(report.tests, "package test")
    return 0


def _handle_package_tests(args: argparse.Namespace) -> int:
    report = scaffold_package_tests(
        args.dir,
        force=args.force,
        settings=ScaffoldSettings.from_env(wp_cli_root=args.wp_cli_root),
    )
    _summarize(report, "package test")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    handlers = {
        "package": _handle_package,
        "package-tests": _handle_package_tests,
    }
    try:
        return handlers[args.command](args)
    except ScaffoldError as exc:
        LOGGER.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
