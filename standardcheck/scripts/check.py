"""
CLI to check paths against filesystem portability standards.

Prints one line per violation and exits 0 when every path complies, 1 when
any violation was recorded, and 2 on usage or configuration errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

load_dotenv()

from standardcheck import get_version
from standardcheck.catalog import StandardCatalog, default_catalog, load_catalog
from standardcheck.compliance import ViolationRecord, check_paths
from standardcheck.config import Settings, load_settings
from standardcheck.errors import CatalogError, UnknownStandardError
from standardcheck.reporting import OUTPUT_FORMATS, format_record

logger = logging.getLogger("standardcheck.cli")

PROG = "standardcheck"


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2


def print_short_help(default_standards: str = "TESTING") -> None:
    print(
        "Usage: [OPTION]... [FILE]...\n"
        f"Check if file would be portable to a selected standard. Defaults to {default_standards}.\n"
        f"Try {PROG} --help for more information."
    )


class CheckArgumentParser(argparse.ArgumentParser):
    """Reports bad options with the short usage text on stdout."""

    def __init__(self, *args, default_standards: str = "TESTING", **kwargs):
        super().__init__(*args, **kwargs)
        self.default_standards = default_standards

    def error(self, message: str):
        print(f"{self.prog}: {message}")
        print_short_help(self.default_standards)
        raise SystemExit(ExitCode.ERROR)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = CheckArgumentParser(
        prog=PROG,
        description="Check whether paths would be portable to the selected filesystem standards.",
        default_standards=settings.standards,
    )
    parser.add_argument("paths", nargs="*", metavar="FILE", help="Paths to check.")
    parser.add_argument(
        "-s",
        "--standards",
        default=settings.standards,
        help=f"Comma-separated standard names, case-insensitive (default: {settings.standards}).",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        default=settings.delimiter,
        help=f"Field separator for violation lines (default: {settings.delimiter!r}).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=settings.output_format if settings.output_format in OUTPUT_FORMATS else "text",
        help="Violation output format.",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=settings.catalog_path,
        help="JSON standards catalog to use instead of the built-in one.",
    )
    parser.add_argument("--list-standards", action="store_true", help="Print known standard names and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level_value
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("standardcheck").setLevel(level)


def use_raw_path_bytes() -> None:
    """Let undecodable filename bytes pass through stdout unchanged."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def emit(record: ViolationRecord, *, output_format: str, delimiter: str) -> None:
    print(format_record(record, output_format, delimiter), flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(settings, args.verbose)
    use_raw_path_bytes()

    if not args.delimiter:
        print(f"{PROG}: Bad delimiter")
        print_short_help(settings.standards)
        return ExitCode.ERROR

    try:
        catalog: StandardCatalog = load_catalog(args.catalog) if args.catalog else default_catalog()
    except CatalogError as exc:
        logger.error("Failed to load standards catalog: %s", exc)
        print(f"{PROG}: {exc}")
        return ExitCode.ERROR

    if args.list_standards:
        for name in catalog.names():
            print(name)
        return ExitCode.SUCCESS

    paths: List[str] = list(args.paths)
    if not paths:
        print("no input")

    try:
        rules = catalog.resolve_list(args.standards)
    except UnknownStandardError as exc:
        print(str(exc))
        print_short_help(settings.standards)
        return ExitCode.ERROR

    logger.debug("Checking %d path(s) against: %s", len(paths), ", ".join(rule.name for rule in rules))
    result = check_paths(
        paths,
        rules,
        on_violation=lambda record: emit(record, output_format=args.output_format, delimiter=args.delimiter),
    )
    return ExitCode.VIOLATION if result.violation_seen else ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
