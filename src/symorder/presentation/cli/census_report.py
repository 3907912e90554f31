"""Command-line interface for tabulating census results by symmetry order."""

import argparse
import codecs
import logging
import sys
from typing import List, Optional

from .detect_order import setup_logging
from ...core.services.report_service import ExampleType, SymmetryOrderReport
from ...infrastructure.repositories.census_repository import read_census_records


def _delimiter(value: str) -> str:
    """Accept TAB, NEWLINE and backslash escapes for delimiters given on the shell."""
    named = {"TAB": "\t", "NEWLINE": "\n", "SPACE": " "}
    if value.upper() in named:
        return named[value.upper()]
    if "\\" in value:
        return codecs.decode(value, "unicode_escape")
    return value


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Tabulate folds, superfamilies, families and domains by symmetry order"
    )
    parser.add_argument("census_file", help="CSV written by a census run")
    parser.add_argument(
        "--example-type",
        choices=[t.value for t in ExampleType],
        default=ExampleType.SUPERFAMILY.value,
        help="Classification level listed in the examples column",
    )
    parser.add_argument("--limit", type=int, default=16, help="Examples per order")
    parser.add_argument("--delimiter", type=_delimiter, default="\t")
    parser.add_argument("--newline", type=_delimiter, default="\n")
    parser.add_argument(
        "--example-separator",
        type=_delimiter,
        default="\t",
        help="Separator between examples",
    )
    parser.add_argument(
        "--no-summary", action="store_true", help="Print only the table"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the census report CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        records = read_census_records(args.census_file)
    except (OSError, ValueError) as e:
        logging.error(f"Cannot read {args.census_file}: {e}")
        return 1

    report = SymmetryOrderReport.from_records(records)
    if not args.no_summary:
        print(report.summary())
    print(
        report.to_table(
            ExampleType(args.example_type),
            args.limit,
            args.delimiter,
            args.newline,
            args.example_separator,
        ),
        end="",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
