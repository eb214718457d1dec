"""``convert`` and ``range`` subcommands."""

from __future__ import annotations

import argparse
import json
import logging

from ..converter import convert, convert_range, format_report
from ..systems.gregorian import GregorianDate

LOG = logging.getLogger(__name__)


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        help="Emit JSON output (defaults to MAYACAL_OUTPUT)",
    )
    parser.add_argument(
        "--extended",
        action="store_true",
        default=None,
        help="Include K'iche' name, Lord of the Night, year bearer and notable events",
    )


def wants_json(args: argparse.Namespace) -> bool:
    if args.json is not None:
        return args.json
    return args.settings.output == "json"


def wants_extended(args: argparse.Namespace) -> bool:
    if args.extended is not None:
        return args.extended
    return args.settings.extended


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``convert`` and ``range`` subcommands."""

    parser = sub.add_parser(
        "convert",
        help="Convert a Gregorian date to Long Count, Tzolk'in and Haab",
        description=(
            "Convert a proleptic Gregorian date (YYYY-MM-DD, astronomical year "
            "numbering) to the Mayan calendars. Defaults to today's date. "
            "Put negative years after '--', e.g. convert -- -3113-08-11."
        ),
    )
    parser.add_argument("date", nargs="?", help="ISO date; omit for today")
    parser.add_argument(
        "--numerals",
        action="store_true",
        help="Append the Long Count as Unicode and bar-and-dot Mayan numerals",
    )
    add_output_arguments(parser)
    parser.set_defaults(func=run)

    range_parser = sub.add_parser(
        "range",
        help="Convert every day between two Gregorian dates (inclusive)",
    )
    range_parser.add_argument("start", help="First ISO date")
    range_parser.add_argument("end", help="Last ISO date")
    add_output_arguments(range_parser)
    range_parser.set_defaults(func=run_range)


def run(args: argparse.Namespace) -> int:
    """Execute the convert subcommand."""

    if args.date is None:
        target = GregorianDate.today(args.settings.timezone)
        LOG.debug("No date supplied; using today in %s: %s", args.settings.timezone, target)
    else:
        target = GregorianDate.from_iso(args.date)

    result = convert(target)
    extended = wants_extended(args)
    if wants_json(args):
        print(json.dumps(result.as_dict(extended=extended), indent=2, ensure_ascii=False))
    else:
        print(format_report(result, extended=extended, numerals=args.numerals))
    return 0


def run_range(args: argparse.Namespace) -> int:
    """Execute the range subcommand."""

    start = GregorianDate.from_iso(args.start)
    end = GregorianDate.from_iso(args.end)
    extended = wants_extended(args)
    results = convert_range(start, end)

    if wants_json(args):
        payload = [result.as_dict(extended=extended) for result in results]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    for result in results:
        row = f"{result.gregorian}  {result.long_count}  {result.tzolkin}  {result.haab}"
        if extended:
            row += f"  {result.lord_of_night}"
        print(row)
    return 0
