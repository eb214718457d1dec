"""``long-count`` subcommand: Long Count back to the Gregorian calendar."""

from __future__ import annotations

import argparse
import json

from ..converter import convert, format_report
from ..systems.mayan import gregorian_from_long_count, parse_long_count
from .convert import add_output_arguments, wants_extended, wants_json


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = sub.add_parser(
        "long-count",
        help="Convert a Long Count (e.g. 13.0.0.0.0) to the Gregorian calendar",
    )
    parser.add_argument("long_count", metavar="LONG_COUNT", help="baktun.katun.tun.uinal.kin")
    add_output_arguments(parser)
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    long_count = parse_long_count(args.long_count)
    result = convert(gregorian_from_long_count(long_count))
    extended = wants_extended(args)
    if wants_json(args):
        print(json.dumps(result.as_dict(extended=extended), indent=2, ensure_ascii=False))
    else:
        print(format_report(result, extended=extended))
    return 0
