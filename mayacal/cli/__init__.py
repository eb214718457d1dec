"""mayacal command line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from ..boot.logging import configure_logging
from ..exceptions import MayacalError
from ..runtime_config import RuntimeSettings, load_settings
from . import convert, longcount

__all__ = ["build_parser", "main"]

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mayacal",
        description="Gregorian to Mayan Long Count, Tzolk'in and Haab converter",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert.add_subparser(sub)
    longcount.add_subparser(sub)

    return parser


def _describe_settings_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(problems)


def main(argv: Sequence[str] | None = None, *, settings: RuntimeSettings | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        args.settings = settings if settings is not None else load_settings()
    except ValidationError as exc:
        print(f"error: invalid configuration: {_describe_settings_error(exc)}", file=sys.stderr)
        return 2

    configure_logging(args.settings)
    try:
        return args.func(args)
    except (MayacalError, ValueError) as exc:
        LOG.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
