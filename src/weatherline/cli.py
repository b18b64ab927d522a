"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

import requests

from weatherline import __version__
from weatherline.config import check_settings, get_settings
from weatherline.enums import Language, UnitSystem
from weatherline.errors import PROVIDER_ERRORS, DecodeError, UsageError
from weatherline.flows.notify import send_forecast

DATE_ARG_FORMAT = "%Y%m%d"

EXAMPLES = """\
examples:
  weatherline --line-token=XXXXX --forecast-token=YYYYY 20180101   # Send forecast on 2018/01/01
  weatherline --line-token=XXXXX --forecast-token=YYYYY --lang=ja  # Send today's forecast in Japanese
"""


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weatherline",
        description=(
            "Get a weather forecast from the Forecast (Dark Sky) API "
            "and send it with the LINE Notify API"
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug mode",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="config file")
    parser.add_argument("-L", "--line-token", default=None, help="API token for LINE Notify API")
    parser.add_argument(
        "-F", "--forecast-token", default=None, help="API token for Forecast (Dark Sky) API"
    )
    parser.add_argument("-x", "--longitude", default=None, help="longitude")
    parser.add_argument("-y", "--latitude", default=None, help="latitude")
    parser.add_argument(
        "-l",
        "--lang",
        default=None,
        help=f"language [{Language.EN.value}|{Language.JA.value}] (default: {Language.EN.value})",
    )
    parser.add_argument(
        "-u",
        "--units",
        default=None,
        help=f"units [{UnitSystem.US.value}|{UnitSystem.SI.value}] (default: {UnitSystem.US.value})",
    )
    parser.add_argument(
        "dates",
        nargs="*",
        metavar="YYYYMMDD",
        help="date to send the forecast for (default: now)",
    )
    return parser


def parse_date(value: str) -> datetime:
    """Parse a ``YYYYMMDD`` argument into a naive midnight datetime."""
    try:
        return datetime.strptime(value, DATE_ARG_FORMAT)
    except ValueError as e:
        raise UsageError(f"invalid date {value!r}: expected YYYYMMDD") from e


def check_args(dates: list[str]) -> datetime | None:
    """
    Validate positional arguments.

    Returns:
        The reference date, or None when no date was given.

    Raises:
        UsageError: More than one date, or a date that isn't ``YYYYMMDD``.
    """
    if not dates:
        return None
    if len(dates) > 1:
        raise UsageError("Too many arguments")
    return parse_date(dates[0])


def cmd_send(args: argparse.Namespace) -> int:
    """Resolve settings, then fetch, render and send the forecast."""
    try:
        reference_date = check_args(args.dates)
        settings = get_settings(
            args.config,
            line_token=args.line_token,
            forecast_token=args.forecast_token,
            latitude=args.latitude,
            longitude=args.longitude,
            lang=args.lang,
            units=args.units,
            debug=args.debug,
        )
        check_settings(settings)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if settings.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    try:
        send_forecast(settings, reference_date)
    except (DecodeError, requests.RequestException, *PROVIDER_ERRORS) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return cmd_send(args)


if __name__ == "__main__":
    sys.exit(main())
