# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from hijri_periods.adapters import EntryStampPayload, PeriodPayload
from hijri_periods.config import ConfigurationError, configure_logging, get_calendar_config
from hijri_periods.domain import (
    CalendarError,
    effective_zone_name,
    format_hijri_date,
    lock_instant,
    month_bounds,
    period_for,
    stamp_entry,
    to_hijri,
)
from hijri_periods.domain.model import ChallengeScope, GregorianDate

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hijri calendar and challenge-period engine")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a Gregorian date to Hijri")
    convert.add_argument("date", help="Gregorian date (YYYY-MM-DD)")

    month = subparsers.add_parser("month", help="Gregorian bounds of the Hijri month")
    month.add_argument("date", help="Any Gregorian date inside the month (YYYY-MM-DD)")

    period = subparsers.add_parser("period", help="Challenge period metadata for a date")
    period.add_argument("date", help="Gregorian date (YYYY-MM-DD)")
    period.add_argument(
        "--scope",
        choices=[scope.value for scope in ChallengeScope],
        default=ChallengeScope.DAILY.value,
        help="Challenge recurrence scope (default: %(default)s)",
    )

    lock = subparsers.add_parser("lock", help="UTC instant at which the local day ends")
    lock.add_argument("date", help="Gregorian date (YYYY-MM-DD)")
    lock.add_argument(
        "--timezone",
        type=str,
        help="IANA time zone (defaults to the configured default zone)",
    )

    stamp = subparsers.add_parser("stamp", help="Values stamped on a new daily entry")
    stamp.add_argument("date", help="Gregorian date (YYYY-MM-DD)")
    stamp.add_argument(
        "--timezone",
        type=str,
        help="IANA time zone (defaults to the configured default zone)",
    )

    return parser.parse_args(list(argv))


def _render(args: argparse.Namespace) -> str:
    if args.command == "convert":
        gregorian = GregorianDate.parse(args.date)
        hijri = to_hijri(gregorian)
        return json.dumps(
            {
                "gregorianDate": gregorian.isoformat(),
                "hijriYear": hijri.year,
                "hijriMonth": hijri.month,
                "hijriDay": hijri.day,
                "formatted": format_hijri_date(hijri),
            },
            ensure_ascii=False,
        )
    if args.command == "month":
        bounds = month_bounds(GregorianDate.parse(args.date))
        return json.dumps(
            {
                "startDateGregorian": bounds.start.isoformat(),
                "endDateGregorian": bounds.end.isoformat(),
                "lastHijriDay": bounds.last_hijri_day,
            }
        )
    if args.command == "period":
        period = period_for(args.date, args.scope)
        return PeriodPayload.from_metadata(period).model_dump_json(by_alias=True)
    if args.command == "lock":
        config = get_calendar_config()
        zone_name = effective_zone_name(args.timezone, config)
        instant = lock_instant(args.date, zone_name, config=config)
        return json.dumps(
            {
                "gregorianDate": args.date,
                "timezone": zone_name,
                "lockAtUtc": instant.isoformat().replace("+00:00", "Z"),
            }
        )
    if args.command == "stamp":
        stamp = stamp_entry(args.date, args.timezone, config=get_calendar_config())
        return EntryStampPayload.from_stamp(stamp).model_dump_json(by_alias=True)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Command-line entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.WARNING)
    load_dotenv()

    try:
        output = _render(parsed_args)
    except (ValueError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except CalendarError as exc:
        log.exception("Calendar invariant violated")
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
