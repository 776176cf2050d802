"""CLI entry point for moonrise/transit/moonset times.

Observer defaults come from MOONRISET_* environment variables (or a .env file):
    uv run moonriset --date 2025-02-17
    uv run moonriset --lat 66.5 --lon 0 --tz Etc/GMT --year 2025
"""

import argparse
import logging
import sys
from datetime import date

from dotenv import find_dotenv, load_dotenv
from pytz import UnknownTimeZoneError

from moonriset.compute import Moonriset, MoonrisetError, year_table
from moonriset.config import ConfigError
from moonriset.i18n import t
from moonriset.models import Event, RiseSetResult


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moonriset", description="Moonrise, moon transit and moonset times."
    )
    parser.add_argument("--lat", type=float, help="latitude in degrees, north positive")
    parser.add_argument("--lon", type=float, help="longitude in degrees, east positive")
    parser.add_argument("--tz", help="IANA timezone name, e.g. Europe/London")
    when = parser.add_mutually_exclusive_group()
    when.add_argument("--date", type=_parse_date, help="local date YYYY-MM-DD (default: today)")
    when.add_argument("--year", type=int, help="print every day of a year")
    parser.add_argument("--lang", choices=("en", "ko"), default="en")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _with_second(first: Event, second: Event) -> str:
    if second.found:
        return f"{first.hh_mm}/{second.hh_mm}"
    return first.hh_mm


def format_day_line(day: date, result: RiseSetResult) -> str:
    """One row of the year listing: date, rise, transit, set."""
    return (
        f"{day.isoformat()}  {_with_second(result.rise, result.rise2):<11}  "
        f"{result.transit.hh_mm:<5}  {_with_second(result.set, result.set2)}"
    )


def _print_day(mrs: Moonriset, lang: str) -> None:
    print(t("today", lang).format(rise=mrs.rise.hh_mm, set=mrs.set.hh_mm))
    print(f"{t('label_transit', lang)}: {mrs.transit.hh_mm}")
    if mrs.rise2.found:
        print(t("second_rise", lang).format(time=mrs.rise2.hh_mm))
    if mrs.set2.found:
        print(t("second_set", lang).format(time=mrs.set2.hh_mm))


def _print_year(mrs: Moonriset, year: int, lang: str) -> None:
    print(t("title", lang), year)
    print(
        f"{'':10}  {t('label_rise', lang):<11}  {t('label_transit', lang):<5}  "
        f"{t('label_set', lang)}"
    )
    for day, result in year_table(mrs.observer, year):
        print(format_day_line(day, result))


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        mrs = Moonriset(args.lat, args.lon, args.tz)
        if args.year is not None:
            _print_year(mrs, args.year, args.lang)
        else:
            if args.date is not None:
                mrs.set_date(args.date.year, args.date.month, args.date.day)
            _print_day(mrs, args.lang)
    except MoonrisetError as e:
        print(t("error_range", args.lang).format(error=e), file=sys.stderr)
        return 2
    except (ConfigError, UnknownTimeZoneError) as e:
        print(t("error_config", args.lang).format(error=e), file=sys.stderr)
        return 2

    print(t("legend", args.lang))
    return 0


if __name__ == "__main__":
    sys.exit(main())
