from __future__ import annotations

import argparse
import json
import re
import sys
from datetime import date
from typing import Any, List, Optional

from calperiods.logging import LEVELS

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _common() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument("--calendar", default=None, help="calendar id (default: configured, iso8601)")
    p.add_argument("--locale", default=None, help="locale for labels (default: configured, en)")
    p.add_argument("--json", action="store_true", help="print JSON instead of text")
    p.add_argument("--log-level", default="WARNING", type=str.upper, choices=LEVELS, help="log threshold")
    p.add_argument("--log-json", action="store_true", help="write log events to stderr as JSON lines")
    return p


def _setup(args: argparse.Namespace) -> None:
    from calperiods.logging import configure_logging

    configure_logging(level=args.log_level, json_output=args.log_json)


def _emit(obj: Any, text: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps(obj, ensure_ascii=False, indent=2))
    else:
        print(text)


def _print_periods(periods: list, as_json: bool) -> None:
    rows = [p.as_dict() for p in periods]
    text = "\n".join(f"{p.id:<14} {p.start_date.isoformat()}  {p.end_date.isoformat()}  {p.display_name}" for p in periods)
    _emit(rows, text, as_json)


def cmd_calendars(argv: List[str]) -> int:
    import calperiods

    p = argparse.ArgumentParser(prog="calperiods calendars", description="List available calendars", parents=[_common()])
    args = p.parse_args(argv)
    _setup(args)

    infos = [calperiods.calendar_info(name) for name in calperiods.list_calendars()]
    lines = []
    for info in infos:
        tag = "custom" if info["custom"] else "standard"
        lines.append(f"{info['id']:<10} {tag:<9} era={info['era']}  locales={','.join(info['locales'])}")
    _emit(infos, "\n".join(lines), args.json)
    return 0


def cmd_resolve(argv: List[str]) -> int:
    import calperiods

    p = argparse.ArgumentParser(prog="calperiods resolve", description="Resolve a calendar id (aliases included)", parents=[_common()])
    p.add_argument("identifier", help="calendar id, e.g. gregorian, ethiopian, nepali")
    args = p.parse_args(argv)
    _setup(args)

    rc = calperiods.resolve_calendar(args.identifier, args.locale)
    info = rc.info()
    _emit(info, f"{rc.requested_id} -> {rc.id} (locale={rc.locale}, custom={rc.is_custom})", args.json)
    return 0


def cmd_convert(argv: List[str]) -> int:
    import calperiods

    p = argparse.ArgumentParser(prog="calperiods convert", description="Gregorian -> calendar date", parents=[_common()])
    p.add_argument("date", help="Gregorian YYYY-MM-DD")
    args = p.parse_args(argv)
    _setup(args)

    rc = calperiods.resolve_calendar(args.calendar, args.locale)
    d = calperiods.convert_date(_parse_ymd(args.date), rc)
    weekday = rc.calendar.weekday_name(d, rc.locale)
    out = {"gregorian": args.date, "date": d.isoformat(), "calendar": d.calendar, "era": d.era, "weekday": weekday}
    _emit(out, f"{d.isoformat()} ({weekday})", args.json)
    return 0


def cmd_today(argv: List[str]) -> int:
    import calperiods

    p = argparse.ArgumentParser(prog="calperiods today", description="Today's date in a calendar", parents=[_common()])
    p.add_argument("--timezone", default=None, help="IANA timezone (default: configured, UTC)")
    args = p.parse_args(argv)
    _setup(args)

    d = calperiods.today(args.calendar, timezone=args.timezone, locale=args.locale)
    _emit({"date": d.isoformat(), "calendar": d.calendar}, d.isoformat(), args.json)
    return 0


def cmd_generate(argv: List[str]) -> int:
    import calperiods

    p = argparse.ArgumentParser(prog="calperiods generate", description="All fixed periods of a type for a year", parents=[_common()])
    p.add_argument("year", help="calendar year")
    p.add_argument("period_type", help="e.g. WEEKLY, MONTHLY, QUARTERLY, FYAPR")
    p.add_argument("--starting-day", type=int, default=None, help="weekly start weekday, 1=Mon..7=Sun")
    p.add_argument("--ends-before", default=None, help="drop periods ending on/after this YYYY-MM-DD (in the calendar)")
    p.add_argument("--years-count", type=int, default=None, help="yearly types: number of years ending with YEAR")
    args = p.parse_args(argv)
    _setup(args)

    periods = calperiods.generate_periods(
        args.year,
        args.period_type,
        calendar=args.calendar,
        locale=args.locale,
        starting_day=args.starting_day,
        ends_before=args.ends_before,
        years_count=args.years_count,
    )
    _print_periods(periods, args.json)
    return 0


def _locate(args: argparse.Namespace):
    import calperiods

    d = args.date if args.date is not None else calperiods.today(args.calendar, locale=args.locale)
    return calperiods.locate_period(
        d, args.period_type, calendar=args.calendar, locale=args.locale, starting_day=args.starting_day
    )


def cmd_locate(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="calperiods locate", description="The fixed period containing a date", parents=[_common()])
    p.add_argument("period_type")
    p.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD in the calendar (default: today)")
    p.add_argument("--starting-day", type=int, default=None)
    args = p.parse_args(argv)
    _setup(args)

    _print_periods([_locate(args)], args.json)
    return 0


def cmd_previous(argv: List[str]) -> int:
    import calperiods

    p = argparse.ArgumentParser(prog="calperiods previous", description="The N periods before the one containing a date", parents=[_common()])
    p.add_argument("period_type")
    p.add_argument("count", type=int)
    p.add_argument("--date", default=None, help="YYYY-MM-DD in the calendar (default: today)")
    p.add_argument("--starting-day", type=int, default=None)
    args = p.parse_args(argv)
    _setup(args)

    period = _locate(args)
    periods = calperiods.previous_periods(period, args.count, calendar=args.calendar, locale=args.locale)
    _print_periods(periods, args.json)
    return 0


COMMANDS = {
    "calendars": (cmd_calendars, "List available calendars"),
    "resolve": (cmd_resolve, "Resolve a calendar id (aliases included)"),
    "convert": (cmd_convert, "Gregorian -> calendar date"),
    "today": (cmd_today, "Today's date in a calendar"),
    "generate": (cmd_generate, "All fixed periods of a type for a year"),
    "locate": (cmd_locate, "The fixed period containing a date"),
    "previous": (cmd_previous, "The N periods before the one containing a date"),
}


def main(argv: Optional[List[str]] = None) -> int:
    from calperiods.core.errors import CalperiodsError

    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calperiods YYYY-MM-DD --calendar nepali`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["convert"] + argv

    p = argparse.ArgumentParser(prog="calperiods", description="Fixed periods in any calendar.")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name, (_, help_text) in COMMANDS.items():
        sub.add_parser(name, help=help_text, add_help=False)

    args, rest = p.parse_known_args(argv)
    fn = COMMANDS[args.cmd][0]
    try:
        return fn(rest)
    except CalperiodsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
