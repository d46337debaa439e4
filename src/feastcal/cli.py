from __future__ import annotations

import argparse
import logging
import re
import sys
from datetime import date

from .core.errors import FeastcalError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _add_source_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument("--ruleset", default="de", help="builtin ruleset name (default: de)")
    src.add_argument("--config", metavar="FILE", help="JSON rule document")


def _resolve_store(args: argparse.Namespace):
    """A builtin ruleset's store, or a private store for a --config document."""
    import feastcal

    if not args.config:
        return feastcal.get_store(args.ruleset)
    return feastcal.CalendarStore(feastcal.load_rule_config(args.config))


def cmd_day(args: argparse.Namespace) -> int:
    import feastcal

    entry = feastcal.day_entry(args.date, store=_resolve_store(args))
    mark = " *" if entry.is_feast_day else ""
    print(f"{args.date.isoformat()}  {entry.name or '-'}{mark}")
    return 0


def cmd_year(args: argparse.Namespace) -> int:
    import feastcal

    entries = feastcal.year_entries(args.year, store=_resolve_store(args), feast_only=args.feast_only)
    for d, entry in entries.items():
        mark = " *" if entry.is_feast_day else ""
        print(f"{d.isoformat()}  {d.strftime('%a')}  {entry.name}{mark}")
    return 0


def cmd_easter(args: argparse.Namespace) -> int:
    import feastcal

    to_year = args.to_year if args.to_year is not None else args.year
    for y in range(args.year, to_year + 1):
        print(f"{y}  {feastcal.easter_sunday(y).isoformat()}")
    return 0


def cmd_rulesets(args: argparse.Namespace) -> int:
    import feastcal

    for name in feastcal.list_rulesets():
        print(f"{name:<6} {feastcal.get_store(name).config.rule_count} rules")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="feastcal", description="Named calendar days from a rule set")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_day = sub.add_parser("day", help="Name of a single day")
    p_day.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    _add_source_args(p_day)
    p_day.set_defaults(func=cmd_day)

    p_year = sub.add_parser("year", help="All named days of a year")
    p_year.add_argument("year", type=int)
    p_year.add_argument("--feast-only", action="store_true", help="only feast days")
    _add_source_args(p_year)
    p_year.set_defaults(func=cmd_year)

    p_easter = sub.add_parser("easter", help="Easter Sunday dates")
    p_easter.add_argument("year", type=int)
    p_easter.add_argument("--to-year", type=int, default=None)
    p_easter.set_defaults(func=cmd_easter)

    p_list = sub.add_parser("rulesets", help="List builtin rulesets")
    p_list.set_defaults(func=cmd_rulesets)

    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except FeastcalError as e:
        logger.debug("command failed", exc_info=True)
        print(f"feastcal: error: {e}", file=sys.stderr)
        return 2
    except (KeyError, OSError) as e:
        print(f"feastcal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
