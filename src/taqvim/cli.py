from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import List, Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings
from .core import build_month_view, month_rows, month_title, weekday_headers
from .domain import CalendarDate, Day, InvalidArgument, SuggestionError
from .services import SuggestionService

logger = logging.getLogger(__name__)


def _iso_date(value: str) -> CalendarDate:
    try:
        return CalendarDate.from_date(date.fromisoformat(value))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}; expected YYYY-MM-DD") from exc


def _month_number(value: str) -> int:
    try:
        month = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid month {value!r}") from exc
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError("month must be between 1 and 12")
    return month


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Taqvim command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the desktop calendar.")

    month_parser = subparsers.add_parser("month", help="Print a month grid.")
    month_parser.add_argument("--year", type=int, default=None)
    month_parser.add_argument("--month", type=_month_number, default=None, help="1-12")

    suggest_parser = subparsers.add_parser("suggest", help="Ask the AI for an event idea on a date.")
    suggest_parser.add_argument("--date", type=_iso_date, required=True, help="YYYY-MM-DD")

    return parser


def render_month(year: int, month: int, week_start_offset: int) -> List[str]:
    """Text rendering of a month view, one string per line."""

    month_name, year_label = month_title(year, month)
    lines = [f"{month_name} {year_label}", " ".join(name[:2].rjust(3) for name in weekday_headers(week_start_offset))]
    cells = build_month_view(year, month, week_start_offset)
    for row in month_rows(cells):
        lines.append(" ".join(str(cell.date.day).rjust(3) if isinstance(cell, Day) else "   " for cell in row))
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    logger.debug("Running command %s", args.command)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui()
    elif args.command == "month":
        today = CalendarDate.today()
        year = args.year if args.year is not None else today.year
        month = args.month - 1 if args.month is not None else today.month
        try:
            lines = render_month(year, month, settings.ui.week_start_offset)
        except InvalidArgument as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        for line in lines:
            print(line)
    elif args.command == "suggest":
        service = SuggestionService(settings.llm)
        try:
            suggestion = service.suggest(args.date)
        except SuggestionError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(json.dumps(suggestion.to_dict(), ensure_ascii=False, indent=2))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
