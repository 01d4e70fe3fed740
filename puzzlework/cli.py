"""Command line solver for the calendar puzzle."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .block import Block
from .board import Board, DayOfWeek, Month
from .colors import Color

CALENDAR_ROWS = 8
CALENDAR_COLS = 7
CALENDAR_UNAVAILABLE = (6, 13, 49, 50, 51, 52)

_MONTHS = {month.name.lower(): month for month in Month}
_WEEKDAYS = {day.name.lower(): day for day in DayOfWeek}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_USAGE = (
    "provide month(first 3 letter, eg. jan for January, feb for Feburary, etc), "
    "day, day of the week(first 3 letter, eg. mon for Monday, etc)"
)


def parse_month(text: str) -> Month:
    """Map a three-letter month name, in any case, to its board cell."""
    try:
        return _MONTHS[text.lower()]
    except KeyError:
        raise ValueError("unknown month") from None


def parse_day_of_month(text: str) -> int:
    """Read the leading integer of ``text``; it must lie in 0..31.

    Text without a leading number reads as 0.
    """
    match = _LEADING_INT.match(text)
    day = int(match.group(1)) if match else 0
    if not 0 <= day <= 31:
        raise ValueError("unknown day of month")
    return day


def parse_day_of_week(text: str) -> DayOfWeek:
    """Map a three-letter weekday name, in any case, to its board cell."""
    try:
        return _WEEKDAYS[text.lower()]
    except KeyError:
        raise ValueError("unknown day of week") from None


def standard_blocks() -> list[Block]:
    """The ten pieces of the calendar puzzle, in search order."""
    shapes = [
        (Color.FG_RED, 2, 4, (0, 1, 2)),
        (Color.BG_RED, 2, 3, (0, 5)),
        (Color.FG_GREEN, 3, 2, (1, 3)),
        (Color.FG_YELLOW, 3, 2, (4,)),
        (Color.FG_BLUE, 2, 3, (1,)),
        (Color.FG_CYAN, 3, 3, (0, 2, 3, 5)),
        (Color.BG_CYAN, 1, 4, ()),
        (Color.FG_MAGENTA, 2, 4, (0, 1, 7)),
        (Color.BG_GREEN, 3, 3, (0, 1, 3, 4)),
        (Color.BG_BLUE, 3, 3, (1, 2, 6, 7)),
    ]
    return [
        Block(color, rows, cols, CALENDAR_ROWS, CALENDAR_COLS, missing)
        for color, rows, cols, missing in shapes
    ]


@dataclass
class DateSolution:
    """Outcome of solving the board for one date."""

    initial: str
    solved: bool
    board: Board


def solve_date(month: Month, day: int, day_of_week: DayOfWeek) -> DateSolution:
    """Leave the given date uncovered and fill the rest of the board."""
    board = Board(Color.BG_DEFAULT, CALENDAR_UNAVAILABLE, CALENDAR_ROWS, CALENDAR_COLS)
    board.set_date(month, day, day_of_week)
    board.init_board()
    initial = board.render()
    solved = board.fit(standard_blocks())
    return DateSolution(initial=initial, solved=solved, board=board)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        month = parse_month(args[0])
        day = parse_day_of_month(args[1])
        weekday = parse_day_of_week(args[2])
    except ValueError as exc:
        print(f"{exc}, program exits")
        return 1
    result = solve_date(month, day, weekday)
    sys.stdout.write("initial board:\n" + result.initial)
    print()
    print("solved" if result.solved else "unsolvable")
    sys.stdout.write(result.board.render())
    return 0