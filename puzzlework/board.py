"""The calendar puzzle board and the backtracking search that fills it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum

from .block import Block
from .colors import Color, reset

NUM_ROWS = 8
NUM_COLS = 7


class CellStatus(IntEnum):
    EMPTY = 0
    OCCUPIED = 1
    UNAVAILABLE = -1


class DayOfWeek(IntEnum):
    """Board cell that shows each day of the week."""

    SUN = 45
    MON = 46
    TUE = 47
    WED = 48
    THU = 53
    FRI = 54
    SAT = 55


class Month(IntEnum):
    """Board cell that shows each month."""

    JAN = 0
    FEB = 1
    MAR = 2
    APR = 3
    MAY = 4
    JUN = 5
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


class Board:
    """A grid of cells, some unavailable, to be covered by blocks."""

    def __init__(
        self,
        color: Color,
        unavailable: Iterable[int],
        num_rows: int = NUM_ROWS,
        num_cols: int = NUM_COLS,
    ) -> None:
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError("board dimensions must be positive")
        self.color = color
        self.num_rows = num_rows
        self.num_cols = num_cols
        self._unavailable = list(unavailable)
        self._status: list[CellStatus] = []
        self._colors: list[Color] = []
        self.init_board()

    @property
    def unavailable(self) -> tuple[int, ...]:
        return tuple(self._unavailable)

    def set_date(self, month: Month, day: int, day_of_week: DayOfWeek) -> None:
        """Block the cells of a month, a day of the month and a weekday.

        Takes effect at the next call of init_board.
        """
        self._unavailable.extend((int(month), day + 13, int(day_of_week)))

    def init_board(self) -> None:
        """Reset every cell to empty or unavailable."""
        blocked = set(self._unavailable)
        size = self.num_rows * self.num_cols
        self._status = [
            CellStatus.UNAVAILABLE if idx in blocked else CellStatus.EMPTY
            for idx in range(size)
        ]
        self._colors = [Color.FG_DEFAULT] * size

    def _neighbours(self, idx: int) -> Iterable[int]:
        row, col = divmod(idx, self.num_cols)
        candidates = []
        if row > 0:
            candidates.append(idx - self.num_cols)
        if row < self.num_rows - 1:
            candidates.append(idx + self.num_cols)
        if col > 0:
            candidates.append(idx - 1)
        if col < self.num_cols - 1:
            candidates.append(idx + 1)
        return (n for n in candidates if self._status[n] is CellStatus.EMPTY)

    def _component(self, start: int) -> frozenset[int]:
        found = {start}
        pending = [start]
        while pending:
            for other in self._neighbours(pending.pop()):
                if other not in found:
                    found.add(other)
                    pending.append(other)
        return frozenset(found)

    def _next_open_area(self) -> frozenset[int] | None:
        """The smallest connected group of empty cells, first found on ties."""
        seen: set[int] = set()
        best: frozenset[int] | None = None
        for idx, status in enumerate(self._status):
            if status is CellStatus.EMPTY and idx not in seen:
                group = self._component(idx)
                seen |= group
                if best is None or len(best) > len(group):
                    best = group
        return best

    def _empty_cells(self) -> frozenset[int]:
        return frozenset(
            idx for idx, status in enumerate(self._status)
            if status is CellStatus.EMPTY
        )

    def _restore(self, empty: Iterable[int]) -> None:
        for idx in empty:
            self._status[idx] = CellStatus.EMPTY

    def _mark_occupied(self, cells: Iterable[int], color: Color) -> None:
        for idx in cells:
            self._status[idx] = CellStatus.OCCUPIED
            self._colors[idx] = color

    def _area_unsolvable(self, area: frozenset[int]) -> bool:
        size = len(area)
        if size <= 3 or size in (6, 7):
            return True
        v = sorted(area)
        cols = self.num_cols
        if size == 4 and cols > 2:
            if v[1] - v[0] == v[3] - v[2] and v[3] - v[1] == cols:
                return True
            if (
                (v[3] - v[1] == 2 and v[2] - v[0] == cols)
                or (v[2] - v[0] == 2 and v[3] - v[1] == cols)
                or (v[2] - v[1] == 1 and v[3] - v[0] == 2 * cols)
            ):
                return True
        elif size == 5:
            if v[0] + v[4] == v[3] + v[1] and v[3] - v[1] == 2:
                return True
        return False

    def _place_one(
        self, area: frozenset[int], blocks: Sequence[Block], start: int
    ) -> int | None:
        if self._area_unsolvable(area):
            return None
        for idx in range(start, len(blocks)):
            block = blocks[idx]
            if block.used:
                continue
            cells = block.fit_in(area)
            if cells is not None:
                self._mark_occupied(cells, block.color)
                return idx
        return None

    def fit(self, blocks: Sequence[Block]) -> bool:
        """Cover every empty cell with the given blocks by backtracking.

        Returns True when no empty cell is left, False when the search is
        exhausted; the board keeps the placements that were made.
        """
        for block in blocks:
            block.used = False
        level = 0
        saved_states: list[frozenset[int]] = []
        placed: list[int] = []
        start_at: dict[int, int] = {}

        while (area := self._next_open_area()) is not None:
            state = self._empty_cells()
            idx = self._place_one(area, blocks, start_at.get(level, 0))
            if idx is not None:
                start_at[level] = idx
                saved_states.append(state)
                blocks[idx].used = True
                placed.append(idx)
                level += 1
                continue
            if not saved_states:
                return False
            self._restore(saved_states.pop())
            last = placed.pop()
            blocks[last].used = False
            start_at.pop(level, None)
            level -= 1
            if not blocks[last].rotate_position():
                start_at[level] = last + 1
        return True

    def render(self) -> str:
        """Draw the board: X unavailable, O occupied, + empty."""
        board = self.color.escape()
        end = reset()
        parts: list[str] = []
        for start in range(0, self.num_rows * self.num_cols, self.num_cols):
            for idx in range(start, start + self.num_cols):
                status = self._status[idx]
                if status is CellStatus.UNAVAILABLE:
                    parts.append(f"{board}X{end}")
                elif status is CellStatus.OCCUPIED:
                    parts.append(f"{self._colors[idx].escape()}O{end}")
                else:
                    parts.append(f"{board}+{end}")
            parts.append(f"{board}\n{end}")
        parts.append(end)
        return "".join(parts)

    __str__ = render