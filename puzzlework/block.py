"""Polyomino blocks that can be rotated, mirrored and placed on a board."""

from __future__ import annotations

import copy
import itertools
from collections.abc import Iterable

from .colors import Color


class Block:
    """A piece made of the filled cells of a rows x cols rectangle.

    On construction every distinct orientation (rotations, then rotations of
    the mirror image) is recorded as a set of cell indices on a board that is
    ``board_cols`` wide, anchored at the top-left corner.
    """

    _sequence = itertools.count()

    def __init__(
        self,
        color: Color,
        rows: int,
        cols: int,
        board_rows: int,
        board_cols: int,
        missing: Iterable[int],
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("block dimensions must be positive")
        if board_cols <= 0:
            raise ValueError("board width must be positive")
        gaps = set(missing)
        self.color = color
        self.used = False
        self.board_rows = board_rows
        self._board_cols = board_cols
        self._rows = rows
        self._cols = cols
        self._cells = [0 if i in gaps else 1 for i in range(rows * cols)]
        self.size = sum(self._cells)
        if not self.size:
            raise ValueError("a block needs at least one filled cell")
        self._num_rep = self._compute_rep()
        self._orig_rows = rows
        self._orig_cols = cols
        self._orig_rep = self._num_rep
        self.seq_no = next(Block._sequence)
        self._placements: list[frozenset[int]] = []
        self._position = 0

        flipped = False
        while True:
            while True:
                self._placements.append(self._board_positions())
                if not self.rotate():
                    break
            if flipped or not self.flip():
                break
            flipped = True
        self.flip()

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def num_rep(self) -> int:
        """The cells read row by row as decimal digits."""
        return self._num_rep

    @property
    def position_index(self) -> int:
        """Index of the orientation the next fit attempt starts from."""
        return self._position

    @property
    def placements(self) -> tuple[frozenset[int], ...]:
        return tuple(self._placements)

    def _compute_rep(self) -> int:
        return int("".join(str(c) for c in self._cells))

    def _board_positions(self) -> frozenset[int]:
        return frozenset(
            i % self._cols + i // self._cols * self._board_cols
            for i, filled in enumerate(self._cells)
            if filled
        )

    def _clone(self) -> Block:
        twin = copy.copy(self)
        twin._cells = list(self._cells)
        twin._placements = list(self._placements)
        twin._position = 0
        twin.used = False
        return twin

    def rotate(self) -> bool:
        """Turn the shape a quarter clockwise.

        Returns False once the shape is back in its original orientation.
        """
        rows, cols = self._rows, self._cols
        saved = self._cells
        turned = [0] * (rows * cols)
        for i in range(rows):
            for j in range(cols):
                turned[j * rows + rows - i - 1] = saved[i * cols + j]
        self._cells = turned
        self._rows, self._cols = cols, rows
        self._num_rep = self._compute_rep()
        return (
            self._rows != self._orig_rows
            or self._cols != self._orig_cols
            or self._num_rep != self._orig_rep
        )

    def rotate_position(self) -> bool:
        """Move to the next recorded orientation; False when wrapping to the first."""
        self._position += 1
        if self._position == len(self._placements):
            self._position = 0
            return False
        return True

    def flip(self) -> bool:
        """Mirror the shape left to right; False if that changes nothing."""
        old_rep = self._num_rep
        cols = self._cols
        self._cells = [
            cell
            for start in range(0, self._rows * cols, cols)
            for cell in reversed(self._cells[start:start + cols])
        ]
        self._num_rep = self._compute_rep()
        self._orig_rep = self._num_rep
        return old_rep != self._num_rep

    def _same_as(self, other: Block) -> bool:
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._num_rep == other._num_rep
        )

    def _matches_some_rotation(self, candidate: Block) -> bool:
        for _ in range(3):
            if not candidate.rotate():
                return False
            if self._same_as(candidate):
                return True
        return False

    def fit_in(self, area: Iterable[int]) -> frozenset[int] | None:
        """Find an orientation that fits into ``area`` at its lowest cell.

        The search starts at the current orientation. Returns the board cells
        the block would occupy, or None if no remaining orientation fits.
        """
        region = frozenset(area)
        diff = len(region) - len(self._placements[0])
        if diff < 0 or 1 <= diff <= 3 or diff in (6, 7):
            self._position = 0
            return None
        width = self._board_cols
        anchor = min(region)
        while self._position < len(self._placements):
            shape = self._placements[self._position]
            shift = anchor - min(shape)
            if shift >= 0:
                overflows = any(
                    i + shift >= (i // width + shift // width + 1) * width
                    for i in shape
                )
                if not overflows:
                    moved = frozenset(i + shift for i in shape)
                    if moved <= region:
                        return moved
            self._position += 1
            if self._position == len(self._placements):
                self._position = 0
                break
        return None

    def render(self) -> str:
        """Draw the block: a summary line, then O for filled and X for empty cells."""
        prefix = self.color.escape()
        lines = [f"posvec size:{len(self._placements)}, seq:{self.seq_no}\n"]
        for start in range(0, self._rows * self._cols, self._cols):
            row = self._cells[start:start + self._cols]
            lines.append("".join(prefix + ("O" if c else "X") for c in row) + "\n")
        return "".join(lines)

    __str__ = render

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        if self.size != other.size:
            return False
        if self._rows * self._cols != other._rows * other._cols:
            return False
        if self._same_as(other):
            return True
        if self._matches_some_rotation(other._clone()):
            return True
        mirrored = other._clone()
        if mirrored.flip():
            if self._same_as(mirrored):
                return True
            return self._matches_some_rotation(mirrored)
        return False

    def __repr__(self) -> str:
        return (
            f"Block(seq={self.seq_no}, rows={self._rows}, cols={self._cols}, "
            f"rep={self._num_rep})"
        )