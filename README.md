# puzzlework

puzzlework solves the "puzzle-a-day" calendar board. It also has a few small
companion puzzles: a binary search, a spiral number walk, connected components
of a graph and a table-seeded square root.

## The calendar puzzle

The board is a grid of 8 rows by 7 columns. Each cell shows a month, a day of
the month or a day of the week, and a few cells are never used. You pick a
date. Its month, day and weekday cells stay uncovered, and ten pieces must
cover every other open cell. The solver searches by backtracking. It always
fills the smallest open region first and skips regions whose size or shape no
piece can fill.

Solve a date from the command line. Give the month and the weekday as their
first three letters, in any case:

```
puzzlework-calendar oct 8 tue
```

The command prints the starting board, then `solved` or `unsolvable`, then the
board as the search left it. Each piece appears in its own terminal colour
(ANSI escape sequences). With the wrong number of arguments it prints a usage
line to standard error. If the month, day (0 to 31) or weekday is not
recognised, it says which and exits with status 1.

### From Python

```python
from puzzlework.colors import Color
from puzzlework.block import Block
from puzzlework.board import Board

# A 3 x 5 board whose cells 7, 8, 9, 12, 13 and 14 cannot be used.
board = Board(Color.BG_CYAN, [7, 8, 9, 12, 13, 14], 3, 5)

blocks = [
    # A 2 x 3 piece with cell 3 cut away, laid on a 3 x 5 board.
    Block(Color.FG_GREEN, 2, 3, 3, 5, [3]),
    # A straight piece of four.
    Block(Color.FG_RED, 1, 4, 3, 5, []),
]

if board.fit(blocks):
    print("solved")
print(board.render())
```

A `Block` records every distinct orientation of its shape, rotated and
mirrored. `rotate()` and `flip()` turn the shape itself. `fit_in(area)`
returns the board cells the block would take inside a set of cells, or `None`.
Two blocks compare equal when one can be rotated or flipped into the other.

`Board.set_date(month, day, day_of_week)` adds a date's three cells to the
unavailable ones, using the `Month` and `DayOfWeek` enums in
`puzzlework.board`; call `init_board()` afterwards for it to take effect.

For the full calendar, `puzzlework.cli` provides `parse_month`,
`parse_day_of_month`, `parse_day_of_week`, `standard_blocks()` (the ten
pieces of the physical puzzle) and `solve_date(month, day, day_of_week)`,
which returns the starting board as text, whether it was solved, and the
board. `puzzlework.colors` holds the `Color` codes and `reset()`.

## The smaller puzzles

```
puzzlework-search          # look for 26 in a fixed sorted list
puzzlework-spiral 5        # print a 5 x 5 spiral of numbers
puzzlework-components      # list the connected components of a sample graph
puzzlework-sqrt 25         # square root by Newton's iteration from a table seed
```

The same work is available as functions:

- `puzzlework.search.binary_search(values, target, start, end)` returns the
  index of `target` between `start` and `end` inclusive (the whole sequence by
  default), or `None` if it is absent.
- `puzzlework.spiral.spiral(n)` builds the number grid, starting with 1 in the
  top-right corner, and `format_spiral(grid)` turns it into text.
- `puzzlework.components.Graph` builds an undirected graph with `add_edge` and
  lists its parts, in depth-first order, with `connected_components()`.
- `puzzlework.sqrt.sqrt(x, use_mymath=True)` computes a square root either
  with `mysqrt` (ten Newton steps seeded from `make_table()`, 0 for x <= 0) or
  with the standard library. `write_table(path)` saves the seed table as a C
  array definition.

## What it does not do

`puzzlework-sqrt` prints only the result; the step-by-step trace of the
iteration goes to the `puzzlework.sqrt` logger at debug level and is not shown
unless logging is configured. The calendar solver finds one covering, not all
of them.

## Running the tests

```
pip install -e ".[test]"
pytest
```