"""Square roots by Newton iteration seeded from a small lookup table."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

VERSION_MAJOR = 1
VERSION_MINOR = 0

_log = logging.getLogger(__name__)


def make_table() -> tuple[float, ...]:
    """Square roots of 0 through 9."""
    return tuple(math.sqrt(float(i)) for i in range(10))


def write_table(path: str | PathLike[str]) -> None:
    """Write the table as a C array definition closed by a zero entry."""
    lines = ["double sqrtTable[] = {"]
    lines += [f"{value:g}," for value in make_table()]
    lines.append("0};")
    Path(path).write_text("\n".join(lines) + "\n")


# The table as it reads back from its written form, six significant digits.
_TABLE = tuple(float(f"{value:g}") for value in make_table())


def mysqrt(x: float) -> float:
    """Ten Newton steps, seeded from the table for 1 <= x < 10; 0 for x <= 0."""
    if x <= 0:
        return 0.0
    result = x
    if 1 <= x < 10:
        _log.debug("Use the table to help find an initial value")
        result = _TABLE[int(x)]
    for _ in range(10):
        if result <= 0:
            result = 0.1
        delta = x - result * result
        result = result + 0.5 * delta / result
        _log.debug("Computing sqrt of %g to be %g", x, result)
    return result


def sqrt(x: float, use_mymath: bool = True) -> float:
    """Square root by mysqrt, or by the math library (NaN for negatives)."""
    if use_mymath:
        return mysqrt(x)
    if x < 0:
        return math.nan
    return math.sqrt(x)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    prog = Path(sys.argv[0]).name or "sqrt"
    if not args:
        print(f"{prog} Version {VERSION_MAJOR}.{VERSION_MINOR}")
        print(f"Usage: {prog} number")
        return 1
    try:
        value = float(args[0])
    except ValueError:
        print(f"{prog}: not a number: {args[0]}", file=sys.stderr)
        return 1
    print(f"The square root of {value:g} is {sqrt(value):g}")
    return 0