"""Binary search over a sorted sequence."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_SAMPLE = (1, 2, 5, 12, 25, 26, 29, 34, 51, 100)
_SAMPLE_TARGET = 26


def binary_search(
    values: Sequence[int],
    target: int,
    start: int = 0,
    end: int | None = None,
) -> int | None:
    """Return the index of ``target`` within ``values[start..end]`` (inclusive).

    Returns None when it is not there.
    """
    if end is None:
        end = len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] > target:
            end = mid - 1
        elif values[mid] < target:
            start = mid + 1
        else:
            return mid
    return None


def main(argv: Sequence[str] | None = None) -> int:
    pos = binary_search(_SAMPLE, _SAMPLE_TARGET, 0, len(_SAMPLE) - 1)
    if pos is not None:
        sys.stdout.write(f"number [{_SAMPLE_TARGET}] found at pos[{pos}]\n")
    else:
        sys.stdout.write(f"number [{_SAMPLE_TARGET}] not found\n")
    return 0