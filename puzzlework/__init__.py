"""Calendar tiling puzzle solver with binary search, spiral, graph and square-root puzzles."""

__version__ = "1.0.0"