"""ANSI terminal colour codes."""

from __future__ import annotations

from enum import IntEnum

_ESCAPE = "\033["


class Color(IntEnum):
    """SGR colour codes for foreground and background."""

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37
    FG_DEFAULT = 39
    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47
    BG_DEFAULT = 49

    def escape(self) -> str:
        """Return the escape sequence that switches to this colour."""
        return f"{_ESCAPE}{int(self)}m"


def reset() -> str:
    """Return the escape sequence that restores the default colours."""
    return f"{_ESCAPE}0m"