import pytest

from puzzlework.colors import Color, reset


def test_yellow_escape_sequence():
    assert Color.FG_YELLOW.escape() == "\033[33m"


def test_reset_sequence():
    assert reset() == "\033[0m"


@pytest.mark.parametrize(
    "code", [30, 31, 32, 33, 34, 35, 36, 37, 39, 40, 41, 42, 43, 44, 45, 46, 47, 49]
)
def test_escape_carries_the_code(code):
    seq = Color(code).escape()
    assert seq == f"\033[{code}m"


@pytest.mark.parametrize(
    "name", ["BLACK", "RED", "GREEN", "YELLOW", "BLUE", "MAGENTA", "CYAN", "WHITE", "DEFAULT"]
)
def test_background_is_foreground_plus_ten(name):
    foreground = Color[f"FG_{name}"]
    background = Color(foreground.value + 10)
    assert background is Color[f"BG_{name}"]
    assert background.escape() == f"\033[{foreground.value + 10}m"


def test_lookup_by_code():
    assert Color(39) is Color.FG_DEFAULT
    assert Color(44) is Color.BG_BLUE


def test_unknown_code_rejected():
    with pytest.raises(ValueError):
        Color(38)