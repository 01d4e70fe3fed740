import pytest

from puzzlework.search import binary_search, main

VALUES = [1, 2, 5, 12, 25, 26, 29, 34, 51, 100]


@pytest.mark.parametrize("target", VALUES)
def test_finds_every_present_value(target):
    assert binary_search(VALUES, target, 0, len(VALUES) - 1) == VALUES.index(target)


@pytest.mark.parametrize("target", VALUES)
def test_default_bounds_cover_whole_sequence(target):
    pos = binary_search(VALUES, target)
    assert VALUES[pos] == target


@pytest.mark.parametrize("target", [0, 3, 27, 101])
def test_missing_value_gives_none(target):
    assert binary_search(VALUES, target) is None


def test_value_outside_searched_range_is_not_found():
    assert binary_search(VALUES, 1, 5, 9) is None


def test_empty_sequence():
    assert binary_search([], 4) is None


def test_main_reports_position(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "number [26] found at pos[5]\n"