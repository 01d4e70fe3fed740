import math

import pytest

from puzzlework.sqrt import main, make_table, mysqrt, sqrt, write_table


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("4", "4 is 2"),
        ("9", "9 is 3"),
        ("5", "5 is 2.236"),
        ("7", "7 is 2.645"),
        ("25", "25 is 5"),
        ("-25", "-25 is 0"),
        ("0.0001", "0.0001 is 0.01"),
    ],
)
def test_main_results(capsys, arg, expected):
    assert main([arg]) == 0
    assert expected in capsys.readouterr().out


def test_main_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Usage:" in out and "number" in out
    assert "Version 1.0" in out


def test_main_rejects_text(capsys):
    assert main(["abc"]) == 1
    assert "not a number" in capsys.readouterr().err


@pytest.mark.parametrize("x", [0.5, 1, 2, 3.7, 9.99, 16, 123.0])
def test_mysqrt_matches_math(x):
    assert mysqrt(x) == pytest.approx(math.sqrt(x), rel=1e-9)


@pytest.mark.parametrize("x", [0, -1, -25])
def test_mysqrt_non_positive_is_zero(x):
    assert mysqrt(x) == 0


def test_sqrt_library_path():
    assert sqrt(2.25, use_mymath=False) == math.sqrt(2.25)
    assert math.isnan(sqrt(-4, use_mymath=False))


def test_sqrt_default_uses_mysqrt():
    assert sqrt(-4) == 0


def test_make_table():
    table = make_table()
    assert len(table) == 10
    assert all(v * v == pytest.approx(i) for i, v in enumerate(table))


def test_write_table(tmp_path):
    path = tmp_path / "Table.h"
    write_table(path)
    lines = path.read_text().splitlines()
    assert lines[0] == "double sqrtTable[] = {"
    assert lines[-1] == "0};"
    assert len(lines) == 12
    values = [float(line.rstrip(",")) for line in lines[1:-1]]
    assert values == pytest.approx(list(make_table()), rel=1e-5)