import pytest

from fractscope.app import main, parse_fractal_arg, usage
from fractscope.state import FractalType


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", FractalType.JULIA),
        ("2", FractalType.MANDELBROT),
        ("3", FractalType.BURNING_SHIP),
    ],
)
def test_parse_valid(text, expected):
    assert parse_fractal_arg(text) == expected


@pytest.mark.parametrize("text", ["0", "4", "12", "-1", "+1", " 2", "2x", "abc", ""])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_fractal_arg(text)


def test_usage_lists_fractals():
    lines = usage().splitlines()
    assert lines[0].startswith("usage:")
    assert lines[1:] == ["\t1: julia", "\t2: mandelbrot", "\t3: burning ship"]


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == usage() + "\n"


def test_main_with_bad_argument(capsys):
    assert main(["7"]) == 1
    assert "burning ship" in capsys.readouterr().out


def test_main_with_too_many_arguments(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out.startswith("usage:")