import pytest

from fractol.args import UsageError, parse_args, parse_float, usage_text
from fractol.render import FractalType


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.5", 1.5),
        ("-0.8", -0.8),
        ("+2", 2.0),
        ("42", 42.0),
        ("-.5", -0.5),
        ("0.285", 0.285),
    ],
)
def test_parse_float_values(text, expected):
    assert parse_float(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "abc", "-", "+", "."])
def test_parse_float_without_digits_is_zero(text):
    assert parse_float(text) == 0.0


def test_parse_float_stops_at_first_bad_character():
    assert parse_float("1.5x9") == parse_float("1.5")
    assert parse_float("3e5") == parse_float("3")
    assert parse_float(" 7") == 0.0


def test_parse_float_sign_is_symmetric():
    assert parse_float("-12.25") == -parse_float("12.25")


def test_mandelbrot():
    view = parse_args(["mandelbrot"])
    assert view.type is FractalType.MANDELBROT
    assert view.zoom == 200.0


def test_mandelbrot_ignores_extra_arguments():
    assert parse_args(["mandelbrot", "x"]).type is FractalType.MANDELBROT


def test_julia_with_constant():
    view = parse_args(["julia", "-0.7", "0.27015"])
    assert view.type is FractalType.JULIA
    assert view.julia_c.real == pytest.approx(-0.7)
    assert view.julia_c.imag == pytest.approx(0.27015)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["julia"],
        ["julia", "1"],
        ["julia", "1", "2", "3"],
        ["mandel"],
        ["mandelbrotx"],
        ["newton"],
    ],
)
def test_bad_arguments_raise_usage_error(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_usage_text_lists_both_fractals():
    lines = usage_text().splitlines()
    assert lines == [
        "Usage:",
        "  fractol mandelbrot",
        "  fractol julia <real_part> <imag_part>",
    ]