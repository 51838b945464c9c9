"""Tests for the public :class:`fibcalc.Fib` facade and rendering."""

from fibcalc import Fib, decimal, fib
from fibcalc.render import format_range, format_value


def test_single_and_shortcut_agree():
    for n in (0, 1, 2, 10, 20, 187):
        assert Fib.single(n) == fib(n)


def test_range_consistency():
    values = Fib.range(0, 1000)
    assert len(values) == 1001
    for n, value in enumerate(values):
        assert value == Fib.single(n)


def test_range_is_empty_when_end_before_start():
    assert Fib.range(10, 5) == []


def test_range_workers_do_not_change_result():
    assert Fib.range(3, 10, workers=1) == Fib.range(3, 10, workers=4)


def test_decimal_beyond_default_str_limit():
    # F(25000) has 5225 digits, above CPython's default 4300 digit limit
    text = decimal(Fib.single(25_000))
    assert len(text) == 5225
    assert text.isdigit()
    assert "e" not in text


def test_format_value():
    assert format_value(10, 55) == "F(10) = 55"


def test_format_range():
    assert format_range(5, [5, 8, 13]) == ["F(5) = 5", "F(6) = 8", "F(7) = 13"]
