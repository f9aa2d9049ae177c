"""Pruebas de la conversión entre números y texto invariante."""

import math

import pytest

from number_text import number_to_text, parse_number, to_fixed


class TestParseNumber:
    @pytest.mark.parametrize("text, expected", [
        ("0", 0.0),
        ("123", 123.0),
        ("3.", 3.0),
        (".5", 0.5),
        ("-2.25", -2.25),
        ("1e+21", 1e21),
        ("1.5e-7", 1.5e-7),
        ("1e+", 1.0),
        ("12abc", 12.0),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ])
    def test_numeric_prefix(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "-", ".", "NaN", "abc"])
    def test_no_prefix_is_nan(self, text):
        assert math.isnan(parse_number(text))


class TestNumberToText:
    @pytest.mark.parametrize("value, expected", [
        (0.0, "0"),
        (-0.0, "0"),
        (10.0, "10"),
        (-5.0, "-5"),
        (0.5, "0.5"),
        (123.456, "123.456"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e16, "10000000000000000"),
        (1e21, "1e+21"),
        (1.25e22, "1.25e+22"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (-1.5e-7, "-1.5e-7"),
    ])
    def test_shortest_text(self, value, expected):
        assert number_to_text(value) == expected

    def test_non_finite(self):
        assert number_to_text(math.inf) == "Infinity"
        assert number_to_text(-math.inf) == "-Infinity"
        assert number_to_text(math.nan) == "NaN"


class TestToFixed:
    @pytest.mark.parametrize("value, digits, expected", [
        (0.5, 2, "0.50"),
        (0.125, 3, "0.125"),
        (0.125, 2, "0.13"),
        (-0.125, 2, "-0.13"),
        (3.0, 0, "3"),
        (-0.0, 2, "0.00"),
        (-0.001, 2, "-0.00"),
        (12345.678, 1, "12345.7"),
    ])
    def test_fixed_digits(self, value, digits, expected):
        assert to_fixed(value, digits) == expected

    def test_large_values_fall_back(self):
        assert to_fixed(1e21, 2) == "1e+21"

    def test_non_finite_fall_back(self):
        assert to_fixed(math.inf, 2) == "Infinity"
        assert to_fixed(math.nan, 2) == "NaN"
