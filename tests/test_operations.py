"""Pruebas de la tabla de operadores."""

import math

import pytest

from operations import OPERATIONS, Operator, apply_operation


class TestOperator:
    def test_closed_token_set(self):
        assert {op.value for op in Operator} == {"/", "*", "+", "-", "="}
        assert set(OPERATIONS) == set(Operator)

    def test_str_is_token(self):
        assert str(Operator.ADD) == "+"
        assert f"{Operator.DIVIDE}" == "/"

    def test_equals_plain_string(self):
        assert Operator.EQUALS == "="


class TestApplyOperation:
    @pytest.mark.parametrize("token, lhs, rhs, expected", [
        ("+", 7, 3, 10),
        ("-", 7, 3, 4),
        ("*", 7, 3, 21),
        ("/", 9, 3, 3),
        ("=", 7, 3, 3),
    ])
    def test_arithmetic(self, token, lhs, rhs, expected):
        assert apply_operation(token, lhs, rhs) == expected

    def test_accepts_enum_member(self):
        assert apply_operation(Operator.MULTIPLY, 2.5, 4) == 10

    def test_equals_ignores_lhs(self):
        assert apply_operation("=", math.nan, 5) == 5

    def test_divide_by_zero_gives_infinity(self):
        assert apply_operation("/", 1, 0) == math.inf
        assert apply_operation("/", -1, 0) == -math.inf
        assert apply_operation("/", 1, -0.0) == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(apply_operation("/", 0, 0))
        assert math.isnan(apply_operation("/", math.nan, 0))

    def test_overflow_gives_infinity(self):
        assert apply_operation("*", 1e308, 10) == math.inf
        assert apply_operation("+", -1e308, -1e308) == -math.inf

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            apply_operation("^", 2, 3)
