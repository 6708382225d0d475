import math

import pytest

from shoggoth.func import (
    error_limit,
    func_line,
    func_null,
    func_one,
    func_relu,
    func_sigmoid,
    func_sigmoid_back,
    func_sigmoid_derivative,
    func_step,
    func_to_str,
    func_zero,
    sigmoid_line_minus_plus,
    sigmoid_plus_minus,
    str_to_func,
    v_line,
    weight_limit,
)

NAMES = ["NULL", "ZERO", "LINE", "ONE", "STEP", "RELU", "SIGMOID", "SIGMOID_BACK"]


@pytest.mark.parametrize("x", [-3.5, 0.0, 2.25])
def test_identity_like(x):
    assert func_null(x) == x
    assert func_line(x) == x
    assert func_zero(x) == 0.0
    assert func_one(x) == 1.0


def test_step():
    assert func_step(-1.0) == 0.0
    assert func_step(0.0) == 0.0
    assert func_step(1.0) == 1.0


def test_relu():
    assert func_relu(-2.0) == 0.0
    assert func_relu(3.0) == 3.0


def test_sigmoid_midpoint_and_symmetry():
    assert func_sigmoid(0.0) == 0.5
    for x in (0.5, 2.0, 7.0):
        assert func_sigmoid(x) + func_sigmoid(-x) == pytest.approx(1.0)
        assert 0.0 < func_sigmoid(-x) < 0.5 < func_sigmoid(x) < 1.0


def test_sigmoid_saturates_without_error():
    assert func_sigmoid(-1000.0) == 0.0
    assert func_sigmoid(1000.0) == 1.0


def test_sigmoid_back_peak():
    assert func_sigmoid_back(0.5) == 0.25
    assert func_sigmoid_back(0.0) == 0.0


@pytest.mark.parametrize("x", [-2.0, 0.0, 1.5])
def test_sigmoid_derivative_matches_back(x):
    assert func_sigmoid_derivative(x) == pytest.approx(func_sigmoid_back(func_sigmoid(x)))


def test_line_minus_plus():
    assert sigmoid_line_minus_plus(-5.0, 2.0) == -1.0
    assert sigmoid_line_minus_plus(5.0, 2.0) == 1.0
    assert sigmoid_line_minus_plus(1.0, 2.0) == 0.5


@pytest.mark.parametrize("x", [-5.0, -1.0, 0.0, 1.0, 5.0])
def test_v_line_is_abs_of_ramp(x):
    assert v_line(x, 2.0) == abs(sigmoid_line_minus_plus(x, 2.0))
    assert v_line(x, 2.0) == v_line(-x, 2.0)


def test_sigmoid_plus_minus():
    assert sigmoid_plus_minus(0.0, 3.0) == 0.0
    for x in (0.3, 1.0, 4.0):
        assert sigmoid_plus_minus(x, 2.0) == pytest.approx(-sigmoid_plus_minus(-x, 2.0))
        assert -1.0 < sigmoid_plus_minus(-x, 2.0) < 0.0 < sigmoid_plus_minus(x, 2.0) < 1.0


def test_weight_limit():
    assert weight_limit(10.0, 0.1, 5.0) == 5.0
    assert weight_limit(-10.0, 0.1, 5.0) == -5.0
    assert weight_limit(0.05, 0.1, 5.0) == -0.1
    assert weight_limit(0.0, 0.1, 5.0) == -0.1
    assert weight_limit(-0.05, 0.1, 5.0) == 0.1
    assert weight_limit(2.0, 0.1, 5.0) == 2.0


def test_error_limit():
    assert error_limit(3.0, 1.0) == 1.0
    assert error_limit(-3.0, 1.0) == -1.0
    assert error_limit(0.25, 1.0) == 0.25


@pytest.mark.parametrize("name", NAMES)
def test_name_round_trip(name):
    assert func_to_str(str_to_func(name)) == name


def test_null_and_line_are_distinct():
    assert str_to_func("NULL") is func_null
    assert str_to_func("LINE") is func_line


def test_unknown_names():
    assert str_to_func("TANH") is func_null
    assert func_to_str(math.sin) == "NULL"
    assert func_to_str(func_sigmoid_derivative) == "NULL"