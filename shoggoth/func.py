"""Neuron activation functions and their names."""

from __future__ import annotations

import math
import sys
from typing import Callable

NeuronFunc = Callable[[float], float]

EPSILON = sys.float_info.epsilon

# Largest argument math.exp accepts without overflowing.
_EXP_LIMIT = 709.0


def _exp(x: float) -> float:
    """Exponent that saturates to infinity instead of raising."""
    return math.inf if x > _EXP_LIMIT else math.exp(x)


def _as_float(x: float) -> float:
    """Return the argument as a float, rejecting non-numeric input."""
    try:
        return float(x)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"neuron function argument must be a number, got {x!r}") from exc


def func_null(x: float) -> float:
    """Pass the argument through unchanged."""
    return _as_float(x)


def func_zero(x: float) -> float:
    """Always return zero."""
    _as_float(x)
    return 0.0


def func_line(x: float) -> float:
    """Linear function."""
    return _as_float(x)


def func_one(x: float) -> float:
    """Always return one."""
    _as_float(x)
    return 1.0


def func_step(x: float) -> float:
    """Heaviside step: zero below epsilon, one otherwise."""
    return 0.0 if _as_float(x) < EPSILON else 1.0


def func_relu(x: float) -> float:
    """Rectified linear unit."""
    return 0.0 if x < 0.0 else x


def func_sigmoid(x: float) -> float:
    """Logistic sigmoid in the range (0, 1)."""
    return 1.0 / (1.0 + _exp(-x))


def func_sigmoid_back(x: float) -> float:
    """Sigmoid derivative expressed through a sigmoid output value."""
    return x * (1.0 - x)


def func_sigmoid_derivative(x: float) -> float:
    """Sigmoid derivative at the argument."""
    s = func_sigmoid(x)
    return s * (1.0 - s)


def sigmoid_line_minus_plus(x: float, sensitivity: float) -> float:
    """Piecewise linear ramp from -1 at -sensitivity to +1 at +sensitivity."""
    if x < -sensitivity:
        return -1.0
    if x > sensitivity:
        return 1.0
    return x / sensitivity


def v_line(x: float, sensitivity: float) -> float:
    """Absolute value of the linear ramp: a V shape clipped at one."""
    return abs(sigmoid_line_minus_plus(x, sensitivity))


def sigmoid_plus_minus(x: float, sensitivity: float) -> float:
    """Sigmoid scaled to the range (-1, 1)."""
    return 2.0 / (1.0 + _exp(-x * sensitivity)) - 1.0


def weight_limit(x: float, min_value: float, max_value: float) -> float:
    """Clamp a weight to [-max, max], pushing values out of the (-min, min) gap.

    Small non-negative values become -min and small negative values become
    +min, which keeps the weight away from the singularity at zero.
    """
    if x > max_value:
        return max_value
    if x < -max_value:
        return -max_value
    if 0 <= x < min_value:
        return -min_value
    if -min_value < x < 0:
        return min_value
    return x


def error_limit(x: float, max_value: float) -> float:
    """Clamp an error to [-max, max]."""
    if x > max_value:
        return max_value
    if x < -max_value:
        return -max_value
    return x


_FUNCS: dict[str, NeuronFunc] = {
    "NULL": func_null,
    "ZERO": func_zero,
    "LINE": func_line,
    "ONE": func_one,
    "STEP": func_step,
    "RELU": func_relu,
    "SIGMOID": func_sigmoid,
    "SIGMOID_BACK": func_sigmoid_back,
}


def str_to_func(name: str) -> NeuronFunc:
    """Return the function with the given name, or func_null when unknown."""
    return _FUNCS.get(name, func_null)


def func_to_str(func: NeuronFunc) -> str:
    """Return the name of a known function, or "NULL" for anything else."""
    for name, known in _FUNCS.items():
        if known is func:
            return name
    return "NULL"