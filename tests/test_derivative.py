"""Tests for the seeding helpers."""

import numpy as np
import pytest

from dualdiff import DualNumber, constant, derivative, variable


def test_variable_and_constant_seeds() -> None:
    assert variable(3.0) == DualNumber(3.0, 1.0)
    assert constant(3.0) == DualNumber(3.0, 0.0)


@pytest.mark.parametrize(
    "f, df",
    [
        (lambda x: x.sin(), np.cos),
        (lambda x: x.cos(), lambda t: -np.sin(t)),
        (lambda x: x.exp(), np.exp),
        (lambda x: x.log(), lambda t: 1.0 / t),
        (lambda x: x**3 - 2 * x + 0.5, lambda t: 3 * t**2 - 2.0),
        (lambda x: x.sin() / x, lambda t: (t * np.cos(t) - np.sin(t)) / t**2),
        (lambda x: (x * x.exp()).cos(), lambda t: -np.sin(t * np.exp(t)) * (1 + t) * np.exp(t)),
    ],
)
@pytest.mark.parametrize("x0", [0.3, 1.0, 2.7])
def test_derivative_matches_analytic(f, df, x0) -> None:
    value, slope = derivative(f, x0)
    assert value == pytest.approx(f(constant(x0)).a)
    assert slope == pytest.approx(df(x0), rel=1e-12, abs=1e-12)


def test_derivative_returns_floats() -> None:
    value, slope = derivative(lambda x: x * x, 2.0)
    assert type(value) is float
    assert type(slope) is float
    assert (value, slope) == (4.0, 4.0)


def test_constant_function_has_zero_derivative() -> None:
    assert derivative(lambda x: 7.0, 1.0) == (7.0, 0.0)
