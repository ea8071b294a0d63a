"""Seeding helpers for single-variable forward-mode differentiation."""
from typing import Callable, Tuple

from dualdiff.dual_number import DualNumber

def variable(x: float) -> DualNumber:
    """The differentiation variable at ``x``, i.e. ``x + 1E``."""
    return DualNumber(x, 1.0)

def constant(c: float) -> DualNumber:
    return DualNumber(c, 0.0)

def derivative(f: Callable, x: float) -> Tuple[float, float]:
    """Evaluate ``f`` at ``x`` and return ``(f(x), f'(x))``.

    ``f`` takes and returns ``DualNumber``; a plain number returned by ``f``
    does not depend on its input and so has derivative zero.
    """
    result = f(variable(x))
    if not isinstance(result, DualNumber):
        result = constant(result)
    return float(result.a), float(result.b)
