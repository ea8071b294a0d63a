"""Taylor-remainder check of forward-mode derivatives.

For a correct derivative, the zeroth-order remainder ``|f(x + hv) - f(x)|``
shrinks linearly in ``h`` while the first-order remainder
``|f(x + hv) - f(x) - h f'(x) v|`` shrinks quadratically. Halving ``h`` every
step and fitting the log-log slope of both curves exposes a wrong derivative
as a first-order slope near one instead of two.
"""
from typing import Callable, Optional

import numpy as np

from dualdiff.derivative import constant, derivative
from dualdiff.dual_number import DualNumber
from dualdiff.logger import dualdiff_logger

# slope the first-order remainder must reach for the check to pass
MIN_QUADRATIC_SLOPE = 1.5

# remainders below this many ulps of f(x) are rounding noise
NOISE_ULPS = 1e3

def _value(f: Callable, x: float) -> float:
    result = f(constant(x))
    if isinstance(result, DualNumber):
        return float(result.a)
    return float(result)

def _slope(h, err, floor):
    keep = np.isfinite(err) & (err > floor)
    if np.count_nonzero(keep) < 2:
        return np.nan
    return np.polyfit(np.log2(h[keep]), np.log2(err[keep]), 1)[0]

class TaylorCheck():

    x: float
    direction: float
    h: np.ndarray
    err0: np.ndarray
    err1: np.ndarray
    slope0: float
    slope1: float
    finite: bool

    def __init__(self, x, direction, h, err0, err1, slope0, slope1, finite=True) -> None:
        self.x = x
        self.direction = direction
        self.h = h
        self.err0 = err0
        self.err1 = err1
        self.slope0 = slope0
        self.slope1 = slope1
        self.finite = finite

    @property
    def passed(self) -> bool:
        # a nan value, derivative or remainder is never a pass
        if not self.finite:
            return False
        # a first-order remainder that never rises above noise means f is linear there
        if np.isnan(self.slope1):
            return True
        return bool(self.slope1 >= MIN_QUADRATIC_SLOPE)

    def __str__(self) -> str:
        return "TaylorCheck(x=" + str(self.x) + ", slope0=" + str(self.slope0) + ", slope1=" + str(self.slope1) + ", passed=" + str(self.passed) + ")"

def taylor_check(f: Callable, x: float, max_iters: int = 32, direction: Optional[float] = None) -> TaylorCheck:
    """Compare the dual derivative of ``f`` at ``x`` against its Taylor remainders.

    Parameters
    ----------
    f : callable
        Function of one ``DualNumber`` returning a ``DualNumber``.
    x : float
        Point of evaluation.
    max_iters : int
        Number of step sizes, ``h = 2**-i`` for ``i`` in ``range(max_iters)``.
    direction : float, optional
        Perturbation direction ``v``. Drawn from ``np.random.randn`` if not given.

    Returns
    -------
    TaylorCheck
    """
    if max_iters < 2:
        raise ValueError("max_iters must be at least 2 to fit a slope, got " + str(max_iters))

    v = float(np.random.randn()) if direction is None else float(direction)

    T0, T0_grad = derivative(f, x)

    h = np.zeros(max_iters)
    err0 = np.zeros(max_iters)
    err1 = np.zeros(max_iters)

    with np.errstate(invalid="ignore", over="ignore"):
        for i in range(max_iters):
            h[i] = 2**(-i) # halve our stepsize every time

            fv = _value(f, x + h[i]*v)
            T1 = T0 + h[i]*T0_grad*v

            err0[i] = abs(fv - T0) # this error should be linear
            err1[i] = abs(fv - T1) # this error should be quadratic

            dualdiff_logger.debug("h: %.3e, \t err0: %.3e, \t err1: %.3e", h[i], err0[i], err1[i])

    floor = NOISE_ULPS * np.finfo(np.float64).eps * max(1.0, abs(T0))
    finite = bool(np.isfinite(T0) and np.isfinite(T0_grad) and not np.any(np.isnan(err1)))
    result = TaylorCheck(x, v, h, err0, err1, _slope(h, err0, floor), _slope(h, err1, floor), finite)

    if not finite:
        dualdiff_logger.warning(
            "Taylor check failed at x=%s: f(x)=%s, f'(x)=%s or a remainder is not finite",
            x, T0, T0_grad,
        )
    elif not result.passed:
        dualdiff_logger.warning(
            "Taylor check failed at x=%s: first-order remainder slope %.3f is below %.1f",
            x, result.slope1, MIN_QUADRATIC_SLOPE,
        )
    return result

def plot_taylor_check(result: TaylorCheck, ax=None):
    """Draw both remainder curves of ``result`` on log-log axes."""
    import matplotlib.pyplot as plt

    if ax is None:
        ax = plt.gca()

    ax.loglog(result.h, result.err0, linewidth=3)
    ax.loglog(result.h, result.err1, linewidth=3)
    ax.legend([r'$\|f(x) - T_0(x)\|$', r'$\|f(x)-T_1(x)\|$'], fontsize=15)
    ax.tick_params(labelsize=15)
    return ax
