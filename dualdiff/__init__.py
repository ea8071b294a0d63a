"""Forward-mode automatic differentiation with dual numbers."""
from dualdiff.check import TaylorCheck, plot_taylor_check, taylor_check
from dualdiff.derivative import constant, derivative, variable
from dualdiff.dual_number import DualNumber

__all__ = [
    "DualNumber",
    "TaylorCheck",
    "constant",
    "derivative",
    "plot_taylor_check",
    "taylor_check",
    "variable",
]
