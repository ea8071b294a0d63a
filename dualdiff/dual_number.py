# Forwards-mode Autodiff
import numpy as np

# division by zero, log of non-positives and overflow all flow through as inf/nan
_FLOAT_ERRORS = dict(divide="ignore", invalid="ignore", over="ignore")

def _promote(other):
    if isinstance(other, DualNumber):
        return other
    if isinstance(other, (int, float, np.integer, np.floating)) and not isinstance(other, bool):
        return DualNumber(other, 0.0)
    return None

def _partial_cmp(x, y):
    # -1, 0, 1, or None when the floats are unordered (nan)
    if x < y:
        return -1
    if x > y:
        return 1
    if x == y:
        return 0
    return None

class DualNumber():
    """The dual number a + b*E, where E != 0 satisfies E^2 = 0.

    ``a`` is the value of a function at a point and ``b`` its derivative with
    respect to the single differentiation variable. Seed the variable as
    ``DualNumber(x, 1)`` and constants as ``DualNumber(c, 0)``.
    """

    a: np.float64
    b: np.float64

    __slots__ = ("a", "b")

    def __init__(self, a: float, b: float) -> None:
        self.a = np.float64(a)
        self.b = np.float64(b)

    def __add__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        with np.errstate(**_FLOAT_ERRORS):
            return DualNumber(self.a + other.a, self.b + other.b)

    def __radd__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        with np.errstate(**_FLOAT_ERRORS):
            return DualNumber(self.a - other.a, self.b - other.b)

    def __rsub__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        # (a+bE)(c+dE) = ac + bdE^2 + adE + bcE = ac + (ad + bc)E
        with np.errstate(**_FLOAT_ERRORS):
            return DualNumber(self.a * other.a, self.a * other.b + self.b * other.a)

    def __rmul__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return other * self

    def __truediv__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        with np.errstate(**_FLOAT_ERRORS):
            return DualNumber(self.a / other.a, ((self.b * other.a) - (self.a * other.b)) / (other.a * other.a))

    def __rtruediv__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self):
        return DualNumber(-self.a, -self.b)

    # named forms of the operators
    def add(self, other):
        return self + other

    def sub(self, other):
        return self - other

    def mul(self, other):
        return self * other

    def div(self, other):
        return self / other

    def __pow__(self, n):
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            return NotImplemented
        return self.powi(n)

    def powi(self, n: int):
        """Raise to the integer power ``n`` by repeated multiplication.

        For ``n >= 1`` the product rule is applied ``n - 1`` times, which gives
        the derivative ``n * a**(n-1) * b`` without using the closed form.
        ``n == 0`` is the constant one and negative ``n`` is the reciprocal of
        the positive power.
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError("powi expects an integer exponent, got " + type(n).__name__)
        if n == 0:
            return DualNumber(1.0, 0.0)
        if n < 0:
            return DualNumber(1.0, 0.0) / self.powi(-n)

        x = self
        for _ in range(1, n):
            x *= self
        return x

    def log(self, base: float = np.e):
        # d/dx log_base(g) = g' / (g ln(base)), which is g' / g for base e
        with np.errstate(**_FLOAT_ERRORS):
            ln_base = np.log(np.float64(base))
            return DualNumber(np.log(self.a) / ln_base, self.b / (self.a * ln_base))

    def exp(self):
        with np.errstate(**_FLOAT_ERRORS):
            e = np.exp(self.a)
            return DualNumber(e, e * self.b)

    def sin(self):
        with np.errstate(**_FLOAT_ERRORS):
            return DualNumber(np.sin(self.a), np.cos(self.a) * self.b)

    def cos(self):
        with np.errstate(**_FLOAT_ERRORS):
            return DualNumber(np.cos(self.a), -np.sin(self.a) * self.b)

    def __eq__(self, other):
        if not isinstance(other, DualNumber):
            return NotImplemented
        return bool(self.a == other.a and self.b == other.b)

    def __hash__(self) -> int:
        # nan components hash by object identity, harmless since they never compare equal
        return hash((float(self.a), float(self.b)))

    def _cmp(self, other):
        ordering = _partial_cmp(self.a, other.a)
        if ordering == 0:
            return _partial_cmp(self.b, other.b)
        return ordering

    def __lt__(self, other):
        if not isinstance(other, DualNumber):
            return NotImplemented
        return self._cmp(other) == -1

    def __le__(self, other):
        if not isinstance(other, DualNumber):
            return NotImplemented
        return self._cmp(other) in (-1, 0)

    def __gt__(self, other):
        if not isinstance(other, DualNumber):
            return NotImplemented
        return self._cmp(other) == 1

    def __ge__(self, other):
        if not isinstance(other, DualNumber):
            return NotImplemented
        return self._cmp(other) in (0, 1)

    def __repr__(self) -> str:
        return "DualNumber(" + repr(float(self.a)) + ", " + repr(float(self.b)) + ")"

    def __str__(self) -> str:
        return str(float(self.a)) + " + " + str(float(self.b)) + "E"
