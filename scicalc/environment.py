"""
Names available inside an expression: constants and functions.

Trig functions depend on the angle mode, so the mapping is rebuilt for each
evaluation and handed out read-only.
"""

import enum
import math
from types import MappingProxyType

from .errors import InvalidFactorialError


class AngleMode(enum.Enum):
    DEGREES = "deg"
    RADIANS = "rad"

    @classmethod
    def parse(cls, value) -> "AngleMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError("angle_mode must be 'deg' or 'rad'") from None

    def toggled(self) -> "AngleMode":
        return AngleMode.RADIANS if self is AngleMode.DEGREES else AngleMode.DEGREES

    @property
    def label(self) -> str:
        return self.value.upper()


def factorial(n):
    """n! for non-negative integers only, as a float product 1*2*...*n."""
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise InvalidFactorialError(n)
    if not math.isfinite(n) or n < 0 or math.floor(n) != n:
        raise InvalidFactorialError(n)
    res = 1.0
    for i in range(2, int(n) + 1):
        res *= i
        if math.isinf(res):
            break
    return res


def _round_half_up(x):
    return float(math.floor(x + 0.5))


def build_environment(angle_mode=AngleMode.DEGREES):
    mode = AngleMode.parse(angle_mode)
    deg = mode is AngleMode.DEGREES

    def sin(x):
        return math.sin(x * math.pi / 180) if deg else math.sin(x)

    def cos(x):
        return math.cos(x * math.pi / 180) if deg else math.cos(x)

    def tan(x):
        return math.tan(x * math.pi / 180) if deg else math.tan(x)

    def asin(x):
        return math.asin(x) * 180 / math.pi if deg else math.asin(x)

    def acos(x):
        return math.acos(x) * 180 / math.pi if deg else math.acos(x)

    def atan(x):
        return math.atan(x) * 180 / math.pi if deg else math.atan(x)

    env = {
        # constants
        "PI": math.pi,
        "E": math.e,
        "PI2": math.pi * 2,
        # math aliases
        "abs": abs,
        "pow": math.pow,
        "sqrt": math.sqrt,
        "round": _round_half_up,
        "floor": lambda x: float(math.floor(x)),
        "ceil": lambda x: float(math.ceil(x)),
        "max": max,
        "min": min,
        "log": math.log10,
        "ln": math.log,
        "exp": math.exp,
        "factorial": factorial,
        # trig, angle-mode aware
        "sin": sin,
        "cos": cos,
        "tan": tan,
        "asin": asin,
        "acos": acos,
        "atan": atan,
    }
    return MappingProxyType(env)
