"""
Display rounding: hide float noise before a result is shown.

    round_result(0.1 + 0.2) -> 0.3
    format_result(2.0)      -> "2"
"""

import math
import sys
from decimal import Decimal

ZERO_THRESHOLD = 1e-12
DECIMALS = 12
# one decimal is dropped per digit from here up, which keeps the scaled
# value below 1e15 where floats sit at most 1/8 apart
FULL_PRECISION_LIMIT = 1e3
EPSILON = sys.float_info.epsilon


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _places(value) -> int:
    places = DECIMALS
    bound = FULL_PRECISION_LIMIT
    while abs(value) >= bound and places > 0:
        places -= 1
        bound *= 10
    return places


def round_result(value):
    """
    Round to 12 decimal places, half-up with an epsilon nudge. Non-numbers
    pass through.

    From 1e3 upward one decimal is given up per digit (15 significant digits
    in total); rounding a rounded value then returns it unchanged.
    """
    if not _is_number(value):
        return value
    if not math.isfinite(value):
        return float(value)
    if abs(value) < ZERO_THRESHOLD:
        return 0.0
    places = _places(value)
    if places == 0:
        # no fractional digits left to clean up
        return float(value)
    scale = 10.0 ** places
    scaled = (value + EPSILON) * scale
    return math.floor(scaled + 0.5) / scale


def _number_text(x: float) -> str:
    if x == 0:
        return "0"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    text = repr(x)
    if "e" not in text:
        return text
    if 1e-6 <= abs(x) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exp = text.split("e")
    return f"{mantissa}e{int(exp):+d}"


def format_result(value) -> str:
    if value is None:
        return ""
    if not _is_number(value):
        return str(value)
    return _number_text(float(round_result(value)))
