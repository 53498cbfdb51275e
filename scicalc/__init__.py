"""
scicalc
Scientific calculator core (normalizer, evaluator, display rounding) plus a
PyQt6 front end.
"""

from .display import format_result, round_result
from .environment import AngleMode
from .errors import (
    DomainError,
    EvalError,
    ExpressionSyntaxError,
    InvalidFactorialError,
    UnknownNameError,
)
from .evaluator import evaluate
from .normalizer import normalize

__version__ = "1.0.0"

__all__ = [
    "AngleMode",
    "DomainError",
    "EvalError",
    "ExpressionSyntaxError",
    "InvalidFactorialError",
    "UnknownNameError",
    "evaluate",
    "format_result",
    "normalize",
    "round_result",
]
