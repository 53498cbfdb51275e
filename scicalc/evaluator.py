"""
AST evaluator for calculator expressions.

evaluate() is a pure function of (expression, angle mode): it normalizes the
text, parses it, and walks the tree against a freshly built environment.
Every failure is raised as an EvalError subclass.
"""

import logging
import math

from .environment import build_environment
from .errors import DomainError, EvalError, ExpressionSyntaxError, UnknownNameError
from .normalizer import normalize
from .parser import BinOp, Call, Name, Num, UnaryOp, parse_expression

logger = logging.getLogger(__name__)


def _divide(l, r):
    if r == 0:
        raise DomainError("division by zero")
    return l / r


_BIN_OPS = {
    "+": lambda l, r: l + r,
    "-": lambda l, r: l - r,
    "*": lambda l, r: l * r,
    "/": _divide,
    # math.pow raises instead of returning a complex for (-8) ** (1/3)
    "**": math.pow,
}


def evaluate_node(node, env):
    if isinstance(node, Num):
        return node.value

    if isinstance(node, Name):
        if node.id not in env:
            raise UnknownNameError(f"unknown name: {node.id}")
        val = env[node.id]
        if callable(val):
            raise UnknownNameError(f"'{node.id}' is a function; call it like {node.id}(...)")
        return val

    if isinstance(node, UnaryOp):
        val = evaluate_node(node.operand, env)
        return -val if node.op == "-" else +val

    if isinstance(node, BinOp):
        l = evaluate_node(node.left, env)
        r = evaluate_node(node.right, env)
        try:
            return _BIN_OPS[node.op](l, r)
        except (ValueError, OverflowError, ZeroDivisionError) as exc:
            raise DomainError(f"{node.op}: {exc}") from exc

    if isinstance(node, Call):
        if node.func not in env:
            raise UnknownNameError(f"unknown function: {node.func}")
        func = env[node.func]
        if not callable(func):
            raise UnknownNameError(f"'{node.func}' is not a function")
        args = [evaluate_node(a, env) for a in node.args]
        try:
            return func(*args)
        except EvalError:
            raise
        except TypeError as exc:
            raise DomainError(f"{node.func}: bad arguments ({exc})") from exc
        except (ValueError, OverflowError, ZeroDivisionError) as exc:
            raise DomainError(f"{node.func}: {exc}") from exc

    raise EvalError(f"unsupported node: {type(node).__name__}")


def evaluate(expression_text: str, angle_mode="deg"):
    """
    Evaluate calculator text and return a float.

    Empty or blank input returns None (nothing to compute). Any result that
    is not a finite number raises DomainError.
    """
    expr = normalize(expression_text)
    if not expr.strip():
        return None
    env = build_environment(angle_mode)
    try:
        tree = parse_expression(expr)
        result = evaluate_node(tree, env)
        if isinstance(result, complex) or not math.isfinite(result):
            raise DomainError("result is not a finite number")
    except RecursionError:
        logger.debug("evaluation of %r failed: nested too deeply", expr)
        raise ExpressionSyntaxError("expression is nested too deeply") from None
    except EvalError as exc:
        logger.debug("evaluation of %r failed: %s: %s", expr, type(exc).__name__, exc)
        raise
    logger.debug("evaluated %r -> %r", expr, result)
    return float(result)
