"""Exceptions raised while evaluating an expression."""


class EvalError(Exception):
    pass


class ExpressionSyntaxError(EvalError):
    """Malformed expression: bad token, unbalanced parentheses, stray operator."""


class UnknownNameError(EvalError):
    """Identifier that is not in the evaluation environment."""


class DomainError(EvalError):
    """Argument outside a function's domain, or a non-finite result."""


class InvalidFactorialError(DomainError):
    def __init__(self, n=None):
        msg = "invalid factorial argument"
        if n is not None:
            msg = f"{msg}: {n!r}"
        super().__init__(msg)
        self.argument = n
