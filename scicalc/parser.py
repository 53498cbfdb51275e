"""
Tokenizer and recursive-descent parser for normalized expressions.

Grammar, loosest binding first:

    expr    := term (("+" | "-") term)*
    term    := power (("*" | "/") power)*
    power   := unary ("**" power)?
    unary   := ("-" | "+") unary | primary
    primary := NUMBER | NAME | NAME "(" [expr ("," expr)*] ")" | "(" expr ")"

Unary minus binds tighter than "**", which is right-associative.
"""

import re
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple, Union

from .errors import ExpressionSyntaxError


# ----------------------------
# Tokens
# ----------------------------
class Token(NamedTuple):
    type: str  # "num", "name", "op", "end"
    value: str
    pos: int


_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<num>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
  | (?P<name>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<op>\*\*|[-+*/(),])
    """,
    re.VERBOSE,
)


def tokenize(text: str) -> List[Token]:
    tokens = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if not m:
            raise ExpressionSyntaxError(f"unexpected character {text[pos]!r} at {pos}")
        kind = m.lastgroup
        if kind != "ws":
            tokens.append(Token(kind, m.group(), pos))
        pos = m.end()
    tokens.append(Token("end", "", len(text)))
    return tokens


# ----------------------------
# AST
# ----------------------------
@dataclass(frozen=True)
class Num:
    value: float


@dataclass(frozen=True)
class Name:
    id: str


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: "Node"


@dataclass(frozen=True)
class BinOp:
    op: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Call:
    func: str
    args: Tuple["Node", ...]


Node = Union[Num, Name, UnaryOp, BinOp, Call]


# ----------------------------
# Parser
# ----------------------------
class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.i = 0

    @property
    def cur(self) -> Token:
        return self.tokens[self.i]

    def _at(self, *ops) -> bool:
        return self.cur.type == "op" and self.cur.value in ops

    def _advance(self) -> Token:
        tok = self.cur
        if tok.type != "end":
            self.i += 1
        return tok

    def _expect(self, op: str) -> Token:
        if not self._at(op):
            raise ExpressionSyntaxError(f"expected {op!r} at {self.cur.pos}, got {self._describe(self.cur)}")
        return self._advance()

    @staticmethod
    def _describe(tok: Token) -> str:
        return "end of input" if tok.type == "end" else repr(tok.value)

    def parse(self) -> Node:
        node = self.expr()
        if self.cur.type != "end":
            raise ExpressionSyntaxError(f"unexpected {self._describe(self.cur)} at {self.cur.pos}")
        return node

    def expr(self) -> Node:
        left = self.term()
        while self._at("+", "-"):
            op = self._advance().value
            left = BinOp(op, left, self.term())
        return left

    def term(self) -> Node:
        left = self.power()
        while self._at("*", "/"):
            op = self._advance().value
            left = BinOp(op, left, self.power())
        return left

    def power(self) -> Node:
        base = self.unary()
        if self._at("**"):
            self._advance()
            return BinOp("**", base, self.power())
        return base

    def unary(self) -> Node:
        if self._at("-", "+"):
            op = self._advance().value
            return UnaryOp(op, self.unary())
        return self.primary()

    def primary(self) -> Node:
        tok = self.cur
        if tok.type == "num":
            self._advance()
            return Num(float(tok.value))
        if tok.type == "name":
            self._advance()
            if self._at("("):
                return Call(tok.value, self._arguments())
            return Name(tok.value)
        if self._at("("):
            self._advance()
            node = self.expr()
            self._expect(")")
            return node
        raise ExpressionSyntaxError(f"unexpected {self._describe(tok)} at {tok.pos}")

    def _arguments(self) -> Tuple[Node, ...]:
        self._expect("(")
        args = []
        if not self._at(")"):
            args.append(self.expr())
            while self._at(","):
                self._advance()
                args.append(self.expr())
        self._expect(")")
        return tuple(args)


def parse_expression(expression: str) -> Node:
    expr = (expression or "").strip()
    if not expr:
        raise ExpressionSyntaxError("expression is empty")
    return Parser(tokenize(expr)).parse()
