"""
Rewrite calculator notation into the syntax the parser accepts.

Rules run in a fixed order, each on the output of the previous one:
symbols, percent, factorial, power, constants.
"""

import logging
import re

logger = logging.getLogger(__name__)

POWER_TOKEN = "**"

_SYMBOLS = {
    "×": "*",
    "÷": "/",
    "–": "-",
}

_PERCENT = re.compile(r"(\d+(?:\.\d+)?)%")
_FACTORIAL = re.compile(r"(\d+(?:\.\d+)?)!")
_PI = re.compile(r"\bpi\b", re.IGNORECASE)
# a lone e; "exp", "ceil" and friends keep their letter
_E = re.compile(r"\be(?![a-z])", re.IGNORECASE)


def normalize(text: str) -> str:
    if not text:
        return ""
    out = text
    for sym, repl in _SYMBOLS.items():
        out = out.replace(sym, repl)
    out = _PERCENT.sub(r"(\1/100)", out)
    out = _FACTORIAL.sub(r"factorial(\1)", out)
    out = out.replace("^", POWER_TOKEN)
    out = _PI.sub("PI", out)
    out = _E.sub("E", out)
    if out != text:
        logger.debug("normalized %r -> %r", text, out)
    return out
