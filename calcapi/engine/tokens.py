"""Character classification, operator precedence and token types."""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from calcapi.engine.errors import MalformedExpression

# Operator -> precedence. All operators are left-associative, `^` included.
PRECEDENCE = {
    "^": 3,
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}

OPEN_PAREN = "("
CLOSE_PAREN = ")"
DECIMAL_POINT = "."
DIGITS = "0123456789"

_STRICT_LITERAL = re.compile(r"\d+\.?\d*|\.\d+", re.ASCII)
_LITERAL_PREFIX = re.compile(r"\d*\.?\d*", re.ASCII)


class CharClass(str, Enum):
    """What a single input character means to the converter."""
    LITERAL = "literal"
    OPERATOR = "operator"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Operator:
    symbol: str

    @property
    def precedence(self) -> int:
        return precedence(self.symbol)

    def __str__(self) -> str:
        return self.symbol


Token = Union[Number, Operator]


def is_operator(char: str) -> bool:
    return char in PRECEDENCE


def precedence(op: str) -> int:
    """Precedence rank of `op`, or 0 for anything that is not an operator."""
    return PRECEDENCE.get(op, 0)


def is_literal_char(char: str) -> bool:
    return char == DECIMAL_POINT or (len(char) == 1 and char in DIGITS)


def classify(char: str) -> CharClass:
    if is_literal_char(char):
        return CharClass.LITERAL
    if is_operator(char):
        return CharClass.OPERATOR
    if char == OPEN_PAREN:
        return CharClass.OPEN_PAREN
    if char == CLOSE_PAREN:
        return CharClass.CLOSE_PAREN
    return CharClass.UNKNOWN


def parse_number(text: str, strict: bool = True) -> float:
    """
    Parse a run of digits and decimal points into a float.

    Args:
        text: Literal characters collected by the converter
        strict: Reject anything but one well-formed decimal literal

    Returns:
        The parsed value. In lenient mode the longest valid prefix is
        used, and a run without any digit gives NaN.
    """
    if strict:
        if not _STRICT_LITERAL.fullmatch(text):
            raise MalformedExpression(f"Malformed number: '{text}'")
        return float(text)

    prefix = _LITERAL_PREFIX.match(text).group(0)
    if not any(c in DIGITS for c in prefix):
        return math.nan
    return float(prefix)


def format_postfix(tokens) -> str:
    """Render a postfix sequence as space-separated text."""
    return " ".join(str(token) for token in tokens)
