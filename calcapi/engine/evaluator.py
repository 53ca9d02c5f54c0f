"""Postfix evaluation."""
from typing import Iterable, List

import numpy as np

from calcapi.engine.errors import DivisionByZero, InvalidOperator, MalformedExpression
from calcapi.engine.tokens import Number, Operator, Token


def apply_operation(a: float, b: float, op: str) -> float:
    """Apply binary operator `op` to the left operand `a` and right operand `b`."""
    if op == "+":
        return a + b
    elif op == "-":
        return a - b
    elif op == "*":
        return a * b
    elif op == "/":
        if b == 0:
            raise DivisionByZero()
        return a / b
    elif op == "^":
        # IEEE pow: 0^-1 is inf, a negative base with a fractional
        # exponent is nan, and overflow is inf rather than an exception
        with np.errstate(all="ignore"):
            return float(np.power(np.float64(a), np.float64(b)))
    else:
        raise InvalidOperator(op)


def evaluate_postfix(tokens: Iterable[Token], strict: bool = True) -> float:
    """
    Evaluate a postfix token sequence.

    Args:
        tokens: Postfix sequence produced by `infix_to_postfix`
        strict: Raise MalformedExpression when more than one value is
            left over; otherwise return the bottom value and drop the rest

    Returns:
        The value of the expression
    """
    stack: List[float] = []

    for token in tokens:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise MalformedExpression(
                    f"Missing operand for '{token.symbol}'")
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operation(a, b, token.symbol))
        else:
            raise InvalidOperator(str(token))

    if not stack:
        raise MalformedExpression("Expression is empty")
    if len(stack) > 1 and strict:
        raise MalformedExpression(
            f"Expression leaves {len(stack)} values, expected 1")
    return stack[0]
