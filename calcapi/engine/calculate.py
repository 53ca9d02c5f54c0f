"""Entry point of the expression engine: text in, number out."""
import re

from calcapi.engine.converter import infix_to_postfix
from calcapi.engine.errors import CalculationError, MalformedExpression
from calcapi.engine.evaluator import evaluate_postfix
from calcapi.engine.result import Err, Ok, Result

_WHITESPACE = re.compile(r"\s+")


def sanitize(expression: str) -> str:
    """Remove all whitespace from an expression."""
    if not isinstance(expression, str):
        raise MalformedExpression("Expression must be a string")
    return _WHITESPACE.sub("", expression)


def evaluate(expression: str, strict: bool = True) -> float:
    """
    Evaluate an arithmetic expression.

    Supports +, -, *, /, ^ and parentheses over plain decimal numbers.
    `^` groups left to right, like every other operator.
    Examples:
        >>> evaluate("2 + 2 * 2")
        6.0
        >>> evaluate("2 ^ 3 ^ 2")
        64.0

    Raises:
        DivisionByZero, InvalidOperator, MalformedExpression
    """
    postfix = infix_to_postfix(sanitize(expression), strict=strict)
    return evaluate_postfix(postfix, strict=strict)


def try_evaluate(expression: str, strict: bool = True) -> Result:
    """Like `evaluate`, but returns Ok(value) or Err(error) instead of raising."""
    try:
        return Ok(evaluate(expression, strict=strict))
    except CalculationError as e:
        return Err(e)
