"""Infix to postfix conversion (shunting-yard)."""
from typing import List, Tuple

from calcapi.engine.errors import MalformedExpression
from calcapi.engine.tokens import (
    CharClass,
    Number,
    Operator,
    Token,
    OPEN_PAREN,
    classify,
    parse_number,
    precedence,
)


def infix_to_postfix(expression: str, strict: bool = True) -> Tuple[Token, ...]:
    """
    Convert a whitespace-free infix expression to postfix order.

    Every operator is treated as left-associative, so `2^3^2` becomes
    `2 3 ^ 2 ^` and evaluates as `(2^3)^2`.

    Args:
        expression: Infix expression with whitespace already removed
        strict: Raise MalformedExpression on stray characters and
            unbalanced parentheses instead of skipping them

    Returns:
        The postfix token sequence
    """
    output: List[Token] = []
    operators: List[str] = []
    literal = ""

    def flush_literal():
        nonlocal literal
        if literal:
            output.append(Number(parse_number(literal, strict)))
            literal = ""

    for position, char in enumerate(expression):
        kind = classify(char)

        if kind is CharClass.LITERAL:
            literal += char
            continue

        flush_literal()

        if kind is CharClass.OPEN_PAREN:
            operators.append(char)
        elif kind is CharClass.CLOSE_PAREN:
            while operators and operators[-1] != OPEN_PAREN:
                output.append(Operator(operators.pop()))
            if operators:
                operators.pop()
            elif strict:
                raise MalformedExpression(
                    f"Unmatched ')' at position {position}")
        elif kind is CharClass.OPERATOR:
            while (
                operators
                and operators[-1] != OPEN_PAREN
                and precedence(operators[-1]) >= precedence(char)
            ):
                output.append(Operator(operators.pop()))
            operators.append(char)
        elif strict:
            raise MalformedExpression(
                f"Unexpected character '{char}' at position {position}")

    flush_literal()

    while operators:
        top = operators.pop()
        if top == OPEN_PAREN:
            if strict:
                raise MalformedExpression("Unmatched '('")
            continue
        output.append(Operator(top))

    return tuple(output)
