"""Tests for postfix evaluation."""
import math
import pytest
from calcapi.engine.errors import DivisionByZero, InvalidOperator, MalformedExpression
from calcapi.engine.evaluator import apply_operation, evaluate_postfix
from calcapi.engine.tokens import Number, Operator


def test_apply_operation_basic():
    """Test binary semantics of every operator."""
    assert apply_operation(6, 3, "+") == 9
    assert apply_operation(6, 3, "-") == 3
    assert apply_operation(6, 3, "*") == 18
    assert apply_operation(6, 3, "/") == 2
    assert apply_operation(2, 10, "^") == 1024


def test_apply_operation_operand_order():
    """Test that `a` is the left operand and `b` the right."""
    assert apply_operation(1, 4, "-") == -3
    assert apply_operation(1, 4, "/") == 0.25
    assert apply_operation(3, 2, "^") == 9


def test_division_by_zero():
    """Test that dividing by zero raises DivisionByZero."""
    with pytest.raises(DivisionByZero, match="Division by zero"):
        apply_operation(1, 0, "/")
    with pytest.raises(DivisionByZero):
        apply_operation(1, -0.0, "/")


def test_invalid_operator():
    """Test the defensive branch for unknown operators."""
    with pytest.raises(InvalidOperator, match="Invalid operator: %"):
        apply_operation(1, 2, "%")


def test_power_follows_ieee_semantics():
    """Test that power returns inf/nan instead of raising."""
    assert apply_operation(0, -1, "^") == math.inf
    assert math.isnan(apply_operation(-8, 1 / 3, "^"))
    assert apply_operation(10, 400, "^") == math.inf
    assert apply_operation(4, 0.5, "^") == 2


def test_evaluate_postfix_single_value():
    """Test that a single number is returned as is."""
    assert evaluate_postfix((Number(5.0),)) == 5.0


def test_evaluate_postfix_sequence():
    """Test evaluation of a multi-operator sequence."""
    tokens = (Number(2.0), Number(3.0), Operator("^"), Number(2.0), Operator("^"))
    assert evaluate_postfix(tokens) == 64


def test_evaluate_postfix_empty():
    """Test that an empty sequence is malformed."""
    with pytest.raises(MalformedExpression, match="empty"):
        evaluate_postfix(())


def test_evaluate_postfix_missing_operand():
    """Test that operand underflow is malformed in both modes."""
    tokens = (Number(2.0), Operator("+"))
    with pytest.raises(MalformedExpression, match="Missing operand"):
        evaluate_postfix(tokens)
    with pytest.raises(MalformedExpression, match="Missing operand"):
        evaluate_postfix(tokens, strict=False)


def test_evaluate_postfix_surplus_values():
    """Test that leftover values raise in strict mode only."""
    tokens = (Number(2.0), Number(3.0), Number(4.0), Operator("+"))
    with pytest.raises(MalformedExpression, match="leaves 2 values"):
        evaluate_postfix(tokens)
    assert evaluate_postfix(tokens, strict=False) == 2.0


def test_evaluate_postfix_rejects_foreign_token():
    """Test that a token of unknown type fails as an invalid operator."""
    with pytest.raises(InvalidOperator):
        evaluate_postfix((Number(1.0), "%"))
