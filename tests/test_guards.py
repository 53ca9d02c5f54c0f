"""Tests for request guards."""
from calcapi.guards.policy import (
    apply_guards,
    check_expression_length,
    check_expression_present,
    check_payload,
)


def test_check_payload_accepts_object():
    """Test that a JSON object passes."""
    assert check_payload({"expression": "1"}) == (True, None)


def test_check_payload_rejects_non_object():
    """Test that non-object bodies are rejected."""
    assert check_payload(None) == (False, "Invalid JSON body")
    assert check_payload(["1 + 1"]) == (False, "Invalid JSON body")


def test_check_expression_missing():
    """Test that a missing or empty expression is rejected."""
    assert check_expression_present({}) == (False, "Expression is required")
    assert check_expression_present({"expression": ""}) == (
        False, "Expression is required")
    assert check_expression_present({"expression": None}) == (
        False, "Expression is required")


def test_check_expression_type():
    """Test that a non-string expression is rejected."""
    passed, error = check_expression_present({"expression": 42})
    assert passed is False
    assert error == "Expression must be a string"


def test_check_expression_length():
    """Test the length limit."""
    assert check_expression_length("1+1", max_length=3) == (True, None)
    passed, error = check_expression_length("1+1+1", max_length=3)
    assert passed is False
    assert "maximum length of 3" in error


def test_apply_guards_passes():
    """Test that a valid body passes all guards."""
    passed, error, expression = apply_guards({"expression": "2 + 2"})
    assert passed is True
    assert error is None
    assert expression == "2 + 2"


def test_apply_guards_fails_first_check():
    """Test that the first failing guard wins."""
    passed, error, expression = apply_guards("not a dict")
    assert passed is False
    assert error == "Invalid JSON body"
    assert expression is None


def test_apply_guards_length():
    """Test that overlong expressions are rejected."""
    passed, error, _ = apply_guards({"expression": "1+" * 10 + "1"}, max_length=5)
    assert passed is False
    assert "maximum length" in error
