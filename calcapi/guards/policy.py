"""Request guards applied before an expression reaches the engine."""
import logging
from typing import Any, Optional, Tuple

from calcapi.config import MAX_EXPRESSION_LENGTH

logger = logging.getLogger(__name__)

EXPRESSION_FIELD = "expression"


def check_payload(payload: Any) -> Tuple[bool, Optional[str]]:
    """
    Check that a request body is a JSON object.

    Args:
        payload: Decoded request body (None when it was not valid JSON)

    Returns:
        (is_valid, error_message) tuple
    """
    if not isinstance(payload, dict):
        logger.info(f"Rejected payload of type {type(payload).__name__}")
        return False, "Invalid JSON body"
    return True, None


def check_expression_present(payload: dict) -> Tuple[bool, Optional[str]]:
    """
    Check that the expression field is present, non-empty and a string.

    Args:
        payload: Request body

    Returns:
        (is_valid, error_message) tuple
    """
    expression = payload.get(EXPRESSION_FIELD)
    if expression is None or expression == "":
        return False, "Expression is required"
    if not isinstance(expression, str):
        logger.info(
            f"Rejected expression of type {type(expression).__name__}")
        return False, "Expression must be a string"
    return True, None


def check_expression_length(
    expression: str,
    max_length: int = MAX_EXPRESSION_LENGTH
) -> Tuple[bool, Optional[str]]:
    """
    Check that an expression is within the configured length limit.

    Args:
        expression: Raw expression text
        max_length: Maximum number of characters accepted

    Returns:
        (is_valid, error_message) tuple
    """
    if len(expression) > max_length:
        error_msg = f"Expression exceeds maximum length of {max_length} characters"
        logger.warning(f"{error_msg} (got {len(expression)})")
        return False, error_msg
    logger.debug(f"Expression length ok: {len(expression)}/{max_length}")
    return True, None


def apply_guards(
    payload: Any,
    max_length: int = MAX_EXPRESSION_LENGTH
) -> Tuple[bool, Optional[str], Optional[str]]:
    """
    Apply all guards to a request body.

    Args:
        payload: Decoded request body
        max_length: Maximum expression length

    Returns:
        (passed, error_message, expression) tuple
        - passed: True if all guards pass
        - error_message: Error message if guards fail
        - expression: The expression text when guards pass
    """
    for check in (check_payload, check_expression_present):
        passed, error = check(payload)
        if not passed:
            logger.debug(f"Guard check failed: {error}")
            return False, error, None

    expression = payload[EXPRESSION_FIELD]
    passed, error = check_expression_length(expression, max_length)
    if not passed:
        return False, error, None

    logger.debug("All guard checks passed")
    return True, None, expression
