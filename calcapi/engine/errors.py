"""Failures raised by the expression engine."""


class CalculationError(ValueError):
    """Base class for every evaluation failure."""


class MalformedExpression(CalculationError):
    """The input cannot be read as a single well-formed expression."""


class DivisionByZero(CalculationError):
    """Right operand of `/` was zero."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class InvalidOperator(CalculationError):
    """An operator outside the supported set reached evaluation."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Invalid operator: {operator}")
