"""Traced evaluation shared by the HTTP server and the CLI."""
import time

from calcapi.engine.calculate import sanitize
from calcapi.engine.converter import infix_to_postfix
from calcapi.engine.errors import CalculationError
from calcapi.engine.evaluator import evaluate_postfix
from calcapi.engine.result import Err, Ok, Result
from calcapi.engine.tokens import format_postfix
from calcapi.observability.telemetry import Source, log_evaluation


def run_expression(expression: str, strict: bool, source: Source) -> Result:
    """Evaluate `expression`, record it in the trace and return a Result."""
    start = time.perf_counter()
    postfix = None
    try:
        tokens = infix_to_postfix(sanitize(expression), strict=strict)
        postfix = format_postfix(tokens)
        value = evaluate_postfix(tokens, strict=strict)
    except CalculationError as e:
        duration_ms = (time.perf_counter() - start) * 1000
        log_evaluation(source, expression, duration_ms,
                       postfix=postfix, error=str(e))
        return Err(e)

    duration_ms = (time.perf_counter() - start) * 1000
    log_evaluation(source, expression, duration_ms,
                   postfix=postfix, result=value)
    return Ok(value)
