"""CLI interface for the calculator."""
import sys

from calcapi.config import CALC_STRICT, LOG_LEVEL
from calcapi.observability.logging_config import configure_logging
from calcapi.observability.telemetry import Source, clear_trace, format_trace_summary
from calcapi.runner import run_expression

USAGE = "Usage: python -m calcapi.app [--lenient] [--trace] ['expression']"


def repl(strict: bool):
    while True:
        expr = input("Enter expression (or 'q' to quit): ")
        if expr.lower() == "q":
            break
        outcome = run_expression(expr, strict, Source.CLI)
        if outcome.ok:
            print("=", outcome.value)
        else:
            print("Error:", outcome.message)


def main(argv=None) -> int:
    configure_logging(LOG_LEVEL)
    args = list(sys.argv[1:] if argv is None else argv)

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    strict = CALC_STRICT and "--lenient" not in args
    show_trace = "--trace" in args
    words = [a for a in args if a not in ("--lenient", "--trace")]
    clear_trace()

    if not words:
        repl(strict)
        exit_code = 0
    else:
        outcome = run_expression(" ".join(words), strict, Source.CLI)
        if outcome.ok:
            print(outcome.value)
            exit_code = 0
        else:
            print(f"Error: {outcome.message}", file=sys.stderr)
            exit_code = 1

    if show_trace:
        print(format_trace_summary())
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
