"""Evaluation trace for the calculator boundaries."""
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

from calcapi.config import TRACE_LIMIT

logger = logging.getLogger(__name__)


class Source(str, Enum):
    """Where an evaluation request came from."""
    HTTP = "http"
    CLI = "cli"


@dataclass
class EvaluationRecord:
    """One evaluated expression and its outcome."""
    timestamp: datetime
    source: Source
    expression: str
    postfix: Optional[str]
    result: Optional[float]
    error: Optional[str]
    duration_ms: float

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for serialization."""
        return {
            **self.__dict__,
            "timestamp": self.timestamp.isoformat(),
            "source": self.source.value,
        }


# In-memory trace storage, oldest records dropped first
_trace_log: Deque[EvaluationRecord] = deque(maxlen=TRACE_LIMIT)


def log_evaluation(
    source: Source,
    expression: str,
    duration_ms: float,
    postfix: Optional[str] = None,
    result: Optional[float] = None,
    error: Optional[str] = None,
) -> EvaluationRecord:
    """Record an evaluation and log a one-line summary."""
    record = EvaluationRecord(
        timestamp=datetime.now(),
        source=Source(source),
        expression=expression,
        postfix=postfix,
        result=result,
        error=error,
        duration_ms=duration_ms,
    )
    _trace_log.append(record)

    if error is None:
        logger.info(
            f"[{record.source.value}] {expression[:100]!r} = {result} ({duration_ms:.2f}ms)")
    else:
        logger.warning(
            f"[{record.source.value}] {expression[:100]!r} failed: {error} ({duration_ms:.2f}ms)")
    if postfix is not None:
        logger.debug(f"  Postfix: {postfix[:200]}")
    return record


def get_trace() -> List[EvaluationRecord]:
    """Get the full trace log."""
    return list(_trace_log)


def get_trace_dicts() -> List[Dict[str, Any]]:
    """Get trace log as list of dictionaries."""
    return [record.to_dict() for record in _trace_log]


def get_failures() -> List[EvaluationRecord]:
    """Get all records whose evaluation failed."""
    return [r for r in _trace_log if not r.succeeded]


def clear_trace():
    """Clear the trace log."""
    _trace_log.clear()


def format_trace_summary() -> str:
    """Format a human-readable trace summary."""
    if not _trace_log:
        return "No trace data"

    lines = ["\n=== Evaluation Trace ==="]
    for record in _trace_log:
        timestamp = record.timestamp.strftime("%H:%M:%S")
        outcome = f"= {record.result}" if record.succeeded else f"ERROR: {record.error}"
        lines.append(
            f"[{timestamp}] {record.source.value.upper()}: {record.expression[:80]} {outcome}")
        if record.postfix:
            lines.append(f"           postfix: {record.postfix[:150]}")

    return "\n".join(lines)
