"""Pytest configuration for test logging."""
from calcapi.config import LOG_LEVEL
from calcapi.observability.logging_config import configure_logging

configure_logging(LOG_LEVEL)
