"""Centralized logging configuration."""
import logging


def configure_logging(level: str = "INFO"):
    """Configure logging with appropriate levels for different modules."""
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    # Werkzeug logs every request line at INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    logging.getLogger("calcapi.observability").setLevel(logging.INFO)
    logging.getLogger("calcapi.server").setLevel(logging.INFO)
    logging.getLogger("calcapi.guards").setLevel(logging.INFO)
    logging.getLogger().setLevel(log_level)
