"""Logging setup for command line use.

The library itself only creates module loggers and logs at DEBUG level;
applications decide where records go. configure_logging() is what the
CLI uses.
"""

import logging

NOISY_HTTP_LOGGERS = (
    "httpx",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
)

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def set_noisy_http_logger_levels(current_log_level: str) -> None:
    """Ensure HTTP client noise only surfaces at DEBUG level."""

    noisy_level = logging.DEBUG if current_log_level == "DEBUG" else logging.WARNING
    for logger_name in NOISY_HTTP_LOGGERS:
        logging.getLogger(logger_name).setLevel(noisy_level)


def normalize_level(log_level: str) -> str:
    """Return a valid level name, falling back to INFO."""
    parts = log_level.split()
    level = parts[0].upper() if parts else ""
    return level if level in VALID_LEVELS else "INFO"


def configure_logging(log_level: str = "INFO") -> str:
    """Configure the root logger and return the effective level name."""
    level = normalize_level(log_level)
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, force=True)
    set_noisy_http_logger_levels(level)
    logging.getLogger(__name__).debug("Logging configured at %s", level)
    return level


__all__ = [
    "NOISY_HTTP_LOGGERS",
    "configure_logging",
    "normalize_level",
    "set_noisy_http_logger_levels",
]
