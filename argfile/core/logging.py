"""Structlog configuration for the argfile CLI.

Library modules call get_logger(); importing this module applies a
WARNING-level default and the CLI reconfigures from --log-level. Output
goes to stderr; stdout is reserved for the argument lists commands print.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure structlog on top of stdlib logging.

    Under pytest the root logger is raised above CRITICAL so nothing is
    emitted.
    """
    if _is_test_environment():
        level = logging.CRITICAL + 1
    else:
        level = getattr(logging, log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a logger, bound to `name` when one is given."""
    log = structlog.stdlib.get_logger()
    if name:
        return log.bind(logger_name=name)
    return log


# Configured on import so library callers get stderr logging at WARNING
# without calling anything first.
configure_logging()
