"""Logging setup for applications embedding the estimator.

Library modules only call ``logging.getLogger(__name__)``; the host
application calls :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from first_debit.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog with a console renderer.

    Args:
        level: Log level name; defaults to ``settings.log_level``.
    """
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    logging.getLogger("first_debit").setLevel(getattr(logging, level_name))
