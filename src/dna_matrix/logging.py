"""Structlog-based logging for DNA Matrix.

Library modules only call ``structlog.get_logger(__name__)`` and never
configure structlog themselves, so an application embedding the parser
keeps its own logging setup (or structlog's defaults). The CLI calls
``configure_logging`` on every invocation, which sends JSON lines to
stderr so they never mix with command output.
"""
from __future__ import annotations

from typing import Literal, TextIO

import logging
import sys

import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: LogLevel = "WARNING", stream: TextIO | None = None) -> None:
    """Render structlog events as JSON at ``level`` and above.

    Args:
        level: Minimum level to emit
        stream: Destination, stderr at call time when omitted
    """
    numeric_level = getattr(logging, level)
    logging.basicConfig(format="%(message)s", level=numeric_level)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        # The CLI reconfigures per invocation; cached loggers would keep a stale stream
        cache_logger_on_first_use=False,
    )
