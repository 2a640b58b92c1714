"""Logging configuration with structlog and standard logging integration."""

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = 'namerec.qfilter'

_STREAMS = {
    'stderr': lambda: sys.stderr,
    'stdout': lambda: sys.stdout,
}


def configure_logging(log_level: str, stream: str | TextIO = 'stderr') -> None:
    """
    Route the parser's standard logging records through structlog.

    Only the ``namerec.qfilter`` logger tree is configured; records carry the
    emitting module name (``namerec.qfilter.splitter``, ``...parser``) so
    clause splitting and condition matching can be told apart. The CLI
    keeps stdout for its JSON, hence the stderr default.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: 'stderr', 'stdout' or an open text stream

    Raises:
        ValueError: If stream is an unknown name
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    if isinstance(stream, str):
        if stream not in _STREAMS:
            msg = f'Unknown log stream: {stream!r}. Use one of: {", ".join(_STREAMS)}'
            raise ValueError(msg)
        stream = _STREAMS[stream]()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso', utc=False),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt='iso', utc=False),
        ],
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False
