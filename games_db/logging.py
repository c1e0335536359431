from __future__ import annotations

import logging
import sys

import structlog


# stdout is reserved for the seed notices; structured logs always go to stderr,
# whether or not configure_logging() has run.
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    cache_logger_on_first_use=True,
)


def configure_logging(log_level: str) -> None:
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level.upper())
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level.upper())),
    )


logger = structlog.get_logger()
