"""structlog setup for idr-numeral.

The formatting and parsing functions only emit events through ``get_logger``;
the command-line front end calls ``configure_logging`` once per invocation so
that JSON log lines go to stderr while results stay on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Route structlog through stdlib logging as JSON lines at ``level``."""
    logging.basicConfig(
        stream=sys.stderr,
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a lazily bound logger; configuration may happen after import."""
    return structlog.get_logger(name)
