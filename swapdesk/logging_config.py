"""
Structured logging configuration using structlog.

Produces JSON logs by default, human-readable colored logs at DEBUG level.
Swap sessions bind the current pair and picker phase into the log context,
so every line emitted while a screen is open says what it was quoting.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings

_configured = False


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Override log level (default: from settings.log_level)
    """
    global _configured

    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    is_dev = level == logging.DEBUG

    # Shared processors for both structlog and stdlib
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if is_dev:
        # Development: colored console output
        renderer = structlog.dev.ConsoleRenderer()
    else:
        # Production: JSON lines
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # The swap modules log through stdlib loggers; the pre-chain gives their
    # records the same context (pair, picker phase) as structlog events.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    _configured = True


def ensure_logging() -> None:
    """Configure logging once, leaving an existing setup alone."""
    if not _configured:
        setup_logging()


def bind_swap_context(pair: str, picker: str) -> None:
    """Attach the active pair (``"WBTC->USD"``) and picker phase to log lines."""
    structlog.contextvars.bind_contextvars(swap_pair=pair, picker=picker)
