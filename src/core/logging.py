"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from src.core.config import LoggingConfig

# Level names accepted on top of the stdlib ones.
_LEVEL_ALIASES: dict[str, int] = {
    "TRACE": logging.DEBUG,
    "WARN": logging.WARNING,
}


def parse_level(name: str) -> int:
    """Map a level name to a stdlib level, falling back to WARNING."""
    key = name.strip().upper()
    if key in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[key]
    level = logging.getLevelName(key)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    config: LoggingConfig | None = None,
    level: str | None = None,
    fmt: str | None = None,
) -> None:
    """Configure structlog with JSON or console renderer.

    Args:
        config: Logging section of the settings. Defaults are used if None.
        level: Log level override (e.g. "DEBUG"). Uses config if None.
        fmt: Renderer format override ("json" or "console"). Uses config if None.
    """
    cfg = config or LoggingConfig()
    log_level = parse_level(level or cfg.level)
    log_format = fmt or cfg.format

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)
