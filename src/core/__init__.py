"""Core module — config, logging."""

from src.core.config import (
    AggregationConfig,
    CachetConfig,
    LoggingConfig,
    ResolutionPolicy,
    ServerConfig,
    Settings,
    load_settings,
)
from src.core.logging import parse_level, setup_logging

__all__ = [
    "AggregationConfig",
    "CachetConfig",
    "LoggingConfig",
    "ResolutionPolicy",
    "ServerConfig",
    "Settings",
    "load_settings",
    "parse_level",
    "setup_logging",
]
