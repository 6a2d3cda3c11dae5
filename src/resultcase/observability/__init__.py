"""Structured logging: bound context, console/JSON renderers."""

from .logging import (
    BoundLogger,
    ConsoleRenderer,
    JsonDict,
    JsonRenderer,
    JsonValue,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    configure_logging,
    get_logger,
)

__all__ = [
    "BoundLogger",
    "ConsoleRenderer",
    "JsonDict",
    "JsonRenderer",
    "JsonValue",
    "LogEntry",
    "LogRenderer",
    "NoOpRenderer",
    "configure_logging",
    "get_logger",
]
