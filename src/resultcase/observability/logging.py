"""Structured logging for result capture and re-raise events.

- key=value console output for development, JSON lines for aggregation
- Immutable loggers: bind() returns a new logger with merged context
- Defaults come from resultcase settings until configure_logging() is called

Quick Start:
    >>> from resultcase.observability import get_logger, configure_logging
    >>> configure_logging(format="json", level="DEBUG")
    >>> get_logger("billing").bind(function="parse_invoice").debug("computation captured")
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, TextIO, Union, runtime_checkable

import orjson

from resultcase.config import get_settings

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. bind() returns a new logger.

    Example:
        >>> log = get_logger("resultcase.result").bind(function="parse")
        >>> log.debug("computation captured", error_type="ValueError")
        # => 10:30:45.123 [debug] computation captured error_type="ValueError" function="parse" ...
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int = logging.DEBUG

    def bind(self, **kw: JsonValue) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def is_enabled_for(self, level: int) -> bool:
        return level >= self._level

    def _log(self, level: int, event: str, **kw: JsonValue) -> None:
        if not self.is_enabled_for(level):
            return
        (self._renderer or _get_renderer()).render(
            LogEntry(time.time(), logging.getLevelName(level).lower(), event, {**self.context, **kw})
        )

    def debug(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.DEBUG, event, **kw)


@dataclass(slots=True)
class LogEntry:
    """Log entry with merged context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        """ISO formatted timestamp."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """Human-readable timestamp (HH:MM:SS.mmm)."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    show_timestamp: bool = True

    def render(self, entry: LogEntry) -> None:
        parts = [entry.ts_human] if self.show_timestamp else []
        parts += [f"[{entry.level}]", entry.event]
        parts += [f"{k}={_format_value(v)}" for k, v in sorted(entry.context.items())]
        print(" ".join(parts), file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        print(orjson.dumps({"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event,
                            **entry.context}, default=str, option=orjson.OPT_NON_STR_KEYS).decode(),
              file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("log_renderer", default=None)
_default_level: ContextVar[int | None] = ContextVar("log_level", default=None)


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
) -> LogRenderer:
    """Configure global structured logging. Format: "console" (human), "json" (machine), "none".

    Arguments left as None are taken from get_settings().
    """
    settings = get_settings()
    _default_level.set(_level_value(level or settings.effective_level))
    _renderer.set(renderer := _build_renderer(format or settings.logging.format, output))
    return renderer


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Get a structured logger with optional initial context. Name is added to context as 'logger'."""
    ctx = {**initial_context, **({"logger": name} if name else {})}
    if (level := _default_level.get()) is None:
        level = _level_value(get_settings().effective_level)
    return BoundLogger(context=ctx, _level=level)


def _build_renderer(format: str, output: TextIO | None) -> LogRenderer:  # noqa: A002
    match format:
        case "console": return ConsoleRenderer(output=output or sys.stderr)
        case "json": return JsonRenderer(output=output or sys.stdout)
        case "none": return NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")


def _get_renderer() -> LogRenderer:
    """Get configured renderer or build one from settings."""
    if (renderer := _renderer.get()) is None:
        _renderer.set(renderer := _build_renderer(get_settings().logging.format, None))
    return renderer


def _level_value(level: str) -> int:
    """Convert level name to logging int, INFO if unknown."""
    return getattr(logging, level.upper(), logging.INFO)


def _format_value(v: object) -> str:
    """Format a value for console output."""
    match v:
        case str(): return f'"{v}"'
        case bool(): return str(v).lower()
        case int() | float(): return str(v)
        case _: return repr(v)
