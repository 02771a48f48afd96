# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Structured logging with context
# PURPOSE: Tag every log line of a generation run with type/table/field
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging

Loggers are tagged with the engine component that owns them, and a
thread-local context stack tags records with the type, table and field
being processed. Output is a single line per record, either readable
text or JSON.

Usage:
    from core.logging import ComponentType, get_logger, log_context

    logger = get_logger(__name__, ComponentType.SYNTHESIZER)

    with log_context(type_name="Invoice", table="Invoice_itemList"):
        logger.debug("Adding column")
"""

import json
import logging
import os
import sys
import threading
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, TextIO, Union


class ComponentType(str, Enum):
    """Engine components that own a logger."""
    SYNTHESIZER = "synthesizer"
    EMITTER = "emitter"
    INTROSPECTION = "introspection"
    SERVICE = "service"
    CLI = "cli"


@dataclass(frozen=True)
class LogContext:
    """What the current thread is working on. Unset values are None."""
    type_name: Optional[str] = None
    table: Optional[str] = None
    field_name: Optional[str] = None
    descriptor: Optional[str] = None
    operation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


_local = threading.local()


def _stack() -> list:
    if not hasattr(_local, "stack"):
        _local.stack = []
    return _local.stack


def get_current_context() -> LogContext:
    """Innermost context of this thread (empty outside any log_context)."""
    stack = _stack()
    return stack[-1] if stack else LogContext()


@contextmanager
def log_context(**kwargs):
    """
    Push a context for the duration of a block.

    Fields not given are inherited from the enclosing context.

    Example:
        with log_context(type_name="Invoice"):
            with log_context(table="Invoice_itemList", field_name="itemList"):
                ...
    """
    merged = {**get_current_context().to_dict(), **kwargs}
    context = LogContext(**merged)
    stack = _stack()
    stack.append(context)
    try:
        yield context
    finally:
        stack.pop()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log aggregation."""

    def __init__(self, include_timestamp: bool = True):
        super().__init__()
        self.include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {}
        if self.include_timestamp:
            payload["timestamp"] = _timestamp()
        payload["level"] = record.levelname
        payload["logger"] = record.name
        payload["message"] = record.getMessage()

        context = get_current_context().to_dict()
        if context:
            payload["context"] = context

        data = getattr(record, "extra", None)
        if data:
            payload["data"] = data

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """Terminal format: time, level, logger, [context]: message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        context = get_current_context()
        parts = []
        if context.type_name:
            parts.append(f"type={context.type_name}")
        if context.table:
            parts.append(f"table={context.table}")
        if context.field_name:
            parts.append(f"field={context.field_name}")
        where = f" [{', '.join(parts)}]" if parts else ""

        line = f"{timestamp} {record.levelname.ljust(8)} {record.name}{where}: {record.getMessage()}"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


class ContextLogger(logging.LoggerAdapter):
    """
    Adapter that attaches the logger's component, the current context and
    any per-call extra as a single `extra` attribute on the record.
    """

    def process(self, msg, kwargs):
        data = {k: v for k, v in self.extra.items() if v is not None}
        data.update(get_current_context().to_dict())
        data.update(kwargs.get("extra") or {})
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(name: str, component: Optional[ComponentType] = None) -> ContextLogger:
    """Context-aware logger; component is recorded on every record."""
    return ContextLogger(
        logging.getLogger(name),
        {"component": component.value if component else None},
    )


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Replace the root handlers with one stream handler.

    Args:
        level: Log level name or number
        json_output: JSON lines (also enabled by LOG_FORMAT=json)
        stream: Output stream (default stdout)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_output or os.getenv("LOG_FORMAT", "").lower() == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = HumanFormatter()

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_checkpoint(name: str, data: Optional[Dict[str, Any]] = None) -> None:
    """
    Log a named milestone of a run ("synthesis_started", "schema_written")
    on the "checkpoint" logger, with the current type and table.
    """
    payload: Dict[str, Any] = {"checkpoint": name, "timestamp": _timestamp()}
    context = get_current_context()
    if context.type_name:
        payload["type_name"] = context.type_name
    if context.table:
        payload["table"] = context.table
    if data:
        payload["data"] = data
    logging.getLogger("checkpoint").info(f"CHECKPOINT: {name}", extra={"extra": payload})


__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
    "log_checkpoint",
]
