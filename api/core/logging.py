"""Structured JSON logging shared by the engines and the API."""
from __future__ import annotations

import json
import logging
import logging.config
import logging.handlers
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseSettings):
    """Logging configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    sink: str = Field(default="stdout", alias="LOG_SINK")
    json_indent: Optional[int] = Field(default=None, alias="LOG_JSON_INDENT")
    timestamp_format: str = Field(default="iso", alias="LOG_TIMESTAMP_FORMAT")
    service: str = Field(default="rfp-qualification-engine", alias="SERVICE_NAME")

    @property
    def normalized_level(self) -> str:
        return self.level.upper()


_LOG_CONTEXT: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})
_applied_config: Optional[LoggingConfig] = None
_RESERVED_KEYS = {"exc_info", "stack_info", "stacklevel", "extra"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, merged with bound and per-call context."""

    def __init__(self, *, indent: Optional[int], timestamp_format: str,
                 service: Optional[str] = None) -> None:
        super().__init__()
        self.indent = indent
        self.timestamp_format = timestamp_format
        self.service = service

    def _format_timestamp(self, created: float) -> str:
        timestamp = datetime.fromtimestamp(created, tz=timezone.utc)
        if self.timestamp_format == "iso":
            return timestamp.isoformat()
        return timestamp.strftime(self.timestamp_format)

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self._format_timestamp(record.created),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if self.service:
            payload["service"] = self.service

        payload.update(_LOG_CONTEXT.get())

        record_context = getattr(record, "context_data", None)
        if record_context:
            payload.update(record_context)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, indent=self.indent, default=str)


def _resolve_handler(config: LoggingConfig) -> Dict[str, Any]:
    sink = config.sink.lower()
    handler: Dict[str, Any] = {"level": config.normalized_level, "formatter": "json"}

    if sink in ("stdout", "stderr"):
        handler.update({"class": "logging.StreamHandler", "stream": f"ext://sys.{sink}"})
    else:
        path = Path(config.sink).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler.update({"class": "logging.handlers.WatchedFileHandler", "filename": str(path)})
    return handler


def setup_logging(config: Optional[LoggingConfig] = None) -> LoggingConfig:
    """Route the root logger through the JSON formatter. Safe to call repeatedly."""

    global _applied_config

    if _applied_config is not None:
        return _applied_config
    config = config or LoggingConfig()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JSONFormatter,
                    "indent": config.json_indent,
                    "timestamp_format": config.timestamp_format,
                    "service": config.service,
                }
            },
            "handlers": {"default": _resolve_handler(config)},
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": config.normalized_level,
                    "propagate": False,
                }
            },
        }
    )

    _applied_config = config
    return config


class StructuredLogger(logging.LoggerAdapter):
    """Logger adapter accepting keyword context: ``logger.info("event", key=value)``."""

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(logger, extra or {})

    def bind(self, **kwargs: Any) -> "StructuredLogger":
        extra = dict(self.extra)
        extra.update(kwargs)
        return StructuredLogger(self.logger, extra)

    def process(self, msg: Any, kwargs: Dict[str, Any]) -> tuple[Any, Dict[str, Any]]:
        extra = kwargs.setdefault("extra", {})
        context_data = extra.setdefault("context_data", {})
        if self.extra:
            context_data.update(self.extra)

        for key in list(kwargs.keys()):
            if key in _RESERVED_KEYS:
                continue
            context_data[key] = kwargs.pop(key)

        return msg, kwargs

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        if not self.logger.isEnabledFor(level):
            return
        msg, kwargs = self.process(msg, kwargs)
        self.logger.log(level, msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name))


def bind_log_context(**values: Any) -> None:
    """Attach values (request id, method, path) to every record in the current context."""

    context = dict(_LOG_CONTEXT.get())
    context.update({key: value for key, value in values.items() if value is not None})
    _LOG_CONTEXT.set(context)


def clear_log_context(*keys: str) -> None:
    if not keys:
        _LOG_CONTEXT.set({})
        return

    context = dict(_LOG_CONTEXT.get())
    for key in keys:
        context.pop(key, None)
    _LOG_CONTEXT.set(context)


__all__ = [
    "JSONFormatter",
    "LoggingConfig",
    "StructuredLogger",
    "setup_logging",
    "get_logger",
    "bind_log_context",
    "clear_log_context",
]
