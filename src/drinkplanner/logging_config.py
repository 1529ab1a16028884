"""Structured logging configuration for the drinkplanner application."""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

# Recipe being rendered, attached to every record logged while it is set
recipe_id_ctx: ContextVar[str | None] = ContextVar("recipe_id", default=None)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StructuredJsonFormatter(logging.Formatter):
    """One JSON object per record, for production log collection."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": _utcnow().strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if recipe_id := recipe_id_ctx.get():
            log_data["recipe_id"] = recipe_id

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        # Keep fraction glyphs readable
        return json.dumps(log_data, ensure_ascii=False)


class ContextualFormatter(logging.Formatter):
    """Single-line text format for local development."""

    def format(self, record: logging.LogRecord) -> str:
        recipe_id = recipe_id_ctx.get()
        context_str = f" [recipe={recipe_id}]" if recipe_id else ""

        timestamp = _utcnow().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)

        formatted = f"{timestamp} | {level} | {record.name}{context_str} | {record.getMessage()}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Adapter that copies the current recipe id into each record."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})
        if recipe_id := recipe_id_ctx.get():
            extra["recipe_id"] = recipe_id
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(log_level: str = "INFO", json_format: bool | None = None) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Minimum log level; LOG_LEVEL in the environment wins.
        json_format: Force JSON output. If None, JSON is used when
            LOG_FORMAT=json or when running non-interactively in production.
    """
    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "").lower() == "json" or (
            not sys.stdout.isatty() and os.getenv("ENVIRONMENT", "development") == "production"
        )

    level_str = os.getenv("LOG_LEVEL", log_level).upper()
    level = getattr(logging, level_str, logging.INFO)

    formatter: logging.Formatter = StructuredJsonFormatter() if json_format else ContextualFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    # Quiet the server and test client
    for module_name, module_level in {
        "drinkplanner": level,
        "httpx": logging.WARNING,
        "uvicorn": logging.INFO,
        "uvicorn.access": logging.WARNING,
    }.items():
        logging.getLogger(module_name).setLevel(module_level)

    get_logger(__name__).info(
        f"Logging configured: level={level_str}, format={'json' if json_format else 'text'}"
    )


class LoggingContext:
    """Attach a recipe id to log records for the duration of a block."""

    def __init__(self, recipe_id: str | None = None):
        self.recipe_id = recipe_id
        self._token: Any = None

    def __enter__(self) -> "LoggingContext":
        if self.recipe_id is not None:
            self._token = recipe_id_ctx.set(self.recipe_id)
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            recipe_id_ctx.reset(self._token)
            self._token = None
