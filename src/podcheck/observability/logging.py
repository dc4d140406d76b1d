"""
Logging configuration for podcheck.

Warnings, per-pod errors and run summaries go through the standard
logging module under the "podcheck" logger, always to stderr so that
stdout carries only check records.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

# LogRecord attributes that are not user-supplied extra fields
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per log record.

    Useful when podcheck runs as a job whose stderr is shipped to a log
    aggregation system.
    """

    def __init__(
        self,
        include_timestamp: bool = True,
        include_logger: bool = True,
        extra_fields: dict[str, Any] | None = None,
    ):
        """
        Initialize structured formatter.

        Args:
            include_timestamp: Include timestamp in output
            include_logger: Include logger name in output
            extra_fields: Additional fields to include in every log
        """
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_logger = include_logger
        self.extra_fields = extra_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {}

        if self.include_timestamp:
            log_data["timestamp"] = (
                datetime.fromtimestamp(record.created, tz=timezone.utc)
                .isoformat()
                .replace("+00:00", "Z")
            )

        log_data["level"] = record.levelname.lower()

        if self.include_logger:
            log_data["logger"] = record.name

        log_data["message"] = record.getMessage()

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                log_data[key] = value

        log_data.update(self.extra_fields)

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Formatter that outputs one plain line per log record."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(
        self,
        use_colors: bool = False,
        include_timestamp: bool = False,
    ):
        """
        Initialize human-readable formatter.

        Args:
            use_colors: Use ANSI colors for the level name
            include_timestamp: Prefix each line with a UTC timestamp
        """
        super().__init__()
        self.use_colors = use_colors
        self.include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as human-readable text."""
        parts = []

        if self.include_timestamp:
            timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
            parts.append(f"[{timestamp.strftime('%Y-%m-%d %H:%M:%S')}]")

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level = f"{self.COLORS[level]}{level}{self.RESET}"
        parts.append(f"{level}:")

        parts.append(record.getMessage())

        output = " ".join(parts)

        if record.exc_info:
            output += "\n" + self.formatException(record.exc_info)

        return output


class PodcheckLogger:
    """
    Wrapper around a standard logger with podcheck domain events.

    Context fields set on the wrapper are attached to every record as
    extra fields, which the structured formatter emits as JSON keys.
    """

    def __init__(self, name: str, level: int | None = None):
        """
        Initialize podcheck logger.

        Args:
            name: Logger name
            level: Optional level override (default: inherit)
        """
        self.logger = logging.getLogger(name)
        if level is not None:
            self.logger.setLevel(level)
        self._context: dict[str, Any] = {}

    def set_context(self, **kwargs: Any) -> None:
        """Set persistent context fields for all logs."""
        self._context.update(kwargs)

    def clear_context(self) -> None:
        """Clear context fields."""
        self._context.clear()

    def _log(
        self,
        level: int,
        message: str,
        exc_info: bool = False,
        **kwargs: Any,
    ) -> None:
        extra = {**self._context, **kwargs}
        self.logger.log(level, message, exc_info=exc_info, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def source_loaded(self, resource: str, origin: str, count: int) -> None:
        """Log that a resource collection was loaded."""
        self.debug(
            f"Loaded {count} {resource} from {origin}",
            event_type="source.loaded",
            resource=resource,
            origin=origin,
            count=count,
        )

    def check_started(self, check_name: str, pod_count: int) -> None:
        """Log check start event."""
        self.debug(
            f"Running check {check_name} over {pod_count} pods",
            event_type="check.started",
            check_name=check_name,
            pod_count=pod_count,
        )

    def join_warning(self, pod_namespace: str, pod_name: str) -> None:
        """Log a pod whose namespace is unknown."""
        self.warning(
            f"namespace {pod_namespace} not found for pod {pod_name}",
            event_type="check.join_warning",
            pod_namespace=pod_namespace,
            pod_name=pod_name,
        )

    def pod_error(self, pod_namespace: str, pod_name: str, error: str) -> None:
        """Log a check failure for one pod."""
        self.error(
            f"error checking pod {pod_namespace}/{pod_name}: {error}",
            event_type="check.pod_error",
            pod_namespace=pod_namespace,
            pod_name=pod_name,
            error=error,
        )

    def check_completed(self, summary: dict[str, Any]) -> None:
        """Log check completion event."""
        self.info(
            f"Check {summary['check']} complete: {summary['pods_seen']} pods, "
            f"{summary['lines_emitted']} lines, {summary['join_warnings']} warnings, "
            f"{summary['errors']} errors, {summary['duration_seconds']:.2f}s",
            event_type="check.completed",
            **{f"summary_{k}": v for k, v in summary.items()},
        )


def configure_logging(
    level: str | None = None,
    format: str | None = None,
    stream: TextIO | None = None,
    extra_fields: dict[str, Any] | None = None,
) -> None:
    """
    Configure logging for podcheck.

    Args:
        level: Log level name (default: PODCHECK_LOG_LEVEL or WARNING)
        format: Output format, human or json (default: PODCHECK_LOG_FORMAT or human)
        stream: Output stream (default: stderr)
        extra_fields: Extra fields to include in structured logs
    """
    level = (level or os.getenv("PODCHECK_LOG_LEVEL") or "WARNING").upper()
    format = format or os.getenv("PODCHECK_LOG_FORMAT") or "human"
    stream = stream or sys.stderr

    root_logger = logging.getLogger("podcheck")
    root_logger.setLevel(getattr(logging, level, logging.WARNING))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    if format == "json":
        handler.setFormatter(StructuredFormatter(extra_fields=extra_fields))
    else:
        handler.setFormatter(
            HumanReadableFormatter(use_colors=hasattr(stream, "isatty") and stream.isatty())
        )
    root_logger.addHandler(handler)


def get_logger(name: str) -> PodcheckLogger:
    """
    Get a podcheck logger instance.

    Args:
        name: Logger name relative to "podcheck"

    Returns:
        PodcheckLogger instance
    """
    return PodcheckLogger(f"podcheck.{name}")
