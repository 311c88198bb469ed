"""Structured logging configuration for dltmode."""

import logging
import sys
from typing import Optional, TextIO

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    pipeline_name: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure logging for dltmode.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        pipeline_name: Optional pipeline name added to every record
        stream: Stream the handler writes to (default: stderr)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("dltmode")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    if pipeline_name:
        handler.addFilter(_PipelineNameFilter(pipeline_name))
    logger.addHandler(handler)


class _PipelineNameFilter(logging.Filter):
    """Stamps records that carry no pipeline name with a default one."""

    def __init__(self, pipeline_name: str):
        super().__init__()
        self.pipeline_name = pipeline_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "pipeline_name"):
            record.pipeline_name = self.pipeline_name
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "pipeline_name"):
            parts.append(f"pipeline={record.pipeline_name}")

        if hasattr(record, "step_name"):
            parts.append(f"step={record.step_name}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)
