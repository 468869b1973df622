"""
Logging utilities for consistent logging setup across the client.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

CORRELATION_ID_FIELD = "x-log-correlation-id"


def setup_logger(logger: logging.Logger, log_level: int) -> None:
    """
    Set up a logger with a StreamHandler and standard formatter.

    Args:
        logger: The logger instance to configure
        log_level: The logging level to set
    """
    logger.setLevel(log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(log_level)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(log_level)


class RequestLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes records with request context."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        context = " ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"[{context}] {msg}", kwargs


def get_request_logger(logger: logging.Logger, **fields: Any) -> RequestLogger:
    """Return a logger carrying a fresh correlation id and the given fields."""
    extra = {CORRELATION_ID_FIELD: str(uuid.uuid4())}
    extra.update(fields)
    return RequestLogger(logger, extra)
