"""Observability – structured logging."""

from esl.observability.logging import JsonLoggerFactory, PayloadRedactor, get_logger

__all__ = ["JsonLoggerFactory", "PayloadRedactor", "get_logger"]
