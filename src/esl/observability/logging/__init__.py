"""Observability – structured logging helpers."""
from esl.observability.logging.factory import JsonLoggerFactory
from esl.observability.logging.processors import PAYLOAD_FIELDS, PayloadRedactor, get_logger

__all__ = [
    "PAYLOAD_FIELDS",
    "JsonLoggerFactory",
    "PayloadRedactor",
    "get_logger",
]
