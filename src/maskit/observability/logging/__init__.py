"""Observability – structlog wiring and masking processor."""
from maskit.observability.logging.factory import JsonLoggerFactory
from maskit.observability.logging.processors import MaskingProcessor, get_logger

__all__ = ["JsonLoggerFactory", "MaskingProcessor", "get_logger"]
