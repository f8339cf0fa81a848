"""Logging helpers for the spatial index."""

from .structured_logger import StructuredLogger, get_logger, session_context
from .setup import setup_logging

__all__ = [
    'StructuredLogger',
    'get_logger',
    'session_context',
    'setup_logging',
]
