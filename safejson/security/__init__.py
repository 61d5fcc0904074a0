"""
safejson Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    ErrorReporter,
    ParseError,
    SafeJSONError,
    SecurityError,
    SerializationError,
)
from .limits import LimitValidator

__all__ = [
    'SafeJSONError', 'ParseError', 'SerializationError', 'SecurityError',
    'ErrorReporter', 'LimitValidator',
]
