"""
safejson core value type.

This module provides SafeJSON and the functions that construct it.
"""

from .interfaces import JSONer, as_safe_json
from .safe_json import (
    EMPTY_ARRAY,
    EMPTY_OBJECT,
    ZERO,
    SafeJSON,
    empty_array_json,
    empty_object_json,
    json_concat,
    json_escaped,
    json_from_constant,
    json_from_value,
    json_string,
    try_json_from_value,
)

__all__ = [
    'SafeJSON', 'JSONer', 'as_safe_json',
    'json_from_constant', 'json_from_value', 'try_json_from_value',
    'json_escaped', 'json_string', 'json_concat',
    'empty_object_json', 'empty_array_json',
    'ZERO', 'EMPTY_OBJECT', 'EMPTY_ARRAY',
]
