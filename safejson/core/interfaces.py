"""
Core interfaces and protocols for safejson.

This module defines the capability a user-defined type implements to render
itself as SafeJSON, and the helper that consumes it.
"""

from typing import Any, Protocol, runtime_checkable

from .safe_json import SafeJSON


@runtime_checkable
class JSONer(Protocol):
    """Protocol for values that define their own safe JSON form."""

    def to_safe_json(self) -> SafeJSON:
        """Return the SafeJSON representation of this value."""
        ...


def as_safe_json(value: Any) -> SafeJSON:
    """
    Resolve a value to SafeJSON for emission.

    SafeJSON values are returned unchanged; JSONer values are asked for their
    representation.

    Raises:
        TypeError: If value is neither, or its to_safe_json() does not return
            a SafeJSON
    """
    if isinstance(value, SafeJSON):
        return value

    if isinstance(value, JSONer):
        result = value.to_safe_json()
        if not isinstance(result, SafeJSON):
            raise TypeError(
                f"{type(value).__name__}.to_safe_json() returned "
                f"{type(result).__name__}, expected SafeJSON"
            )
        return result

    raise TypeError(
        f"Expected SafeJSON or a JSONer, got {type(value).__name__}"
    )
