"""
Configuration and limits for safejson.

This module defines the security limits applied to untrusted input and the
settings of the canonical encoder.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional


# Strings, keys and items each take at least one input character, so the
# default length and count limits equal the input size limit.
DEFAULT_MAX_INPUT_SIZE = 10 * 1024 * 1024

# The stdlib parser and encoder recurse once per level; this stays well under
# the default interpreter recursion limit of 1000.
DEFAULT_MAX_NESTING_DEPTH = 500


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    max_string_length: int = DEFAULT_MAX_INPUT_SIZE


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    max_object_keys: int = DEFAULT_MAX_INPUT_SIZE
    max_array_items: int = DEFAULT_MAX_INPUT_SIZE
    max_total_items: int = DEFAULT_MAX_INPUT_SIZE


_SIZE_FIELDS = ("max_input_size", "max_string_length")
_STRUCTURE_FIELDS = (
    "max_nesting_depth", "max_object_keys", "max_array_items", "max_total_items"
)


@dataclass
class ParseLimits:
    """Security limits applied to input of parse-and-re-emit construction."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_args: Any,
    ):
        unknown = set(flat_args) - set(_SIZE_FIELDS) - set(_STRUCTURE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                **{k: v for k, v in flat_args.items() if k in _SIZE_FIELDS}
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                **{k: v for k, v in flat_args.items() if k in _STRUCTURE_FIELDS}
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual strings and object keys."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for JSON structures."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of keys in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items

    @property
    def max_total_items(self) -> int:
        """Maximum total items across all structures."""
        assert self.structure_limits is not None
        return self.structure_limits.max_total_items


@dataclass
class EncoderSettings:
    """Settings for the canonical encoder."""
    sort_keys: bool = True
    ensure_ascii: bool = False


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class SafeJSONConfig:
    """Configuration for parse-and-re-emit construction."""

    limits: Optional[ParseLimits] = None
    encoder: Optional[EncoderSettings] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        if self.limits is None:
            self.limits = ParseLimits()
        if self.encoder is None:
            self.encoder = EncoderSettings()
        if self.error_reporting is None:
            self.error_reporting = ErrorReporting()

    @classmethod
    def default(cls) -> "SafeJSONConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def strict(cls) -> "SafeJSONConfig":
        """Create a configuration with tight limits for request-sized input."""
        return cls(
            limits=ParseLimits(
                size_limits=SizeLimits(
                    max_input_size=1024 * 1024,
                    max_string_length=64 * 1024,
                ),
                structure_limits=StructureLimits(
                    max_nesting_depth=32,
                    max_object_keys=1000,
                    max_array_items=10000,
                    max_total_items=100000,
                ),
            ),
        )
