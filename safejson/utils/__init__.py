"""
safejson configuration.
"""

from .config import (
    EncoderSettings,
    ErrorReporting,
    ParseLimits,
    SafeJSONConfig,
    SizeLimits,
    StructureLimits,
)

__all__ = [
    'SafeJSONConfig', 'ParseLimits', 'SizeLimits', 'StructureLimits',
    'EncoderSettings', 'ErrorReporting',
]
