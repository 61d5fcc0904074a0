"""
safejson - JSON text that is safe by construction.

safejson provides SafeJSON, an immutable string type whose values are safe to
emit into JSON-consuming destinations: a <script> block, a DOM property that
evaluates JSON, or the JSON region of a template. The guarantee comes from how
a value is built, so emission code can trust any SafeJSON it receives.

Key Features:
- Literal construction for text the program author wrote
- Parse-and-re-emit construction for untrusted JSON text
- Escaped construction for untrusted text placed inside a JSON string
- Script-safe canonical output: <, >, & and U+2028/U+2029 are always escaped
- Security limits to prevent resource exhaustion attacks
- A static check that keeps runtime strings out of literal construction

Quick Start:
    import safejson

    config_blob = safejson.json_from_constant('{"theme": "dark"}')
    payload = safejson.json_from_value(request_body)   # raises ParseError
    name = safejson.json_escaped(user_name)

    page = f'<script type="application/json">{payload}</script>'

    # Result/error pair instead of an exception
    value, error = safejson.try_json_from_value(request_body)
"""

from .core.interfaces import JSONer, as_safe_json
from .core.safe_json import (
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
from .security.exceptions import (
    ParseError,
    SafeJSONError,
    SecurityError,
    SerializationError,
)
from .utils.config import (
    EncoderSettings,
    ErrorReporting,
    ParseLimits,
    SafeJSONConfig,
    SizeLimits,
    StructureLimits,
)

__version__ = "0.1.0"
__author__ = "safejson contributors"

__all__ = [
    # Value type and capability
    "SafeJSON", "JSONer", "as_safe_json",
    # Constructors
    "json_from_constant", "json_from_value", "try_json_from_value",
    "json_escaped", "json_string", "json_concat",
    "empty_object_json", "empty_array_json",
    # Canonical values
    "ZERO", "EMPTY_OBJECT", "EMPTY_ARRAY",
    # Configuration classes
    "SafeJSONConfig", "ParseLimits", "SizeLimits", "StructureLimits",
    "EncoderSettings", "ErrorReporting",
    # Exception classes
    "SafeJSONError", "ParseError", "SerializationError", "SecurityError",
]
