"""
Strict parsing and canonical, script-safe encoding of JSON value trees.

Parsing and encoding are delegated to the standard json module. This module
only narrows the parser to strict JSON and rewrites encoder output so it is
safe to place inside HTML and <script> contexts.
"""

import json
import math
import re
from typing import Any, NoReturn, Optional

from ..utils.config import EncoderSettings
from .constants import CANONICAL_SEPARATORS, REPLACEMENT_CHARACTER, SCRIPT_SAFE_ESCAPES


class _RejectedToken(ValueError):
    """Raised from parser hooks for tokens strict JSON does not allow."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.message = message
        self.token = token


def _reject_constant(name: str) -> NoReturn:
    raise _RejectedToken(f"Non-standard constant {name}", name)


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise _RejectedToken(f"Number out of range {literal[:32]}", literal)
    return value


_STRICT_DECODER = json.JSONDecoder(
    parse_constant=_reject_constant,
    parse_float=_parse_finite_float,
)


def _build_script_unsafe_pattern() -> "re.Pattern[str]":
    ranges = [
        r"&<>\u2028\u2029",
        # Lone surrogates
        r"\ud800-\udfff",
        # Characters outside the interchange set that json.dumps leaves raw
        r"\x7f-\x9f\ufdd0-\ufdef",
    ]
    for plane in range(17):
        base = plane << 16
        ranges.append(f"\\U{base | 0xFFFE:08x}\\U{base | 0xFFFF:08x}")
    return re.compile("[" + "".join(ranges) + "]")


_SCRIPT_UNSAFE = _build_script_unsafe_pattern()
_NON_ASCII = re.compile("[^\x00-\x7f]")


def _find_outside_strings(text: str, token: str) -> int:
    """
    Index of the first occurrence of ``token`` outside string literals.

    Returns len(text) when there is none, so the error points at end of input.
    """
    in_string = False
    escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif text.startswith(token, index):
            return index
    return len(text)


def strict_loads(text: str) -> Any:
    """
    Parse text as strict JSON into a generic value tree.

    NaN, Infinity and numbers that overflow a float are rejected.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
    """
    try:
        return _STRICT_DECODER.decode(text)
    except _RejectedToken as exc:
        position = _find_outside_strings(text, exc.token)
        raise json.JSONDecodeError(exc.message, text, position) from None
    except json.JSONDecodeError:
        raise
    except ValueError as exc:
        # int() refuses literals over sys.get_int_max_str_digits()
        raise json.JSONDecodeError(str(exc), text, 0) from None


def _escape_script_unsafe(match: "re.Match[str]") -> str:
    char = match.group(0)
    if char in SCRIPT_SAFE_ESCAPES:
        return SCRIPT_SAFE_ESCAPES[char]
    if 0xD800 <= ord(char) <= 0xDFFF:
        return REPLACEMENT_CHARACTER
    return _escape_non_ascii(match)


def _escape_non_ascii(match: "re.Match[str]") -> str:
    code = ord(match.group(0))
    if code < 0x10000:
        return f"\\u{code:04x}"
    code -= 0x10000
    high = 0xD800 | (code >> 10)
    low = 0xDC00 | (code & 0x3FF)
    return f"\\u{high:04x}\\u{low:04x}"


def make_script_safe(text: str, ensure_ascii: bool = False) -> str:
    """
    Rewrite encoder output so it cannot break out of a script or HTML context.

    ``& < >``, the JavaScript line terminators, DEL, C1 controls and Unicode
    noncharacters become \\u escapes and lone surrogates become U+FFFD, so the
    text stays interchange-valid. The input must be json.dumps output, where
    these characters can only appear inside string literals.
    """
    text = _SCRIPT_UNSAFE.sub(_escape_script_unsafe, text)
    if ensure_ascii:
        text = _NON_ASCII.sub(_escape_non_ascii, text)
    return text


def canonical_dumps(value: Any, settings: Optional[EncoderSettings] = None) -> str:
    """
    Serialize a value tree into compact, script-safe JSON text.

    Raises:
        TypeError: If the tree holds a value JSON cannot represent
        ValueError: If the tree holds NaN or Infinity, or is circular
    """
    settings = settings or EncoderSettings()
    text = json.dumps(
        value,
        ensure_ascii=False,
        allow_nan=False,
        sort_keys=settings.sort_keys,
        separators=CANONICAL_SEPARATORS,
    )
    return make_script_safe(text, ensure_ascii=settings.ensure_ascii)
