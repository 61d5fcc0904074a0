"""
Coercion of arbitrary text to interchange-valid UTF-8.

Interchange-valid text contains no invalid encodings, no unpaired surrogates,
no control characters other than tab, line feed and carriage return, and no
Unicode noncharacters. Such text survives any UTF-8 text-processing boundary
and is legal in both JSON and XML.
"""

import re
from typing import Union

from .constants import (
    ALLOWED_CONTROL_CHARACTERS,
    JSON_STRING_ESCAPES,
    REPLACEMENT_CHARACTER,
)


def _build_invalid_pattern() -> "re.Pattern[str]":
    ranges = [
        "\x00-\x08",
        "\x0b\x0c",
        "\x0e-\x1f",
        "\x7f-\x9f",
        "\ud800-\udfff",
        "\ufdd0-\ufdef",
    ]
    # U+xFFFE and U+xFFFF are noncharacters in every plane.
    for plane in range(17):
        base = plane << 16
        ranges.append(chr(base | 0xFFFE) + chr(base | 0xFFFF))
    return re.compile("[" + "".join(ranges) + "]")


_INVALID_CHARACTERS = _build_invalid_pattern()
_JSON_STRING_SPECIALS = re.compile(
    "[" + re.escape("".join(JSON_STRING_ESCAPES)) + "]"
)


def is_interchange_valid(char: str) -> bool:
    """Return True if the single character ``char`` is interchange-valid."""
    code = ord(char)
    if code < 0x20:
        return char in ALLOWED_CONTROL_CHARACTERS
    if 0x7F <= code <= 0x9F:
        return False
    if 0xD800 <= code <= 0xDFFF:
        return False
    if 0xFDD0 <= code <= 0xFDEF:
        return False
    return code & 0xFFFE != 0xFFFE


def coerce_to_interchange_valid(text: Union[str, bytes, bytearray]) -> str:
    """
    Coerce text to interchange-valid UTF-8.

    Bytes are decoded as UTF-8 with invalid sequences replaced by U+FFFD.
    Every character that is not interchange-valid is then replaced by U+FFFD.
    Never fails.

    Args:
        text: Arbitrary text or UTF-8 bytes

    Returns:
        Interchange-valid text
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    elif not isinstance(text, str):
        raise TypeError(
            f"Expected str or bytes, got {type(text).__name__}"
        )
    return _INVALID_CHARACTERS.sub(REPLACEMENT_CHARACTER, text)


def escape_json_string_body(text: str) -> str:
    """Escape text for use as the contents of a double-quoted JSON string."""
    return _JSON_STRING_SPECIALS.sub(
        lambda match: JSON_STRING_ESCAPES[match.group(0)], text
    )
