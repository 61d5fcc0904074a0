"""
SafeJSON - an immutable string type that is safe to use in JSON contexts.

A SafeJSON value guarantees that its text will not cause untrusted script
execution when evaluated as JSON in a browser: it is safe to assign to a
script-consuming DOM property or to interpolate into the JSON region of a
template without creating a Cross-site Scripting (XSS) vulnerability.

The guarantee comes from how values are constructed, not from a check at use
time. Every constructor in this module either takes text the program author
wrote (a literal) or passes its input through a validating or normalizing
transform:

    json_from_constant('{"version": 1}')    # literal, trusted verbatim
    json_from_value(request_body)           # parsed and re-emitted, may fail
    json_escaped(user_name)                 # escaped string contents, total
    json_concat(a, b)                       # trusted in, trusted out

SafeJSON cannot be instantiated directly, so arbitrary runtime strings cannot
be wrapped without going through one of these paths.
"""

import json
import logging
from typing import LiteralString, NoReturn, Optional, Union, final

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    Position,
    SafeJSONError,
    SecurityError,
    SerializationError,
)
from ..security.limits import LimitValidator
from ..utils.config import SafeJSONConfig
from .codec import canonical_dumps, strict_loads
from .constants import EMPTY_ARRAY_TEXT, EMPTY_OBJECT_TEXT
from .interchange import coerce_to_interchange_valid, escape_json_string_body

logger = logging.getLogger(__name__)

TextInput = Union[str, bytes, bytearray]


@final
class SafeJSON:
    """
    An immutable string-like value that is safe to use in JSON contexts.

    Obtain values from the module's constructor functions. ``str(value)``
    returns the wrapped text for emission; the text must not be re-wrapped
    without going through a constructor again.
    """

    __slots__ = ("_text",)

    _text: str

    def __init__(self, *_args: object, **_kwargs: object) -> None:
        raise TypeError(
            "SafeJSON cannot be constructed directly; use json_from_constant(), "
            "json_from_value(), json_escaped() or json_concat()"
        )

    def __init_subclass__(cls, **kwargs: object) -> None:
        raise TypeError("SafeJSON cannot be subclassed")

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("SafeJSON values are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("SafeJSON values are immutable")

    def __str__(self) -> str:
        return self._text

    def string(self) -> str:
        """Return the plain text form of the value."""
        return self._text

    def to_safe_json(self) -> "SafeJSON":
        return self

    def __repr__(self) -> str:
        return f"SafeJSON({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeJSON):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash((SafeJSON, self._text))

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __add__(self, other: object) -> "SafeJSON":
        if not isinstance(other, SafeJSON):
            return NotImplemented
        return json_concat(self, other)

    def __copy__(self) -> "SafeJSON":
        return self

    def __deepcopy__(self, _memo: object) -> "SafeJSON":
        return self

    def __reduce__(self) -> NoReturn:
        # Unpickling would be a construction path from arbitrary text.
        raise TypeError("SafeJSON values cannot be pickled")


def _wrap(text: str) -> SafeJSON:
    value = object.__new__(SafeJSON)
    object.__setattr__(value, "_text", text)
    return value


ZERO = _wrap("")
EMPTY_OBJECT = _wrap(EMPTY_OBJECT_TEXT)
EMPTY_ARRAY = _wrap(EMPTY_ARRAY_TEXT)


def json_from_constant(text: LiteralString) -> SafeJSON:
    """
    Wrap a string literal written by the program author, without validation.

    The LiteralString annotation makes type checkers reject runtime-computed
    strings; ``safejson-literal-check`` enforces the same rule for code that
    is not type-checked.

    Raises:
        TypeError: If text is not exactly a str
    """
    if type(text) is not str:
        raise TypeError(
            f"json_from_constant() requires a str literal, got {type(text).__name__}"
        )
    return _wrap(text)


def _decode_input(text: TextInput) -> str:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    if not isinstance(text, str):
        raise TypeError(
            f"json_from_value() requires str or bytes, got {type(text).__name__}"
        )
    return text


def _to_parse_error(
    exc: json.JSONDecodeError, text: str, config: SafeJSONConfig
) -> ParseError:
    assert config.error_reporting is not None
    position = Position(line=exc.lineno, column=exc.colno)
    if config.error_reporting.include_context:
        reporter = ErrorReporter(text, config.error_reporting.max_error_context)
        return reporter.create_parse_error(exc.msg, position)
    return ParseError(
        exc.msg,
        position,
        suggestions=ErrorSuggestionEngine.suggest_for_message(exc.msg, ""),
    )


def json_from_value(
    text: TextInput, config: Optional[SafeJSONConfig] = None
) -> SafeJSON:
    """
    Build a SafeJSON by parsing text and re-emitting it as canonical JSON.

    Round-tripping through the parser guarantees the result is well-formed
    JSON; the encoder escapes ``& < >`` and the JavaScript line terminators
    inside strings so a ``</script>`` in the input survives only as data.

    Args:
        text: Untrusted JSON text, or UTF-8 bytes
        config: Optional SafeJSONConfig for limits, encoding and logging

    Returns:
        SafeJSON holding the canonical form of text

    Raises:
        ParseError: If text is not valid JSON
        SecurityError: If text exceeds the configured limits
        SerializationError: If the parsed value cannot be re-serialized
        TypeError: If text is not str or bytes
    """
    config = config or SafeJSONConfig()
    log = config.logger or logger
    text = _decode_input(text)
    assert config.limits is not None

    validator = LimitValidator(config.limits)
    try:
        validator.validate_input_size(text)
        validator.validate_nesting_text(text)

        try:
            value = strict_loads(text)
        except json.JSONDecodeError as exc:
            raise _to_parse_error(exc, text, config) from exc
        except RecursionError as exc:
            raise SecurityError("Input nesting exceeds the parser recursion limit") from exc

        validator.validate_tree(value)

        try:
            canonical = canonical_dumps(value, config.encoder)
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(f"Could not re-serialize parsed JSON: {exc}") from exc
    except SafeJSONError as exc:
        where = f" at line {exc.position.line}, column {exc.position.column}" if exc.position else ""
        log.debug(f"Rejected JSON input of length {len(text)}: {type(exc).__name__}{where}")
        raise

    return _wrap(canonical)


def try_json_from_value(
    text: TextInput, config: Optional[SafeJSONConfig] = None
) -> tuple[SafeJSON, Optional[SafeJSONError]]:
    """
    Like json_from_value(), but report failure as a (value, error) pair.

    On failure the value is ZERO and must not be used.
    """
    try:
        return json_from_value(text, config), None
    except SafeJSONError as exc:
        return ZERO, exc


def json_escaped(text: TextInput) -> SafeJSON:
    """
    Build a SafeJSON holding text escaped as the contents of a JSON string.

    text is first coerced to interchange-valid UTF-8, so the result contains
    only characters legal in JSON and XML. ``"`` and ``\\`` are escaped as JSON
    requires, and ``& < > '`` plus the JavaScript line terminators are written
    as \\u escapes. The result carries no surrounding quotes; see
    json_string() for a complete JSON string. Never fails.
    """
    return _wrap(escape_json_string_body(coerce_to_interchange_valid(text)))


def json_string(text: TextInput) -> SafeJSON:
    """Build a SafeJSON holding text as a complete, double-quoted JSON string."""
    body = escape_json_string_body(coerce_to_interchange_valid(text))
    return _wrap(f'"{body}"')


def empty_object_json() -> SafeJSON:
    """Return an empty JSON object '{}' as SafeJSON."""
    return EMPTY_OBJECT


def empty_array_json() -> SafeJSON:
    """Return an empty JSON array '[]' as SafeJSON."""
    return EMPTY_ARRAY


def json_concat(*values: SafeJSON) -> SafeJSON:
    """
    Return a SafeJSON containing, in order, the text of the given values.

    No separators are inserted and the result is not re-validated:
    ``json_concat(EMPTY_OBJECT, EMPTY_ARRAY)`` is ``{}[]``, which is not a
    single JSON document. Callers decide whether the fragments they join
    make sense together.

    Raises:
        TypeError: If any argument is not a SafeJSON
    """
    for index, value in enumerate(values):
        if not isinstance(value, SafeJSON):
            raise TypeError(
                f"json_concat() argument {index} must be SafeJSON, "
                f"not {type(value).__name__}"
            )
    return _wrap("".join(value._text for value in values))
