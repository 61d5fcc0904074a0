"""
Exception hierarchy and error reporting for safejson.

Errors raised while validating untrusted input carry an optional position,
a short excerpt of the surrounding text and suggestions for fixing the input.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


@dataclass
class ErrorContext:
    """Excerpt of the input surrounding an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class SafeJSONError(Exception):
    """Base class for all safejson errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message

        if self.position:
            msg += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            msg += f"\n\nContext:\n  {self.context.line_text}\n  {self.context.column_indicator}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class ParseError(SafeJSONError):
    """Input is not syntactically valid JSON."""


class SerializationError(SafeJSONError):
    """A parsed value tree could not be serialized back into JSON text."""


class SecurityError(SafeJSONError):
    """Input exceeds a configured resource limit."""


class ErrorReporter:
    """Builds errors with context excerpts for a given input text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def build_context(self, position: Position) -> ErrorContext:
        """Build an excerpt around ``position``, clamped to the input bounds."""
        line_index = min(max(position.line - 1, 0), len(self.lines) - 1)
        line_text = self.lines[line_index]
        column_index = min(max(position.column - 1, 0), len(line_text))

        half = self.max_context // 2
        start = max(0, column_index - half)
        end = min(len(line_text), column_index + half)

        excerpt = line_text[start:end]
        error_char = line_text[column_index] if column_index < len(line_text) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=line_text[start:column_index],
            context_after=line_text[column_index:end],
            error_char=error_char,
            line_text=excerpt,
            column_indicator=" " * (column_index - start) + "^",
        )

    def create_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
    ) -> ParseError:
        """Create a ParseError with a context excerpt."""
        context = self.build_context(position)
        if suggestions is None:
            suggestions = ErrorSuggestionEngine.suggest_for_message(
                message, context.error_char
            )
        return ParseError(message, position, context, suggestions)

    def create_security_error(self, message: str) -> SecurityError:
        """Create a SecurityError.

        No excerpt is attached: the input is too large or too deep to be worth
        echoing back.
        """
        return SecurityError(message)


class ErrorSuggestionEngine:
    """Suggestions for the mistakes most often found in hand-written JSON."""

    @staticmethod
    def suggest_for_unexpected_token(char: str) -> list[str]:
        suggestions = []
        if char == "'":
            suggestions.append("Use double quotes instead of single quotes")
        elif char and char in "}]":
            suggestions.append("Remove the trailing comma before the closing bracket")
        elif char == '"':
            suggestions.append("Check for a missing comma or colon before the quote")
        elif char.isalpha():
            suggestions.append("Object keys and string values must be double-quoted")
        if not suggestions:
            suggestions.append("Check the JSON syntax near this position")
        return suggestions

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        if structure_type == "object":
            return ["Add a closing brace '}' to end the object"]
        if structure_type == "array":
            return ["Add a closing bracket ']' to end the array"]
        if structure_type == "string":
            return ['Add a closing double quote \'"\' to end the string']
        return []

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        suggestions = []
        lowered = value.lower()
        if value in ("True", "False"):
            suggestions.append(f"Use lowercase '{lowered}' for JSON booleans")
        elif value == "None":
            suggestions.append("Use 'null' instead of 'None'")
        elif lowered in ("nan", "infinity", "-infinity"):
            suggestions.append("NaN and Infinity are not valid JSON; use null or a string")
        elif lowered == "undefined":
            suggestions.append("Use 'null' instead of 'undefined'")
        return suggestions

    @classmethod
    def suggest_for_message(cls, message: str, error_char: str) -> list[str]:
        """Map a stdlib decoder message onto suggestions."""
        if message.startswith("Unterminated string"):
            return cls.suggest_for_unclosed_structure("string")
        if message.startswith("Non-standard constant"):
            return cls.suggest_for_invalid_value(message.rsplit(" ", 1)[-1])
        if message.startswith("Illegal trailing comma"):
            return cls.suggest_for_unexpected_token("}")
        if message.startswith("Expecting property name"):
            return cls.suggest_for_unexpected_token(error_char or "}")
        if message.startswith("Expecting ',' delimiter") and not error_char:
            return cls.suggest_for_unclosed_structure("array")
        if message.startswith("Expecting ',' delimiter"):
            return cls.suggest_for_unexpected_token(error_char)
        if message.startswith("Expecting value") and error_char:
            return cls.suggest_for_unexpected_token(error_char)
        if message.startswith("Extra data"):
            return ["Only one top-level JSON value is allowed"]
        return []
