"""
Error handling for the TinyScript lexer.

Provides error reporting with source location information and
suggestions for the most common mistakes.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, INT64_MAX


@dataclass
class Diagnostic:
    """A single lexer diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # always "error" for lexer failures
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot turn the input into tokens.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def offset(self) -> int:
        return self.diagnostic.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class InvalidCharacterError(LexerError):
    """A character outside every recognized class."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(f"Invalid character: {char!r}", location, code="L001", **kwargs)
        self.char = char


class NumericOverflowError(LexerError):
    """A digit run that does not fit a signed 64-bit integer."""

    def __init__(self, lexeme: str, location: SourceLocation, **kwargs):
        super().__init__(f"Number literal overflow: {lexeme!r}", location, code="L002", **kwargs)
        self.lexeme = lexeme


class ErrorRecovery:
    """
    Suggestion helpers used when reporting lexer errors.
    """

    @staticmethod
    def suggest_operator_alternatives(char: str) -> List[str]:
        """Suggest TinyScript spellings for operators borrowed from other languages."""
        alternatives = {
            '!': ['not', '=='],
            '&': ['and'],
            '|': ['or'],
            '"': ["'"],
            '^': ['**'],
        }

        return alternatives.get(char, [])


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Number literal overflow",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> InvalidCharacterError:
    """Create an error for an invalid character."""
    suggestions = ErrorRecovery.suggest_operator_alternatives(char)

    if suggestions:
        help_text = f"TinyScript spells this differently, try: {', '.join(suggestions)}"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in TinyScript source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return InvalidCharacterError(
        char,
        location,
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_numeric_overflow_error(lexeme: str, location: SourceLocation) -> NumericOverflowError:
    """Create an error for an integer literal outside the signed 64-bit range."""
    return NumericOverflowError(
        lexeme,
        location,
        help_text=f"Integer literals must be at most {INT64_MAX}.",
    )
