"""
Error handling for the Conjoint lexer.

Lexing stops at the first fault: every error is raised as a LexerError
carrying a diagnostic with the source location of the offending lexeme.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single error report with its location."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters malformed input.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L003": "Malformed character literal",
    "L004": "Unexpected character for scan routine",
}


def _describe(char: str) -> str:
    if char.isprintable():
        return repr(char)
    return f"U+{ord(char):04X}"


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no token can start with."""
    return LexerError(
        message=f"Invalid character: {_describe(char)}",
        location=location,
        code="L001",
        help_text="Only letters, digits, quotes, '#' and the language punctuators may start a token."
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text="String literals must be closed with a matching '\"' quote."
    )


def create_malformed_character_error(reason: str, location: SourceLocation) -> LexerError:
    """Create an error for a character literal that is not exactly one character."""
    return LexerError(
        message=f"Malformed character literal: {reason}",
        location=location,
        code="L003",
        help_text="Character literals hold exactly one character between single quotes; escapes are not supported."
    )


def create_unexpected_character_error(expected: str, found: Optional[str],
                                      location: SourceLocation) -> LexerError:
    """Create an error for a scan routine entered on the wrong character."""
    found_str = "end of input" if found is None else _describe(found)
    return LexerError(
        message=f"Expected {expected}, found {found_str}",
        location=location,
        code="L004"
    )
