"""
Error handling for the Conjoint parser.

The parser does not recover: the first token that does not fit the grammar
raises a ParseError and no tree is produced.

Author: xwest
"""

from typing import Optional, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    `expected` describes what the grammar required and `found` is the
    lookahead token that was there instead.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        expected: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )
        self.token = token
        self.expected = expected

    @property
    def found(self) -> Optional[Token]:
        return self.token

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Invalid primary expression",
    "P003": "Unexpected top-level element",
    "P010": "Unexpected end of input",
}


def describe_token(token: Token) -> str:
    if token.type == TokenType.END_OF_FILE:
        return "end of input"
    return f"{token.type.display_name} {token.text!r}"


def _describe_expected(expected: Union[TokenType, str]) -> str:
    return expected.display_name if isinstance(expected, TokenType) else expected


def create_unexpected_eof_error(expected: str, found: Token) -> ParseError:
    """Create an error for input that ends in the middle of a construct."""
    return ParseError(
        message=f"Unexpected end of input, expected {expected}",
        location=found.location,
        token=found,
        code="P010",
        help_text=f"The parser reached the end of the file while expecting {expected}.",
        expected=expected
    )


def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for a token that does not match what the rule requires."""
    expected_str = _describe_expected(expected)
    if found.type == TokenType.END_OF_FILE:
        return create_unexpected_eof_error(expected_str, found)

    return ParseError(
        message=f"Expected {expected_str}, found {describe_token(found)}",
        location=found.location,
        token=found,
        code="P001",
        expected=expected_str
    )


def create_invalid_expression_error(found: Token) -> ParseError:
    """Create an error for an initializer that is neither an identifier nor a literal."""
    expected = "identifier or literal"
    if found.type == TokenType.END_OF_FILE:
        return create_unexpected_eof_error(expected, found)

    return ParseError(
        message=f"Invalid expression: expected {expected}, found {describe_token(found)}",
        location=found.location,
        token=found,
        code="P002",
        help_text="Variables can only be initialized with an identifier or a literal.",
        expected=expected
    )


def create_unexpected_element_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start a program element."""
    expected = "comment, 'import' or 'let'"
    return ParseError(
        message=f"Unexpected {describe_token(found)} at top level",
        location=found.location,
        token=found,
        code="P003",
        help_text=f"A program element must start with a {expected}.",
        expected=expected
    )
