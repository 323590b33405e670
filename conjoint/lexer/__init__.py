"""
Conjoint Lexer Package

Implements the tokenizer for the Conjoint language: a pull-based cursor
that produces one token per call with start and end positions.

Key Features:
- Line comments, keywords, identifiers and five literal kinds
- Longest-match punctuators (">>>" before ">>" before ">")
- Zero-based line/column tracking, including inside string literals
- Stops at the first malformed lexeme with a LexerError

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "Diagnostic",
    "tokenize_string",
    "tokenize_file",
]
