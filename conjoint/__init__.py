"""
Conjoint Package

A lexer and recursive descent parser for Conjoint, a small declarative
language with import declarations, typed variable declarations and line
comments.

Architecture:
    conjoint/
    ├── source.py        # Source file loading
    ├── lexer/           # Tokenization with position tracking
    ├── parser/          # Syntax analysis and AST generation
    ├── printer.py       # Token and AST dumps
    └── cli.py           # Command line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .source import SourceFile, SourceFileError, read_source_file
from .lexer import Lexer, Token, TokenType, SourceLocation, LexerError
from .parser import Parser, Program, ParseError, parse_string, parse_file

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "SourceLocation",
    "Program",
    "SourceFile",

    # Entry points
    "read_source_file",
    "parse_string",
    "parse_file",

    # Errors
    "LexerError",
    "ParseError",
    "SourceFileError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
