"""
Token definitions for the Conjoint lexer.

This module defines the token types of the Conjoint language:
- Comments (line comments starting with '#')
- Keywords (let, import, from)
- Identifiers
- Punctuators (single, double and triple character operators)
- Literals (null, boolean, numeric, character, string)

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """Enumeration of all token types in Conjoint."""

    COMMENT = auto()                # # line comment
    KEYWORD = auto()                # let, import, from
    IDENTIFIER = auto()             # name, Int, value2
    PUNCTUATOR = auto()             # { } ; : = >>> etc.
    NULL_LITERAL = auto()           # null
    BOOLEAN_LITERAL = auto()        # true, false
    NUMERIC_LITERAL = auto()        # 42
    CHARACTER_LITERAL = auto()      # 'c'
    STRING_LITERAL = auto()         # "text"
    END_OF_FILE = auto()            # End of input

    @property
    def display_name(self) -> str:
        """Name used when printing tokens."""
        return self.name


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Lines and columns are zero-based; column is the distance from the
    start of the current line.
    """
    filename: str
    line: int
    column: int
    offset: int  # Code point offset from start of file

    def __str__(self) -> str:
        return f"{self.filename}:{self.line + 1}:{self.column + 1}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Conjoint language.

    `start` is captured before leading whitespace is skipped, `location`
    points at the first character of the lexeme and `end` just past it.
    """
    type: TokenType
    text: str
    start: SourceLocation
    end: SourceLocation
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.display_name}({self.text!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.text!r}, "
                f"{self.start!r}, {self.end!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    def is_keyword(self, text: Optional[str] = None) -> bool:
        """Check if this token is a keyword, optionally a specific one."""
        return self.type == TokenType.KEYWORD and (text is None or self.text == text)

    def is_punctuator(self, text: Optional[str] = None) -> bool:
        """Check if this token is a punctuator, optionally a specific one."""
        return self.type == TokenType.PUNCTUATOR and (text is None or self.text == text)


LITERAL_TYPES = frozenset({
    TokenType.NULL_LITERAL,
    TokenType.BOOLEAN_LITERAL,
    TokenType.NUMERIC_LITERAL,
    TokenType.CHARACTER_LITERAL,
    TokenType.STRING_LITERAL,
})

# Lookup tables used by the lexer once a word has been scanned

KEYWORDS = frozenset({"let", "import", "from"})

LITERAL_WORDS = {
    "null": TokenType.NULL_LITERAL,
    "true": TokenType.BOOLEAN_LITERAL,
    "false": TokenType.BOOLEAN_LITERAL,
}

# Punctuators, grouped by how the lexer tries them

SINGLE_PUNCTUATORS = frozenset("%()*+,-./:;?[]^{}~")

TRIPLE_PUNCTUATORS = frozenset({">>>"})

# "!=" plus any doubled character from this set
DOUBLED_PUNCTUATOR_CHARS = frozenset("<>&|=")
DOUBLE_PUNCTUATORS = frozenset({"!="} | {c * 2 for c in DOUBLED_PUNCTUATOR_CHARS})

FALLBACK_PUNCTUATORS = frozenset("<>=!&|")

PUNCTUATORS = SINGLE_PUNCTUATORS | TRIPLE_PUNCTUATORS | DOUBLE_PUNCTUATORS | FALLBACK_PUNCTUATORS

# Character classes
WHITESPACE = " "
LINE_TERMINATOR = "\n"
COMMENT_START = "#"
CHARACTER_QUOTE = "'"
STRING_QUOTE = '"'
