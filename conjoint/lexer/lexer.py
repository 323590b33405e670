"""
Conjoint Lexer - turns source text into tokens, one at a time.

The lexer is a cursor over an immutable buffer. Each call to next_token()
skips spaces and line feeds, classifies the next character and runs the
matching scan routine. Nothing is ever rewound.

xwest
"""

import logging
from typing import Iterator, List, Optional, Tuple, Union

from ..source import SourceFile, read_source_file
from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, LITERAL_WORDS,
    SINGLE_PUNCTUATORS, TRIPLE_PUNCTUATORS, DOUBLE_PUNCTUATORS, FALLBACK_PUNCTUATORS,
    WHITESPACE, LINE_TERMINATOR, COMMENT_START, CHARACTER_QUOTE, STRING_QUOTE
)
from .errors import (
    create_invalid_character_error, create_unterminated_string_error,
    create_malformed_character_error, create_unexpected_character_error
)

logger = logging.getLogger(__name__)


def is_alpha(char: str) -> bool:
    """ASCII letters only; other scripts are not identifier characters."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_identifier_start(char: str) -> bool:
    return is_alpha(char)


def is_identifier_part(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Lexer:
    """
    Conjoint lexical analyzer.

    Produces tokens on demand. The cursor state is `pos`, `line` and
    `line_start`; line and column numbers are zero-based.
    """

    def __init__(self, source: Union[str, SourceFile], filename: Optional[str] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source text, or a SourceFile loaded from disk
            filename: Name of source file for error reporting
        """
        if isinstance(source, SourceFile):
            self.source = source.content
            self.filename = filename or source.path
        else:
            self.source = source
            self.filename = filename or "<unknown>"
        self.pos = 0
        self.line = 0
        self.line_start = 0

    def next_token(self) -> Token:
        """
        Read the next token and advance the cursor past it.

        Returns END_OF_FILE (with empty text) once the input is exhausted,
        as many times as it is asked.

        Raises:
            LexerError: If the input at the cursor is not a valid token
        """
        start = self._location()
        self._skip_whitespace()
        location = self._location()

        if self._is_at_end():
            return Token(TokenType.END_OF_FILE, "", start, location, location)

        current_char = self.source[self.pos]

        if current_char == COMMENT_START:
            token_type, text = self._scan_comment()
        elif is_identifier_start(current_char):
            token_type, text = self._scan_identifier_or_keyword()
        elif is_digit(current_char):
            token_type, text = self._scan_numeric_literal()
        elif current_char == CHARACTER_QUOTE:
            token_type, text = self._scan_character_literal(location)
        elif current_char == STRING_QUOTE:
            token_type, text = self._scan_string_literal(location)
        else:
            token_type, text = self._scan_punctuator(location)

        return Token(token_type, text, start, self._location(), location)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the input.

        Returns:
            List of tokens including the END_OF_FILE token
        """
        tokens = list(self)
        logger.debug("Tokenized %s into %d tokens", self.filename, len(tokens))
        return tokens

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.END_OF_FILE:
                return

    # Scan routines. Each one starts on the character that selected it.

    def _scan_comment(self) -> Tuple[TokenType, str]:
        self._expect_char(COMMENT_START, "'#'")
        start_pos = self.pos

        while not self._is_at_end() and self.source[self.pos] != LINE_TERMINATOR:
            self._advance()

        return TokenType.COMMENT, self.source[start_pos:self.pos]

    def _scan_identifier_or_keyword(self) -> Tuple[TokenType, str]:
        start_pos = self.pos
        current_char = self._peek()
        if current_char is None or not is_identifier_start(current_char):
            raise create_unexpected_character_error("identifier start", current_char, self._location())
        self._advance()

        while not self._is_at_end() and is_identifier_part(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        # Classification happens once the whole word is known
        if lexeme in KEYWORDS:
            token_type = TokenType.KEYWORD
        else:
            token_type = LITERAL_WORDS.get(lexeme, TokenType.IDENTIFIER)

        return token_type, lexeme

    def _scan_numeric_literal(self) -> Tuple[TokenType, str]:
        start_pos = self.pos
        current_char = self._peek()
        if current_char is None or not is_digit(current_char):
            raise create_unexpected_character_error("digit", current_char, self._location())

        while not self._is_at_end() and is_digit(self.source[self.pos]):
            self._advance()

        return TokenType.NUMERIC_LITERAL, self.source[start_pos:self.pos]

    def _scan_character_literal(self, location: SourceLocation) -> Tuple[TokenType, str]:
        self._expect_char(CHARACTER_QUOTE, "opening \"'\"")

        char_value = self._peek()
        if char_value is None:
            raise create_malformed_character_error("unexpected end of input", location)
        if char_value == CHARACTER_QUOTE:
            raise create_malformed_character_error("empty character literal", location)
        self._advance()

        if self._peek() != CHARACTER_QUOTE:
            raise create_malformed_character_error("expected closing \"'\"", location)
        self._advance()

        return TokenType.CHARACTER_LITERAL, char_value

    def _scan_string_literal(self, location: SourceLocation) -> Tuple[TokenType, str]:
        self._expect_char(STRING_QUOTE, "opening '\"'")
        start_pos = self.pos

        # Line feeds are part of the literal; _advance keeps line numbers right
        while not self._is_at_end() and self.source[self.pos] != STRING_QUOTE:
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(location)

        value = self.source[start_pos:self.pos]
        self._advance()  # Skip closing quote

        return TokenType.STRING_LITERAL, value

    def _scan_punctuator(self, location: SourceLocation) -> Tuple[TokenType, str]:
        current_char = self.source[self.pos]

        if current_char in SINGLE_PUNCTUATORS:
            self._advance()
            return TokenType.PUNCTUATOR, current_char

        # Longer candidates first so ">>>" never splits into ">>" and ">"
        for op_len, candidates in ((3, TRIPLE_PUNCTUATORS), (2, DOUBLE_PUNCTUATORS)):
            if self.pos + op_len <= len(self.source):
                potential_op = self.source[self.pos:self.pos + op_len]
                if potential_op in candidates:
                    self._advance_by(op_len)
                    return TokenType.PUNCTUATOR, potential_op

        if current_char in FALLBACK_PUNCTUATORS:
            self._advance()
            return TokenType.PUNCTUATOR, current_char

        raise create_invalid_character_error(current_char, location)

    # Cursor helpers

    def _skip_whitespace(self):
        """Skip spaces and line feeds."""
        while not self._is_at_end() and self.source[self.pos] in (WHITESPACE, LINE_TERMINATOR):
            self._advance()

    def _expect_char(self, expected: str, description: str):
        current_char = self._peek()
        if current_char != expected:
            raise create_unexpected_character_error(description, current_char, self._location())
        self._advance()

    def _advance(self):
        """Advance position by one character, updating line bookkeeping."""
        if self.pos < len(self.source):
            char = self.source[self.pos]
            self.pos += 1
            if char == LINE_TERMINATOR:
                self.line += 1
                self.line_start = self.pos

    def _advance_by(self, count: int):
        for _ in range(count):
            self._advance()

    def _peek(self) -> Optional[str]:
        """Return the character at the cursor, or None at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.pos - self.line_start, self.pos)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with END_OF_FILE

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str, encoding: str = "utf-8") -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        SourceFileError: If the file cannot be read
    """
    return Lexer(read_source_file(filepath, encoding)).tokenize()
