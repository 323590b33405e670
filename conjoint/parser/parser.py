"""
Conjoint Recursive Descent Parser

Consumes tokens from a Lexer through a single lookahead slot and builds
the AST bottom-up. There is no backtracking: every rule consumes exactly
the tokens of its production before returning, and the first mismatch
raises a ParseError.

Author: xwest
"""

import logging
from decimal import Decimal
from typing import Optional, Union

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from ..source import read_source_file
from .ast_nodes import (
    ASTNode, ChildKind, SourceSpan, Program, ImportDeclaration,
    VariableDeclaration, Identifier, Literal, Comment
)
from .errors import (
    create_unexpected_token_error, create_invalid_expression_error,
    create_unexpected_element_error
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Conjoint parser.

    Holds exactly one lookahead token (`current_token`), fetched from the
    lexer when the parser is created.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser over a lexer.

        Args:
            lexer: Token source; tokens are pulled one at a time

        Raises:
            LexerError: If the first token is malformed
        """
        self.lexer = lexer
        self.current_token: Optional[Token] = None
        self.previous_token: Optional[Token] = None
        self._advance()

    def parse(self) -> Program:
        """
        Parse the whole token stream into a Program.

        Raises:
            ParseError: On the first syntax error
            LexerError: On the first lexical error
        """
        start_token = self.current_token
        body = []

        while not self._check(TokenType.END_OF_FILE):
            body.append(self._parse_program_element())

        program = Program(body, SourceSpan(start_token.location, self.current_token.end))
        logger.debug("Parsed %d program elements from %s", len(body), self.lexer.filename)
        return program

    def _parse_program_element(self) -> ASTNode:
        """Dispatch on the lookahead: comment, import or let."""
        token = self.current_token

        if token.type == TokenType.COMMENT:
            return self._parse_comment()
        if token.is_keyword("import"):
            return self._parse_import_declaration()
        if token.is_keyword("let"):
            return self._parse_variable_declaration()

        raise create_unexpected_element_error(token)

    def _parse_comment(self) -> Comment:
        token = self._consume(TokenType.COMMENT)
        return Comment(token.text, self._span_from(token))

    def _parse_import_declaration(self) -> ImportDeclaration:
        start_token = self._expect_keyword("import")
        self._expect_punctuator("{")

        specifiers = [self._parse_identifier()]
        while self._match_punctuator(","):
            self._advance()
            specifiers.append(self._parse_identifier())

        self._expect_punctuator("}")
        self._expect_keyword("from")

        if not self._check(TokenType.STRING_LITERAL):
            raise create_unexpected_token_error(TokenType.STRING_LITERAL, self.current_token)
        source = self._parse_literal()

        self._expect_punctuator(";")

        return ImportDeclaration(specifiers, source, self._span_from(start_token))

    def _parse_variable_declaration(self) -> VariableDeclaration:
        start_token = self._expect_keyword("let")

        var_id = self._parse_identifier()
        self._expect_punctuator(":")
        var_type = self._parse_identifier()

        optional = self._match_punctuator("?")
        if optional:
            self._advance()

        self._expect_punctuator("=")
        init = self._parse_primary_expression()
        self._expect_punctuator(";")

        return VariableDeclaration(var_id, var_type, optional, init, self._span_from(start_token))

    def _parse_primary_expression(self) -> Union[Identifier, Literal]:
        if self._check(TokenType.IDENTIFIER):
            return self._parse_identifier()
        if self.current_token.is_literal:
            return self._parse_literal()

        raise create_invalid_expression_error(self.current_token)

    def _parse_identifier(self) -> Identifier:
        token = self._consume(TokenType.IDENTIFIER)
        return Identifier(token.text, self._span_from(token))

    def _parse_literal(self) -> Literal:
        token = self.current_token

        if token.type == TokenType.STRING_LITERAL:
            kind, value = ChildKind.STRING, token.text
        elif token.type == TokenType.NUMERIC_LITERAL:
            kind, value = ChildKind.NUMBER, Decimal(token.text)
        elif token.type == TokenType.CHARACTER_LITERAL:
            kind, value = ChildKind.CHARACTER, token.text[0]
        elif token.type == TokenType.BOOLEAN_LITERAL:
            kind, value = ChildKind.BOOLEAN, token.text == "true"
        elif token.type == TokenType.NULL_LITERAL:
            kind, value = ChildKind.NULL, None
        else:
            raise create_invalid_expression_error(token)

        self._advance()
        return Literal(kind, value, self._span_from(token))

    # Token primitives

    def _advance(self) -> Optional[Token]:
        """Replace the lookahead with the next token; return the consumed one."""
        self.previous_token = self.current_token
        self.current_token = self.lexer.next_token()
        return self.previous_token

    def _check(self, token_type: TokenType) -> bool:
        """Check if the lookahead has the given type without consuming."""
        return self.current_token.type == token_type

    def _consume(self, token_type: TokenType) -> Token:
        """Consume a token of the expected type or raise."""
        if self._check(token_type):
            return self._advance()
        raise create_unexpected_token_error(token_type, self.current_token)

    def _expect_keyword(self, keyword: str) -> Token:
        if self.current_token.is_keyword(keyword):
            return self._advance()
        raise create_unexpected_token_error(f"'{keyword}'", self.current_token)

    def _expect_punctuator(self, punctuator: str) -> Token:
        if self._match_punctuator(punctuator):
            return self._advance()
        raise create_unexpected_token_error(f"'{punctuator}'", self.current_token)

    def _match_punctuator(self, punctuator: str) -> bool:
        return self.current_token.is_punctuator(punctuator)

    def _span_from(self, start_token: Token) -> SourceSpan:
        """Span from the first token of a construct to the last consumed one."""
        return SourceSpan(start_token.location, self.previous_token.end)


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    return Parser(Lexer(source, filename)).parse()


def parse_file(filepath: str, encoding: str = "utf-8") -> Program:
    """
    Convenience function to parse a source file.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
        SourceFileError: If the file cannot be read
    """
    return Parser(Lexer(read_source_file(filepath, encoding))).parse()
