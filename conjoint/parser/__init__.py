"""
Conjoint Parser Package

Implements a single-lookahead recursive descent parser for the Conjoint
language. Produces a tree of tagged nodes whose children are named,
typed values.

Key Features:
- Import declarations and typed variable declarations
- Comments kept as program elements
- Source spans on every node
- Stops at the first syntax error with a ParseError

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Child, ChildKind, SourceSpan,
    Program, ImportDeclaration, VariableDeclaration, Identifier, Literal, Comment,
    walk, walk_post_order
)
from .parser import Parser, parse_string, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",
    "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Child", "ChildKind", "SourceSpan",
    "Program", "ImportDeclaration", "VariableDeclaration",
    "Identifier", "Literal", "Comment",
    "walk", "walk_post_order",

    # Error handling
    "ParseError",
]
