"""
Debug rendering of tokens and AST nodes.

Two flavours: the plain text layout used by the command line dump, and
JSON-ready dictionaries for tools.

Author: xwest
"""

from typing import Any, Dict, List

from .lexer.tokens import Token, SourceLocation
from .parser.ast_nodes import ASTNode, ASTVisitor, Child, ChildKind

INDENT = "    "


def format_token(token: Token) -> str:
    """Render a token as TYPE / VALUE / START / END lines."""
    return "\n".join([
        f"TYPE: {token.type.display_name}",
        f"VALUE: `{token.text}`",
        f"START: {_format_position(token.start)}",
        f"END: {_format_position(token.end)}",
    ])


def _format_position(location: SourceLocation) -> str:
    return f"p {location.offset} l {location.line} c {location.column}"


def format_value(child: Child) -> str:
    """Render a leaf child value."""
    if child.kind == ChildKind.STRING:
        return f'"{child.value}"'
    if child.kind == ChildKind.NUMBER:
        return f"{child.value:.6f}"
    if child.kind == ChildKind.CHARACTER:
        return f"'{child.value}'"
    if child.kind == ChildKind.BOOLEAN:
        return "true" if child.value else "false"
    if child.kind == ChildKind.NULL:
        return "null"
    raise TypeError(f"child {child.name!r} is not a leaf value")


class ASTPrinter(ASTVisitor):
    """
    Renders a tree depth-first.

    Each node prints its TYPE line and then its children; nested nodes are
    indented two levels deeper than their parent.
    """

    def __init__(self, level: int = 0):
        self.level = level

    def visit(self, node: ASTNode) -> str:
        indent = INDENT * self.level
        lines = [f"{indent}TYPE: {node.kind}"]

        if not node.children:
            lines.append(f"{indent}CHILDRENS: ~")
            return "\n".join(lines)

        lines.append(f"{indent}CHILDRENS:")
        for child in node.children:
            if child.kind == ChildKind.NODE:
                lines.append(f"{indent}{INDENT}{child.name}:")
                lines.append(child.value.accept(ASTPrinter(self.level + 2)))
            else:
                lines.append(f"{indent}{INDENT}{child.name}: {format_value(child)}")

        return "\n".join(lines)


def format_ast(node: ASTNode, level: int = 0) -> str:
    """Render a node and its subtree as indented text."""
    return node.accept(ASTPrinter(level))


def location_to_dict(location: SourceLocation) -> Dict[str, int]:
    return {"offset": location.offset, "line": location.line, "column": location.column}


def token_to_dict(token: Token) -> Dict[str, Any]:
    return {
        "kind": token.type.display_name,
        "text": token.text,
        "start": location_to_dict(token.start),
        "end": location_to_dict(token.end),
    }


def ast_to_dict(node: ASTNode) -> Dict[str, Any]:
    """
    Convert a tree to plain dictionaries.

    Numbers are emitted as strings so that no precision is lost when the
    result is serialized to JSON.
    """
    children: List[Dict[str, Any]] = []
    for child in node.children:
        if child.kind == ChildKind.NODE:
            value = ast_to_dict(child.value)
        elif child.kind == ChildKind.NUMBER:
            value = str(child.value)
        else:
            value = child.value
        children.append({"name": child.name, "kind": child.kind.value, "value": value})

    return {"kind": node.kind, "children": children}
