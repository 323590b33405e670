"""
Abstract Syntax Tree node definitions for Conjoint.

Every node carries a string tag and an ordered list of named children.
A child holds exactly one kind of value: another node, a string, a
number, a character, a boolean or nothing at all (null). The concrete
node classes attach their children under fixed relation names.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator, List, Optional, Union

from ..lexer.tokens import SourceLocation


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    PROGRAM = "Program"
    IMPORT_DECLARATION = "ImportDeclaration"
    VARIABLE_DECLARATION = "VariableDeclaration"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    COMMENT = "Comment"


class ChildKind(Enum):
    """The closed set of value kinds a child may hold."""

    NODE = "node"
    STRING = "string"
    NUMBER = "number"
    CHARACTER = "character"
    BOOLEAN = "boolean"
    NULL = "null"


ChildValue = Union["ASTNode", str, Decimal, bool, None]


@dataclass
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        return f"{self.start}-{self.end.line + 1}:{self.end.column + 1}"


@dataclass(frozen=True)
class Child:
    """A named edge from a parent node to a value."""
    name: str
    kind: ChildKind
    value: ChildValue = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("child name must not be empty")
        _check_value(self.kind, self.value)

    @property
    def node(self) -> "ASTNode":
        if self.kind != ChildKind.NODE:
            raise TypeError(f"child {self.name!r} holds a {self.kind.value}, not a node")
        return self.value


def _check_value(kind: ChildKind, value: Any):
    if kind == ChildKind.NODE:
        ok = isinstance(value, ASTNode)
    elif kind == ChildKind.STRING:
        ok = isinstance(value, str)
    elif kind == ChildKind.NUMBER:
        ok = isinstance(value, Decimal)
    elif kind == ChildKind.CHARACTER:
        ok = isinstance(value, str) and len(value) == 1
    elif kind == ChildKind.BOOLEAN:
        ok = isinstance(value, bool)
    else:
        ok = value is None
    if not ok:
        raise TypeError(f"{value!r} is not a valid {kind.value} child value")


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode:
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, span: Optional[SourceSpan] = None):
        self.node_type = node_type
        self.span = span
        self.parent: Optional['ASTNode'] = None
        self.children: List[Child] = []

    @property
    def kind(self) -> str:
        """The node's string tag, e.g. "VariableDeclaration"."""
        return self.node_type.value

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    # Attaching children

    def add_child(self, child: Child) -> Child:
        self.children.append(child)
        if child.kind == ChildKind.NODE:
            child.value.set_parent(self)
        return child

    def add_node(self, name: str, node: 'ASTNode') -> Child:
        return self.add_child(Child(name, ChildKind.NODE, node))

    def add_string(self, name: str, value: str) -> Child:
        return self.add_child(Child(name, ChildKind.STRING, value))

    def add_number(self, name: str, value: Decimal) -> Child:
        return self.add_child(Child(name, ChildKind.NUMBER, value))

    def add_character(self, name: str, value: str) -> Child:
        return self.add_child(Child(name, ChildKind.CHARACTER, value))

    def add_boolean(self, name: str, value: bool) -> Child:
        return self.add_child(Child(name, ChildKind.BOOLEAN, value))

    def add_null(self, name: str) -> Child:
        return self.add_child(Child(name, ChildKind.NULL))

    def set_parent(self, parent: 'ASTNode'):
        """Set the parent node."""
        self.parent = parent

    # Lookup

    def get(self, name: str) -> Child:
        """Return the first child with the given relation name."""
        for child in self.children:
            if child.name == name:
                return child
        raise KeyError(f"{self.kind} has no child named {name!r}")

    def get_all(self, name: str) -> List[Child]:
        """Return every child with the given relation name, in order."""
        return [child for child in self.children if child.name == name]

    def child_nodes(self) -> List['ASTNode']:
        """Get all node-valued children."""
        return [child.value for child in self.children if child.kind == ChildKind.NODE]

    def __str__(self) -> str:
        if self.span is None:
            return self.kind
        return f"{self.kind}@{self.span}"

    def __repr__(self) -> str:
        names = ", ".join(child.name for child in self.children)
        return f"{self.__class__.__name__}({names})"


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield the node and all its descendants, parents first."""
    yield node
    for child in node.child_nodes():
        yield from walk(child)


def walk_post_order(node: ASTNode) -> Iterator[ASTNode]:
    """Yield all descendants before the node itself (teardown order)."""
    for child in node.child_nodes():
        yield from walk_post_order(child)
    yield node


# ============================================================================
# Leaves
# ============================================================================

class Identifier(ASTNode):
    """Identifier reference: a variable, type or import name."""

    def __init__(self, name: str, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.IDENTIFIER, span)
        self.add_string("value", name)

    @property
    def name(self) -> str:
        return self.get("value").value


class Literal(ASTNode):
    """
    Literal value.

    The single `value` child carries the literal's kind: STRING, NUMBER,
    CHARACTER, BOOLEAN or NULL.
    """

    def __init__(self, kind: ChildKind, value: ChildValue = None,
                 span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.LITERAL, span)
        if kind == ChildKind.NODE:
            raise TypeError("a literal cannot hold a node")
        self.add_child(Child("value", kind, value))

    @property
    def value_kind(self) -> ChildKind:
        return self.get("value").kind

    @property
    def value(self) -> ChildValue:
        return self.get("value").value


class Comment(ASTNode):
    """Line comment; content excludes the leading '#'."""

    def __init__(self, content: str, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.COMMENT, span)
        self.add_string("content", content)

    @property
    def content(self) -> str:
        return self.get("content").value


# ============================================================================
# Declarations
# ============================================================================

class ImportDeclaration(ASTNode):
    """import { a, b } from "source";"""

    def __init__(self, specifiers: List[Identifier], source: Literal,
                 span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.IMPORT_DECLARATION, span)
        for specifier in specifiers:
            self.add_node("specifier", specifier)
        self.add_node("source", source)

    @property
    def specifiers(self) -> List[Identifier]:
        return [child.value for child in self.get_all("specifier")]

    @property
    def source(self) -> Literal:
        return self.get("source").value


class VariableDeclaration(ASTNode):
    """let id : Type? = init;"""

    def __init__(self, id: Identifier, type: Identifier, optional: bool,
                 init: Union[Identifier, Literal], span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.VARIABLE_DECLARATION, span)
        self.add_node("id", id)
        self.add_node("type", type)
        self.add_boolean("optional", optional)
        self.add_node("init", init)

    @property
    def id(self) -> Identifier:
        return self.get("id").value

    @property
    def type(self) -> Identifier:
        return self.get("type").value

    @property
    def optional(self) -> bool:
        return self.get("optional").value

    @property
    def init(self) -> Union[Identifier, Literal]:
        return self.get("init").value


# ============================================================================
# Top-level
# ============================================================================

class Program(ASTNode):
    """Root AST node; every program element is a `body` child."""

    def __init__(self, body: List[ASTNode], span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.PROGRAM, span)
        for element in body:
            self.add_node("body", element)

    @property
    def body(self) -> List[ASTNode]:
        return [child.value for child in self.get_all("body")]
