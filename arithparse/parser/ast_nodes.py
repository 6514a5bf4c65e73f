"""
Abstract Syntax Tree node definitions for arithparse.

Defines the node types produced by the parser. Nodes are immutable,
compare structurally and support the visitor pattern.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from ..lexer.tokens import SourceLocation


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Literals
    NUMBER = "Number"

    # Unary operations
    NEGATIVE = "Negative"

    # Binary operations
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    POWER = "Power"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit_number(self, node: 'Number') -> Any:
        pass

    @abstractmethod
    def visit_negative(self, node: 'Negative') -> Any:
        pass

    @abstractmethod
    def visit_add(self, node: 'Add') -> Any:
        pass

    @abstractmethod
    def visit_subtract(self, node: 'Subtract') -> Any:
        pass

    @abstractmethod
    def visit_multiply(self, node: 'Multiply') -> Any:
        pass

    @abstractmethod
    def visit_divide(self, node: 'Divide') -> Any:
        pass

    @abstractmethod
    def visit_power(self, node: 'Power') -> Any:
        pass


class Node(ABC):
    """
    Base class for all AST nodes.

    Every composite node owns its children exclusively; the tree is built
    bottom-up by the parser and never modified afterwards. Equality and
    hashing are structural and ignore source spans.
    """
    node_type: ClassVar[ASTNodeType]

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Node']:
        """Get all child nodes."""
        pass

    def __str__(self) -> str:
        if self.span is None:
            return self.node_type.value
        return f"{self.node_type.value}@{self.span}"


# ============================================================================
# Literals
# ============================================================================

@dataclass(frozen=True)
class Number(Node):
    """Number literal."""
    value: float
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.NUMBER

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number(self)

    def children(self) -> List[Node]:
        return []


# ============================================================================
# Unary operations
# ============================================================================

@dataclass(frozen=True)
class Negative(Node):
    """Unary negation."""
    operand: Node
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.NEGATIVE

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_negative(self)

    def children(self) -> List[Node]:
        return [self.operand]


# ============================================================================
# Binary operations
# ============================================================================

@dataclass(frozen=True)
class BinaryOp(Node):
    """Base class for binary operations; subclasses fix the operator."""
    left: Node
    right: Node
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    operator: ClassVar[str]

    def children(self) -> List[Node]:
        return [self.left, self.right]


class Add(BinaryOp):
    node_type = ASTNodeType.ADD
    operator = "+"

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_add(self)


class Subtract(BinaryOp):
    node_type = ASTNodeType.SUBTRACT
    operator = "-"

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_subtract(self)


class Multiply(BinaryOp):
    node_type = ASTNodeType.MULTIPLY
    operator = "*"

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_multiply(self)


class Divide(BinaryOp):
    node_type = ASTNodeType.DIVIDE
    operator = "/"

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_divide(self)


class Power(BinaryOp):
    """Exponentiation; `left` is the base and `right` the exponent."""
    node_type = ASTNodeType.POWER
    operator = "^"

    @property
    def base(self) -> Node:
        return self.left

    @property
    def exponent(self) -> Node:
        return self.right

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_power(self)
